from __future__ import annotations

import pytest

from staffgate.navigation.paths import convert_path_to_staff, format_slug_segment


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/clinic/lead/create-lead", "/staff/clinic-lead-create-lead"),
        ("/clinic/clinic-dashboard", "/staff/clinic-clinic-dashboard"),
        ("/doctor/BlogForm", "/staff/doctor-BlogForm"),
        ("/admin/create-staff", "/staff/create-staff"),
        ("/agent/patient-registration", "/staff/patient-registration"),
        ("/staff/dashboard", "/staff/dashboard"),
        ("staff/dashboard", "/staff/dashboard"),
        ("//clinic//marketing//sms-marketing", "/staff/clinic-marketing-sms-marketing"),
        ("/reports/daily", "/staff/reports-daily"),
    ],
)
def test_convert_path_to_staff(path: str, expected: str) -> None:
    assert convert_path_to_staff(path) == expected


@pytest.mark.parametrize("path", ["", None])
def test_empty_paths_pass_through(path) -> None:
    assert convert_path_to_staff(path) == path


def test_format_slug_segment_collapses_separators() -> None:
    assert format_slug_segment("lead//assign--lead/") == "lead-assign-lead"
