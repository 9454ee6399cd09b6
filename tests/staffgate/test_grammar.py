from __future__ import annotations

import pytest

from staffgate.permissions.constants import ActionKind
from staffgate.permissions.exceptions import InvalidActionKind, InvalidArgument
from staffgate.permissions.grammar import (
    keys_match,
    parse_action,
    prefix_module_key,
    slugify_module_key,
    strip_role_prefix,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("clinic_marketing", "marketing"),
        ("Doctor_Lead", "lead"),
        ("admin_staff_management", "staff_management"),
        ("agent_dashboard", "dashboard"),
        ("marketing", "marketing"),
        ("admin_clinic_x", "clinic_x"),
        ("  clinic_Jobs ", "jobs"),
        (None, ""),
        ("", ""),
    ],
)
def test_strip_role_prefix_removes_one_leading_role_token(key, expected) -> None:
    assert strip_role_prefix(key) == expected


@pytest.mark.parametrize(
    "key",
    ["clinic_marketing", "doctor_lead", "staff_management", "Admin_Dashboard"],
)
def test_key_matches_its_stripped_form(key: str) -> None:
    assert keys_match(key, strip_role_prefix(key))
    assert keys_match(strip_role_prefix(key), key)


def test_keys_with_different_role_prefixes_match() -> None:
    assert keys_match("clinic_x", "doctor_x")
    assert keys_match("admin_lead", "agent_lead")


def test_unrelated_keys_do_not_match() -> None:
    assert not keys_match("x", "y")
    assert not keys_match("clinic_lead", "clinic_marketing")
    assert not keys_match(None, "x")
    assert not keys_match("x", "")


def test_candidate_role_matches_keys_stored_under_a_nested_prefix() -> None:
    # stripping only removes one token, so these differ without a role
    assert not keys_match("clinic_x", "admin_clinic_x")
    assert keys_match("clinic_x", "admin_clinic_x", candidate_role="admin")
    assert keys_match("admin_clinic_x", "clinic_x", candidate_role="admin")
    assert not keys_match("clinic_x", "admin_clinic_x", candidate_role="doctor")


def test_bare_role_prefixes_do_not_match_each_other() -> None:
    assert not keys_match("clinic_", "admin_")
    assert not keys_match("clinic_", "doctor_")
    assert not keys_match("clinic_", "")


def test_prefix_module_key_replaces_existing_prefix() -> None:
    assert prefix_module_key("clinic", "dashboard") == "clinic_dashboard"
    assert prefix_module_key("doctor", "clinic_lead") == "doctor_lead"
    assert prefix_module_key("admin", "assignedLead") == "admin_assignedLead"


def test_slugify_module_key_from_label() -> None:
    assert slugify_module_key("Staff Management") == "staff_management"
    assert slugify_module_key("All users Review") == "all_users_review"
    assert slugify_module_key("  SMS / Wallets ") == "sms_wallets"


def test_parse_action_is_case_insensitive() -> None:
    assert parse_action(" READ ") is ActionKind.READ
    assert parse_action("approve") is ActionKind.APPROVE
    assert parse_action(ActionKind.ALL) is ActionKind.ALL


@pytest.mark.parametrize("action", ["fly", "", None, 3, "reads"])
def test_parse_action_rejects_unknown_kinds(action) -> None:
    with pytest.raises(InvalidActionKind):
        parse_action(action)


def test_invalid_action_kind_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_action("archive")
    assert issubclass(InvalidActionKind, InvalidArgument)
