from __future__ import annotations

import pytest

from staffgate.navigation.catalog import (
    InMemoryNavigationCatalog,
    build_seed_items,
    default_templates,
)
from staffgate.navigation.models import NavigationItem
from staffgate.navigation.templates import (
    ADMIN_NAVIGATION_TEMPLATES,
    CLINIC_NAVIGATION_TEMPLATES,
    DOCTOR_NAVIGATION_TEMPLATES,
)
from staffgate.permissions.exceptions import InvalidArgument


def test_seed_items_are_role_prefixed() -> None:
    items = build_seed_items("doctor", DOCTOR_NAVIGATION_TEMPLATES)

    assert all(item.module_key.startswith("doctor_") for item in items)
    assert all(item.role == "doctor" for item in items)
    assert items[0].module_key == "doctor_dashboard"


def test_seed_items_replace_prefix_and_slugify_missing_keys() -> None:
    items = build_seed_items(
        "doctor",
        (
            {"label": "Patient Claims", "path": "/doctor/patient-claims"},
            {"label": "Lead", "moduleKey": "clinic_lead", "order": 7},
        ),
    )

    assert items[0].module_key == "doctor_patient_claims"
    assert items[0].order == 1
    assert items[1].module_key == "doctor_lead"
    assert items[1].order == 7


def test_seed_items_carry_children_as_sub_modules() -> None:
    items = build_seed_items("admin", ADMIN_NAVIGATION_TEMPLATES)
    staff = next(item for item in items if item.module_key == "admin_staff_management")

    assert [sub.name for sub in staff.sub_modules][:2] == [
        "Create Staff",
        "Create Services",
    ]
    assert staff.path == ""


@pytest.mark.parametrize("role", ["agent", "staff", "doctorStaff", "nurse"])
def test_seeding_rejects_non_issuer_roles(role: str) -> None:
    with pytest.raises(InvalidArgument):
        build_seed_items(role, CLINIC_NAVIGATION_TEMPLATES)
    with pytest.raises(InvalidArgument):
        default_templates(role)


def test_in_memory_seed_counts_inserted_then_unchanged() -> None:
    catalog = InMemoryNavigationCatalog()

    first = catalog.seed_navigation("clinic")
    second = catalog.seed_navigation("clinic")

    assert first.to_dict() == {
        "role": "clinic",
        "inserted": len(CLINIC_NAVIGATION_TEMPLATES),
        "updated": 0,
        "totalTemplates": len(CLINIC_NAVIGATION_TEMPLATES),
    }
    assert (second.inserted, second.updated) == (0, 0)
    assert len(catalog.items_for_role("clinic")) == len(CLINIC_NAVIGATION_TEMPLATES)
    assert catalog.items_for_role("doctor") == tuple()


def test_in_memory_seed_counts_updates() -> None:
    catalog = InMemoryNavigationCatalog()
    catalog.seed_navigation("clinic")

    changed = [dict(template) for template in CLINIC_NAVIGATION_TEMPLATES]
    changed[0]["label"] = "Home"
    result = catalog.seed_navigation("clinic", changed)

    assert (result.inserted, result.updated) == (0, 1)
    assert catalog.items_for_role("clinic")[0].label == "Home"


def test_items_for_role_sorted_by_order_and_active_only() -> None:
    catalog = InMemoryNavigationCatalog(
        (
            NavigationItem(label="B", module_key="clinic_b", order=2, role="clinic"),
            NavigationItem(label="A", module_key="clinic_a", order=1, role="clinic"),
            NavigationItem(
                label="C",
                module_key="clinic_c",
                order=0,
                role="clinic",
                is_active=False,
            ),
        )
    )

    assert [item.label for item in catalog.items_for_role("clinic")] == ["A", "B"]


def test_catalog_items_need_a_role() -> None:
    with pytest.raises(ValueError):
        InMemoryNavigationCatalog((NavigationItem(label="A", module_key="a"),))
