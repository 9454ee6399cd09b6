from __future__ import annotations

from datetime import datetime, timezone

import pytest

from staffgate.permissions.db_provider import DbGrantStore
from staffgate.permissions.models import ActionSet, ModuleGrant, SubModuleGrant
from staffgate.permissions.resolver import resolve
from staffgate.permissions_store.models import AgentPermission

pytestmark = pytest.mark.django_db(transaction=True)


NOW = datetime(2026, 4, 1, 8, 0, tzinfo=timezone.utc)
LATER = datetime(2026, 4, 2, 8, 0, tzinfo=timezone.utc)

STAFF_MANAGEMENT = ModuleGrant(
    module_key="clinic_staff_management",
    actions=ActionSet(read=True),
    sub_modules=(
        SubModuleGrant(name="Create Services", actions=ActionSet(create=True)),
    ),
    name="Staff Management",
)


def test_load_unknown_agent_returns_none() -> None:
    store = DbGrantStore()

    assert store.load_grants("nobody") is None
    assert store.load_grants("") is None


def test_save_and_load_round_trip() -> None:
    store = DbGrantStore()

    saved = store.save_grants("agent-1", (STAFF_MANAGEMENT,), "clinic-owner", NOW)
    loaded = store.load_grants("agent-1")

    assert saved.modules == loaded.modules
    assert loaded.granted_by == "clinic-owner"
    assert loaded.is_active is True
    assert loaded.last_modified == NOW
    assert resolve(loaded, "staff_management", "create", "create services") is True


def test_save_overwrites_single_row_per_agent() -> None:
    store = DbGrantStore()
    store.save_grants("agent-1", (STAFF_MANAGEMENT,), "clinic-owner", NOW)

    marketing = ModuleGrant(module_key="marketing", actions=ActionSet(all=True))
    store.save_grants("agent-1", (marketing,), "doctor-1", LATER)

    assert AgentPermission.objects.filter(agent_id="agent-1").count() == 1
    loaded = store.load_grants("agent-1")
    assert loaded.modules == (marketing,)
    assert loaded.granted_by == "doctor-1"
    assert loaded.last_modified == LATER


def test_set_active_toggles_without_touching_modules() -> None:
    store = DbGrantStore()
    store.save_grants("agent-1", (STAFF_MANAGEMENT,), "clinic-owner", NOW)

    deactivated = store.set_active("agent-1", False, LATER)

    assert deactivated.is_active is False
    assert deactivated.modules == (STAFF_MANAGEMENT,)
    assert deactivated.last_modified == LATER
    assert resolve(store.load_grants("agent-1"), "staff_management", "read") is False

    store.save_grants("agent-1", (STAFF_MANAGEMENT,), "clinic-owner", LATER)
    assert store.load_grants("agent-1").is_active is True


def test_set_active_for_unknown_agent_returns_none() -> None:
    assert DbGrantStore().set_active("nobody", False, NOW) is None


def test_malformed_stored_permissions_deny_everything() -> None:
    AgentPermission.objects.create(
        agent_id="agent-broken",
        permissions=[{"module": "lead", "actions": {"archive": True}}],
        granted_by="clinic-owner",
        last_modified=NOW,
    )

    assert DbGrantStore().load_grants("agent-broken") is None
