from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from staffgate.identity.models import Identity
from staffgate.permissions.administration import (
    deactivate_grants,
    grant_permissions,
    parse_module_grants,
    read_permissions,
)
from staffgate.permissions.exceptions import (
    AgentNotFound,
    InvalidActionKind,
    InvalidArgument,
    Unauthorized,
)
from staffgate.permissions.provider import InMemoryGrantStore
from staffgate.permissions.resolver import resolve


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
LATER = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)

CLINIC_OWNER = Identity(identity_id="clinic-owner", role="clinic", clinic_id="clinic-1")
OTHER_CLINIC = Identity(identity_id="clinic-other", role="clinic", clinic_id="clinic-2")
AGENT = Identity(
    identity_id="agent-1",
    role="agent",
    created_by="clinic-owner",
    clinic_id="clinic-1",
)

LEAD_READ = [{"module": "lead", "actions": {"read": True}}]


def test_grant_then_read_back() -> None:
    store = InMemoryGrantStore()

    written = grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=NOW)
    read = read_permissions(CLINIC_OWNER, AGENT, store)

    assert read == written
    assert written.granted_by == "clinic-owner"
    assert written.last_modified == NOW
    assert written.is_active is True
    assert resolve(read, "clinic_lead", "read") is True


def test_read_without_grants_returns_none() -> None:
    assert read_permissions(CLINIC_OWNER, AGENT, InMemoryGrantStore()) is None


def test_write_replaces_modules_entirely() -> None:
    store = InMemoryGrantStore()
    grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=NOW)

    grant_permissions(
        CLINIC_OWNER,
        AGENT,
        [{"module": "marketing", "actions": {"all": True}}],
        store,
        now=LATER,
    )
    grant_set = store.load_grants("agent-1")

    assert [module.module_key for module in grant_set.modules] == ["marketing"]
    assert resolve(grant_set, "lead", "read") is False
    assert grant_set.last_modified == LATER


@pytest.mark.parametrize(
    "payload",
    [
        [{"module": "lead", "actions": {"read": True}}, {"actions": {}}],
        [{"module": "lead", "actions": {"archive": True}}],
        [{"module": "lead", "actions": {}, "subModules": {}}],
        None,
        "lead",
    ],
)
def test_invalid_payload_leaves_existing_grants_untouched(payload) -> None:
    store = InMemoryGrantStore()
    original = grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=NOW)

    with pytest.raises(InvalidArgument):
        grant_permissions(CLINIC_OWNER, AGENT, payload, store, now=LATER)

    assert store.load_grants("agent-1") == original


def test_unknown_action_surfaces_as_invalid_action_kind() -> None:
    with pytest.raises(InvalidActionKind):
        parse_module_grants([{"module": "lead", "actions": {"archive": True}}])


def test_unauthorized_issuer_cannot_write() -> None:
    store = InMemoryGrantStore()

    with pytest.raises(Unauthorized):
        grant_permissions(OTHER_CLINIC, AGENT, LEAD_READ, store, now=NOW)
    assert store.load_grants("agent-1") is None


def test_non_agent_target_is_not_found() -> None:
    with pytest.raises(AgentNotFound):
        grant_permissions(CLINIC_OWNER, OTHER_CLINIC, LEAD_READ, InMemoryGrantStore())


def test_deactivate_then_regrant_reactivates() -> None:
    store = InMemoryGrantStore()
    grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=NOW)

    deactivated = deactivate_grants(CLINIC_OWNER, AGENT, store, now=LATER)
    assert deactivated.is_active is False
    assert deactivated.modules == store.load_grants("agent-1").modules
    assert resolve(deactivated, "lead", "read") is False

    reactivated = grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=LATER)
    assert reactivated.is_active is True
    assert resolve(reactivated, "lead", "read") is True


def test_deactivate_without_grants_returns_none() -> None:
    assert deactivate_grants(CLINIC_OWNER, AGENT, InMemoryGrantStore()) is None


def test_concurrent_writes_for_one_agent_leave_one_complete_payload() -> None:
    store = InMemoryGrantStore()
    writers = 16
    barrier = threading.Barrier(writers)
    payloads = [
        [
            {"module": f"module_{index}", "actions": {"read": True}},
            {"module": f"module_{index}_reports", "actions": {"export": True}},
        ]
        for index in range(writers)
    ]

    def write(payload):
        barrier.wait()
        return grant_permissions(CLINIC_OWNER, AGENT, payload, store, now=NOW)

    with ThreadPoolExecutor(max_workers=writers) as pool:
        written = list(pool.map(write, payloads))

    final = store.load_grants("agent-1")
    assert final.is_active is True
    assert final.modules in [parse_module_grants(payload) for payload in payloads]
    assert final in written
    assert all(len(grant_set.modules) == 2 for grant_set in written)


def test_concurrent_deactivation_never_mixes_module_lists() -> None:
    store = InMemoryGrantStore()
    grant_permissions(CLINIC_OWNER, AGENT, LEAD_READ, store, now=NOW)
    writers = 12
    barrier = threading.Barrier(writers)
    payloads = [[{"module": f"module_{index}", "actions": {"read": True}}] for index in range(writers)]
    allowed = [parse_module_grants(LEAD_READ)] + [parse_module_grants(payload) for payload in payloads]

    def write(index):
        barrier.wait()
        if index % 3 == 0:
            return deactivate_grants(CLINIC_OWNER, AGENT, store, now=LATER)
        return grant_permissions(CLINIC_OWNER, AGENT, payloads[index], store, now=LATER)

    with ThreadPoolExecutor(max_workers=writers) as pool:
        results = list(pool.map(write, range(writers)))

    assert all(result.modules in allowed for result in results)
    assert store.load_grants("agent-1").modules in allowed
