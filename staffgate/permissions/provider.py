"""
Staffgate Permissions - Grant Store Protocol and In-Memory Store
================================================================
"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Iterable, Protocol

from staffgate.permissions.models import ModuleGrant, PermissionGrantSet


class GrantStore(Protocol):
    def load_grants(self, agent_id: str) -> PermissionGrantSet | None:
        ...

    def save_grants(
        self,
        agent_id: str,
        modules: tuple[ModuleGrant, ...],
        issuer_id: str,
        now: datetime,
    ) -> PermissionGrantSet:
        ...

    def set_active(
        self,
        agent_id: str,
        is_active: bool,
        now: datetime,
    ) -> PermissionGrantSet | None:
        ...


class InMemoryGrantStore:
    """
    Deterministic in-memory store used for bootstrap/tests.

    Writes for the same agent are serialized through a per-agent lock;
    readers get immutable snapshots and never lock.
    """

    def __init__(self, grant_sets: Iterable[PermissionGrantSet] | None = None):
        self._grant_sets: dict[str, PermissionGrantSet] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

        for grant_set in grant_sets or ():
            if grant_set.agent_id in self._grant_sets:
                raise ValueError(f"Duplicate agent_id '{grant_set.agent_id}'.")
            self._grant_sets[grant_set.agent_id] = grant_set

    def _lock_for(self, agent_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(agent_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[agent_id] = lock
            return lock

    def load_grants(self, agent_id: str) -> PermissionGrantSet | None:
        return self._grant_sets.get(agent_id)

    def save_grants(
        self,
        agent_id: str,
        modules: tuple[ModuleGrant, ...],
        issuer_id: str,
        now: datetime,
    ) -> PermissionGrantSet:
        grant_set = PermissionGrantSet(
            agent_id=agent_id,
            modules=tuple(modules),
            granted_by=issuer_id,
            is_active=True,
            last_modified=now,
        )
        with self._lock_for(agent_id):
            self._grant_sets[agent_id] = grant_set
        return grant_set

    def set_active(
        self,
        agent_id: str,
        is_active: bool,
        now: datetime,
    ) -> PermissionGrantSet | None:
        with self._lock_for(agent_id):
            existing = self._grant_sets.get(agent_id)
            if existing is None:
                return None
            updated = PermissionGrantSet(
                agent_id=existing.agent_id,
                modules=existing.modules,
                granted_by=existing.granted_by,
                is_active=is_active,
                last_modified=now,
            )
            self._grant_sets[agent_id] = updated
            return updated
