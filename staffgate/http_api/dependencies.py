"""
Staffgate HTTP API - Dependencies
=================================
Injected stores/providers and the clock used by handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from staffgate.identity.provider import IdentityProvider
from staffgate.navigation.catalog import NavigationCatalog
from staffgate.permissions.provider import GrantStore


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class UtcClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HttpApiDependencies:
    identity_provider: IdentityProvider
    grant_store: GrantStore
    navigation_catalog: NavigationCatalog
    clock: Clock = field(default_factory=UtcClock)
