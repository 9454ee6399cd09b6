"""
Staffgate Django Adapter Wiring
===============================
Constructs HttpApiDependencies for live runs.

The store backend comes from ``settings.STAFFGATE_STORE_BACKEND``:
- "django": ORM-backed identity, grant and navigation stores
- "memory": seeded in-memory stores for local smoke usage
"""

from __future__ import annotations

import threading

from django.conf import settings

from staffgate.http_api.dependencies import HttpApiDependencies, UtcClock
from staffgate.identity.models import Identity
from staffgate.identity.provider import InMemoryIdentityProvider
from staffgate.navigation.catalog import InMemoryNavigationCatalog, build_seed_items
from staffgate.navigation.templates import NAVIGATION_TEMPLATES_BY_ROLE
from staffgate.permissions.constants import (
    ROLE_ADMIN,
    ROLE_AGENT,
    ROLE_CLINIC,
    ROLE_DOCTOR_STAFF,
)
from staffgate.permissions.provider import InMemoryGrantStore

BACKEND_DJANGO = "django"
BACKEND_MEMORY = "memory"

DEV_ADMIN_TOKEN = "dev-admin-token"
DEV_CLINIC_TOKEN = "dev-clinic-token"
DEV_AGENT_TOKEN = "dev-agent-token"
DEV_DOCTOR_STAFF_TOKEN = "dev-doctor-staff-token"

DEV_CLINIC_ID = "dev-clinic"

_DEV_ADMIN_ID = "dev-admin-user"
_DEV_CLINIC_OWNER_ID = "dev-clinic-owner"
_DEV_AGENT_ID = "dev-agent"
_DEV_DOCTOR_STAFF_ID = "dev-doctor-staff"

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def _build_dev_identity_provider() -> InMemoryIdentityProvider:
    identities = (
        Identity(identity_id=_DEV_ADMIN_ID, role=ROLE_ADMIN),
        Identity(
            identity_id=_DEV_CLINIC_OWNER_ID,
            role=ROLE_CLINIC,
            clinic_id=DEV_CLINIC_ID,
        ),
        Identity(
            identity_id=_DEV_AGENT_ID,
            role=ROLE_AGENT,
            created_by=_DEV_CLINIC_OWNER_ID,
            clinic_id=DEV_CLINIC_ID,
        ),
        Identity(
            identity_id=_DEV_DOCTOR_STAFF_ID,
            role=ROLE_DOCTOR_STAFF,
            created_by=_DEV_ADMIN_ID,
        ),
    )
    return InMemoryIdentityProvider(
        identities,
        tokens={
            DEV_ADMIN_TOKEN: _DEV_ADMIN_ID,
            DEV_CLINIC_TOKEN: _DEV_CLINIC_OWNER_ID,
            DEV_AGENT_TOKEN: _DEV_AGENT_ID,
            DEV_DOCTOR_STAFF_TOKEN: _DEV_DOCTOR_STAFF_ID,
        },
    )


def _build_dev_navigation_catalog() -> InMemoryNavigationCatalog:
    items = []
    for role, templates in NAVIGATION_TEMPLATES_BY_ROLE.items():
        items.extend(build_seed_items(role, templates))
    return InMemoryNavigationCatalog(items)


def _create_memory_dependencies() -> HttpApiDependencies:
    return HttpApiDependencies(
        identity_provider=_build_dev_identity_provider(),
        grant_store=InMemoryGrantStore(),
        navigation_catalog=_build_dev_navigation_catalog(),
        clock=UtcClock(),
    )


def _create_django_dependencies() -> HttpApiDependencies:
    from staffgate.identity_store.provider import DbIdentityProvider
    from staffgate.navigation.db_catalog import DbNavigationCatalog
    from staffgate.permissions.db_provider import DbGrantStore

    return HttpApiDependencies(
        identity_provider=DbIdentityProvider(),
        grant_store=DbGrantStore(),
        navigation_catalog=DbNavigationCatalog(),
        clock=UtcClock(),
    )


def _create_dependencies() -> HttpApiDependencies:
    backend = getattr(settings, "STAFFGATE_STORE_BACKEND", BACKEND_DJANGO)
    if backend == BACKEND_MEMORY:
        return _create_memory_dependencies()
    if backend == BACKEND_DJANGO:
        return _create_django_dependencies()
    raise ValueError(f"Unknown STAFFGATE_STORE_BACKEND '{backend}'.")


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
