"""
Staffgate Permissions - Grant Administration (write path)
=========================================================
Issuer-side validation and upsert of an agent's PermissionGrantSet.

Every write is all-or-nothing: the issuer is authorized and the whole
module list is parsed before the store is touched. A successful write
replaces ``modules`` entirely, stamps ``last_modified`` and forces
``is_active`` back to True.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from staffgate.identity.models import Identity
from staffgate.identity.policy import authorize_issuer
from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.models import ModuleGrant, PermissionGrantSet
from staffgate.permissions.provider import GrantStore

logger = logging.getLogger("staffgate.permissions")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_module_grants(module_payloads: Any) -> tuple[ModuleGrant, ...]:
    """Validate the issuer's payload; raises on the first bad entry."""
    if not isinstance(module_payloads, (list, tuple)):
        raise InvalidArgument("Permissions array is required")
    return tuple(ModuleGrant.from_payload(payload) for payload in module_payloads)


def grant_permissions(
    issuer: Optional[Identity],
    agent: Optional[Identity],
    module_payloads: Any,
    store: GrantStore,
    now: Optional[datetime] = None,
) -> PermissionGrantSet:
    authorize_issuer(issuer, agent)
    modules = parse_module_grants(module_payloads)

    grant_set = store.save_grants(
        agent.identity_id,
        modules,
        issuer.identity_id,
        now or _utc_now(),
    )
    logger.info(
        "Issuer '%s' granted %d module(s) to agent '%s'.",
        issuer.identity_id,
        len(modules),
        agent.identity_id,
    )
    return grant_set


def read_permissions(
    issuer: Optional[Identity],
    agent: Optional[Identity],
    store: GrantStore,
) -> PermissionGrantSet | None:
    authorize_issuer(issuer, agent)
    return store.load_grants(agent.identity_id)


def deactivate_grants(
    issuer: Optional[Identity],
    agent: Optional[Identity],
    store: GrantStore,
    now: Optional[datetime] = None,
) -> PermissionGrantSet | None:
    authorize_issuer(issuer, agent)
    grant_set = store.set_active(agent.identity_id, False, now or _utc_now())
    if grant_set is not None:
        logger.info(
            "Issuer '%s' deactivated grants for agent '%s'.",
            issuer.identity_id,
            agent.identity_id,
        )
    return grant_set
