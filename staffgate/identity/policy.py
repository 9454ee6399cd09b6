"""
Staffgate Identity - Issuer Ownership Policy
============================================
Who may read or change an agent's grants, and whose navigation catalog
an agent sees.
"""

from __future__ import annotations

import logging
from typing import Optional

from staffgate.identity.models import Identity
from staffgate.permissions.constants import (
    DEFAULT_NAVIGATION_ROLE,
    NAVIGATION_ROLES,
    ROLE_ADMIN,
    ROLE_CLINIC,
    ROLE_DOCTOR,
)
from staffgate.permissions.exceptions import (
    AgentNotFound,
    InvalidArgument,
    Unauthenticated,
    Unauthorized,
)

logger = logging.getLogger("staffgate.identity")

_CLINIC_SCOPED_ISSUERS = frozenset({ROLE_CLINIC, ROLE_DOCTOR})


def authorize_issuer(issuer: Optional[Identity], agent: Optional[Identity]) -> None:
    """
    Raise unless ``issuer`` may manage ``agent``'s grants.

    Admins manage only agents they created. Clinic and doctor issuers
    additionally manage agents affiliated with their clinic.
    """
    if issuer is None:
        raise Unauthenticated()
    if not issuer.is_issuer:
        raise Unauthorized()
    if agent is None or not agent.is_agent:
        raise AgentNotFound(None if agent is None else agent.identity_id)

    if agent.created_by is not None and agent.created_by == issuer.identity_id:
        return

    if issuer.role in _CLINIC_SCOPED_ISSUERS and issuer.clinic_id is not None:
        if agent.clinic_id == issuer.clinic_id:
            return

    logger.info(
        "Issuer '%s' (%s) denied access to agent '%s'.",
        issuer.identity_id,
        issuer.role,
        agent.identity_id,
    )
    raise Unauthorized()


def authorize_navigation_seed(issuer: Optional[Identity], role: str) -> None:
    if issuer is None:
        raise Unauthenticated()
    if not issuer.is_issuer:
        raise Unauthorized()
    if role not in NAVIGATION_ROLES:
        raise InvalidArgument("Invalid role. Must be admin, clinic, or doctor")
    if issuer.role != ROLE_ADMIN and issuer.role != role:
        raise Unauthorized(
            f"{issuer.role.capitalize()} users can only seed {issuer.role} navigation items"
        )


def navigation_role_for(identity: Identity, identity_provider) -> str:
    """
    Issuers see their own catalog; agents see their creator's.

    The creator is looked up at read time, so an agent re-assigned to a
    different issuer keeps the catalog of whoever created it.
    """
    if identity.role in NAVIGATION_ROLES:
        return identity.role

    if identity.created_by:
        creator = identity_provider.get_identity(identity.created_by)
        if creator is not None and creator.role in NAVIGATION_ROLES:
            return creator.role

    return DEFAULT_NAVIGATION_ROLE
