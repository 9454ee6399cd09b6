"""
Staffgate Permissions - DB-backed Grant Store
=============================================
Loads and upserts agent grant sets from the relational permissions store.
"""

from __future__ import annotations

import logging
from datetime import datetime

from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.models import ModuleGrant, PermissionGrantSet

logger = logging.getLogger("staffgate.permissions")


def _row_to_grant_set(row) -> PermissionGrantSet | None:
    try:
        return PermissionGrantSet.from_payload(
            agent_id=row.agent_id,
            modules=row.permissions or [],
            granted_by=row.granted_by,
            is_active=bool(row.is_active),
            last_modified=row.last_modified,
        )
    except InvalidArgument as exc:
        # Unreadable stored grants deny everything until re-granted.
        logger.warning(
            "Stored permissions for agent '%s' are malformed: %s",
            row.agent_id,
            exc,
        )
        return None


class DbGrantStore:
    def load_grants(self, agent_id: str) -> PermissionGrantSet | None:
        if not isinstance(agent_id, str) or not agent_id.strip():
            return None

        from staffgate.permissions_store.models import AgentPermission

        row = AgentPermission.objects.filter(agent_id=agent_id.strip()).first()
        if row is None:
            return None
        return _row_to_grant_set(row)

    def save_grants(
        self,
        agent_id: str,
        modules: tuple[ModuleGrant, ...],
        issuer_id: str,
        now: datetime,
    ) -> PermissionGrantSet:
        from staffgate.permissions_store.models import AgentPermission

        # update_or_create locks the agent row, so concurrent writes for
        # one agent serialize and the last writer wins.
        row, _ = AgentPermission.objects.update_or_create(
            agent_id=agent_id,
            defaults={
                "permissions": [module.to_dict() for module in modules],
                "granted_by": issuer_id,
                "is_active": True,
                "last_modified": now,
            },
        )
        return PermissionGrantSet(
            agent_id=row.agent_id,
            modules=tuple(modules),
            granted_by=row.granted_by,
            is_active=True,
            last_modified=row.last_modified,
        )

    def set_active(
        self,
        agent_id: str,
        is_active: bool,
        now: datetime,
    ) -> PermissionGrantSet | None:
        from django.db import transaction

        from staffgate.permissions_store.models import AgentPermission

        with transaction.atomic():
            row = (
                AgentPermission.objects.select_for_update()
                .filter(agent_id=agent_id)
                .first()
            )
            if row is None:
                return None
            row.is_active = bool(is_active)
            row.last_modified = now
            row.save(update_fields=["is_active", "last_modified"])
        return _row_to_grant_set(row)
