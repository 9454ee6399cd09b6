"""
Staffgate Permissions - Grant Resolver
======================================
Answers "can this agent perform action A on module M (sub-module S)?"

Pure, read-only evaluation over an already-loaded PermissionGrantSet.
Not-found conditions are denials (False), never errors. Only malformed
input (empty module key, unknown action) raises InvalidArgument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from staffgate.permissions.constants import ActionKind
from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.grammar import keys_match, parse_action
from staffgate.permissions.models import (
    ActionSet,
    ModuleGrant,
    PermissionGrantSet,
    SubModuleGrant,
    normalize_sub_module_name,
)

logger = logging.getLogger("staffgate.permissions")


def _require_module_key(module_key: Any) -> str:
    if not isinstance(module_key, str) or not module_key.strip():
        raise InvalidArgument("module_key must be a non-empty string.")
    return module_key.strip()


def _module_matches(
    module: ModuleGrant,
    module_key: str,
    candidate_role: Optional[str] = None,
) -> bool:
    if keys_match(module.module_key, module_key, candidate_role):
        return True
    if module.name is not None:
        return normalize_sub_module_name(module.name) == normalize_sub_module_name(module_key)
    return False


def find_module_grant(
    grant_set: Optional[PermissionGrantSet],
    module_key: str,
    candidate_role: Optional[str] = None,
) -> ModuleGrant | None:
    """
    Locate the ModuleGrant for ``module_key``.

    An exact literal key match wins; otherwise the first positional
    match (prefix-insensitive key, or case-insensitive display name).
    """
    key = _require_module_key(module_key)
    if grant_set is None or grant_set.is_empty:
        return None

    first_match: ModuleGrant | None = None
    for module in grant_set.modules:
        if module.module_key == key:
            return module
        if first_match is None and _module_matches(module, key, candidate_role):
            first_match = module
    return first_match


def find_sub_module_grant(
    module: ModuleGrant | None,
    sub_module_name: Any,
) -> SubModuleGrant | None:
    if module is None:
        return None
    return module.find_sub_module(sub_module_name)


def has_any_action(actions: ActionSet | None) -> bool:
    return actions is not None and actions.has_any()


def resolve(
    grant_set: Optional[PermissionGrantSet],
    module_key: str,
    action: ActionKind | str,
    sub_module_name: Optional[str] = None,
) -> bool:
    key = _require_module_key(module_key)
    kind = parse_action(action)

    if grant_set is None or grant_set.is_empty:
        return False

    module = find_module_grant(grant_set, key)
    if module is None:
        logger.debug("Module '%s' not granted to agent '%s'.", key, grant_set.agent_id)
        return False

    if sub_module_name is not None:
        if module.actions.all:
            return True
        sub_module = module.find_sub_module(sub_module_name)
        if sub_module is None:
            return False
        return sub_module.actions.allows(kind)

    return module.actions.allows(kind)


@dataclass(frozen=True)
class Capabilities:
    """UI-facing action flags for one module (or sub-module)."""

    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False
    can_approve: bool = False
    can_print: bool = False
    can_export: bool = False
    can_all: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "canCreate": self.can_create,
            "canRead": self.can_read,
            "canUpdate": self.can_update,
            "canDelete": self.can_delete,
            "canApprove": self.can_approve,
            "canPrint": self.can_print,
            "canExport": self.can_export,
            "canAll": self.can_all,
        }


def summarize_capabilities(
    grant_set: Optional[PermissionGrantSet],
    module_key: str,
    sub_module_name: Optional[str] = None,
) -> Capabilities:
    def _can(kind: ActionKind) -> bool:
        return resolve(grant_set, module_key, kind, sub_module_name)

    return Capabilities(
        can_create=_can(ActionKind.CREATE),
        can_read=_can(ActionKind.READ),
        can_update=_can(ActionKind.UPDATE),
        can_delete=_can(ActionKind.DELETE),
        can_approve=_can(ActionKind.APPROVE),
        can_print=_can(ActionKind.PRINT),
        can_export=_can(ActionKind.EXPORT),
        can_all=_can(ActionKind.ALL),
    )
