"""
Staffgate Permissions - Public API
==================================
"""

from staffgate.permissions.constants import (
    ACTION_KEYS,
    AGENT_ROLES,
    ISSUER_ROLES,
    ROLE_PREFIXES,
    ActionKind,
)
from staffgate.permissions.db_provider import DbGrantStore
from staffgate.permissions.exceptions import (
    AgentNotFound,
    InvalidActionKind,
    InvalidArgument,
    PermissionEngineError,
    Unauthenticated,
    Unauthorized,
)
from staffgate.permissions.grammar import (
    keys_match,
    parse_action,
    strip_role_prefix,
)
from staffgate.permissions.models import (
    ActionSet,
    ModuleGrant,
    PermissionGrantSet,
    SubModuleGrant,
)
from staffgate.permissions.provider import GrantStore, InMemoryGrantStore
from staffgate.permissions.resolver import (
    Capabilities,
    find_module_grant,
    find_sub_module_grant,
    has_any_action,
    resolve,
    summarize_capabilities,
)


def __getattr__(name: str):
    if name in {"grant_permissions", "read_permissions", "deactivate_grants"}:
        from staffgate.permissions import administration

        return getattr(administration, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    "ACTION_KEYS",
    "AGENT_ROLES",
    "ISSUER_ROLES",
    "ROLE_PREFIXES",
    "ActionKind",
    "ActionSet",
    "SubModuleGrant",
    "ModuleGrant",
    "PermissionGrantSet",
    "GrantStore",
    "InMemoryGrantStore",
    "DbGrantStore",
    "PermissionEngineError",
    "InvalidArgument",
    "InvalidActionKind",
    "Unauthenticated",
    "Unauthorized",
    "AgentNotFound",
    "strip_role_prefix",
    "keys_match",
    "parse_action",
    "Capabilities",
    "resolve",
    "find_module_grant",
    "find_sub_module_grant",
    "has_any_action",
    "summarize_capabilities",
    "grant_permissions",
    "read_permissions",
    "deactivate_grants",
]
