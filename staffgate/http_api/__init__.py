"""
Staffgate HTTP API - Public API
===============================
"""

from staffgate.http_api.auth import extract_bearer_token, resolve_identity
from staffgate.http_api.contracts import (
    AgentPermissionsReadRequest,
    AgentPermissionsWriteRequest,
    HttpApiResponse,
    ModulePermissionsRequest,
    NavigationSeedRequest,
    PermissionCheckRequest,
)
from staffgate.http_api.dependencies import Clock, HttpApiDependencies, UtcClock
from staffgate.http_api.errors import (
    error_response,
    map_exception,
    method_not_allowed,
    success_response,
)
from staffgate.http_api.handlers import (
    get_agent_permissions,
    get_module_permissions,
    get_permission_check,
    get_sidebar_navigation,
    post_agent_permissions,
    post_agent_permissions_deactivate,
    post_navigation_seed,
)

__all__ = [
    "AgentPermissionsReadRequest",
    "AgentPermissionsWriteRequest",
    "ModulePermissionsRequest",
    "PermissionCheckRequest",
    "NavigationSeedRequest",
    "HttpApiResponse",
    "Clock",
    "UtcClock",
    "HttpApiDependencies",
    "error_response",
    "success_response",
    "map_exception",
    "method_not_allowed",
    "extract_bearer_token",
    "resolve_identity",
    "get_agent_permissions",
    "post_agent_permissions",
    "post_agent_permissions_deactivate",
    "get_sidebar_navigation",
    "get_module_permissions",
    "get_permission_check",
    "post_navigation_seed",
]
