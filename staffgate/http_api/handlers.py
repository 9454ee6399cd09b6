"""
Staffgate HTTP API - Framework-Agnostic Handlers
================================================
Pure handler functions over contracts and injected dependencies.
Every handler resolves the bearer identity first and returns an
HttpApiResponse; transports only serialize it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from staffgate.http_api.auth import resolve_identity
from staffgate.http_api.contracts import (
    AgentPermissionsReadRequest,
    AgentPermissionsWriteRequest,
    HttpApiResponse,
    ModulePermissionsRequest,
    NavigationSeedRequest,
    PermissionCheckRequest,
)
from staffgate.http_api.errors import (
    STATUS_FORBIDDEN,
    STATUS_INTERNAL_ERROR,
    error_response,
    map_exception,
    success_response,
)
from staffgate.identity.models import Identity
from staffgate.identity.policy import (
    authorize_issuer,
    authorize_navigation_seed,
    navigation_role_for,
)
from staffgate.navigation.filter import filter_navigation, unfiltered_navigation
from staffgate.permissions.administration import (
    deactivate_grants,
    grant_permissions,
    read_permissions,
)
from staffgate.permissions.exceptions import Unauthorized
from staffgate.permissions.grammar import parse_action
from staffgate.permissions.models import ActionSet
from staffgate.permissions.resolver import (
    Capabilities,
    find_module_grant,
    find_sub_module_grant,
    resolve,
    summarize_capabilities,
)

logger = logging.getLogger("staffgate.http")

AGENT_ROLE_REQUIRED = "Access denied. Agent role required"


def _run(call: Callable[[], HttpApiResponse]) -> HttpApiResponse:
    try:
        return call()
    except Exception as exc:
        mapped = map_exception(exc)
        if mapped is not None:
            return mapped
        logger.exception("Unhandled error in permission handler.")
        return error_response(
            status=STATUS_INTERNAL_ERROR,
            message="Internal server error",
            details={"error_type": type(exc).__name__},
        )


def _require_agent(identity: Identity) -> None:
    if not identity.is_agent:
        raise Unauthorized(AGENT_ROLE_REQUIRED)


def _serialize_grants(grant_set) -> dict[str, Any] | None:
    if grant_set is None:
        return None
    return grant_set.to_dict()


def _full_capabilities() -> Capabilities:
    return Capabilities(
        can_create=True,
        can_read=True,
        can_update=True,
        can_delete=True,
        can_print=True,
        can_export=True,
        can_approve=True,
        can_all=True,
    )


def _reported_actions(module_grant, sub_module: str | None) -> ActionSet:
    """Actions matching what the resolver grants for the same query."""
    if module_grant is None:
        return ActionSet()
    if module_grant.actions.all:
        return ActionSet.full()
    if sub_module is None:
        return module_grant.actions
    sub_grant = find_sub_module_grant(module_grant, sub_module)
    if sub_grant is None:
        return ActionSet()
    return ActionSet.full() if sub_grant.actions.all else sub_grant.actions


def get_agent_permissions(
    request: AgentPermissionsReadRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        issuer = resolve_identity(headers, dependencies.identity_provider)
        agent = dependencies.identity_provider.get_identity(request.agent_id)
        grant_set = read_permissions(issuer, agent, dependencies.grant_store)
        return success_response(_serialize_grants(grant_set))

    return _run(_call)


def post_agent_permissions(
    request: AgentPermissionsWriteRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        issuer = resolve_identity(headers, dependencies.identity_provider)
        agent = dependencies.identity_provider.get_identity(request.agent_id)
        grant_set = grant_permissions(
            issuer,
            agent,
            request.permissions,
            dependencies.grant_store,
            now=dependencies.clock.now(),
        )
        return success_response(
            grant_set.to_dict(),
            message="Permissions updated successfully",
        )

    return _run(_call)


def post_agent_permissions_deactivate(
    request: AgentPermissionsReadRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        issuer = resolve_identity(headers, dependencies.identity_provider)
        agent = dependencies.identity_provider.get_identity(request.agent_id)
        grant_set = deactivate_grants(
            issuer,
            agent,
            dependencies.grant_store,
            now=dependencies.clock.now(),
        )
        return success_response(
            _serialize_grants(grant_set),
            message="Permissions deactivated",
        )

    return _run(_call)


def get_sidebar_navigation(
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        identity = resolve_identity(headers, dependencies.identity_provider)
        navigation_role = navigation_role_for(identity, dependencies.identity_provider)
        items = dependencies.navigation_catalog.items_for_role(navigation_role)

        if identity.is_issuer:
            return success_response(
                {
                    "navigationItems": [
                        item.to_dict() for item in unfiltered_navigation(items)
                    ],
                    "navigationRole": navigation_role,
                    "permissions": None,
                    "agentId": identity.identity_id,
                }
            )

        _require_agent(identity)
        grant_set = dependencies.grant_store.load_grants(identity.identity_id)
        filtered = filter_navigation(items, grant_set, navigation_role)
        return success_response(
            {
                "navigationItems": [item.to_dict() for item in filtered],
                "navigationRole": navigation_role,
                "permissions": _serialize_grants(grant_set),
                "agentId": identity.identity_id,
            }
        )

    return _run(_call)


def get_module_permissions(
    request: ModulePermissionsRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        identity = resolve_identity(headers, dependencies.identity_provider)
        if not identity.is_agent:
            return success_response(
                {
                    "moduleKey": request.module_key,
                    "subModule": request.sub_module,
                    "permissions": ActionSet.full().to_dict(),
                    "capabilities": _full_capabilities().to_dict(),
                }
            )

        navigation_role = navigation_role_for(identity, dependencies.identity_provider)
        grant_set = dependencies.grant_store.load_grants(identity.identity_id)
        module_grant = find_module_grant(grant_set, request.module_key, navigation_role)
        actions = _reported_actions(module_grant, request.sub_module)

        capabilities = summarize_capabilities(
            grant_set,
            module_key=(
                request.module_key if module_grant is None else module_grant.module_key
            ),
            sub_module_name=request.sub_module,
        )
        return success_response(
            {
                "moduleKey": request.module_key,
                "subModule": request.sub_module,
                "permissions": actions.to_dict(),
                "capabilities": capabilities.to_dict(),
            }
        )

    return _run(_call)


def get_permission_check(
    request: PermissionCheckRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        identity = resolve_identity(headers, dependencies.identity_provider)
        action = parse_action(request.action)
        if not identity.is_agent:
            return success_response({"allowed": True})

        navigation_role = navigation_role_for(identity, dependencies.identity_provider)
        grant_set = dependencies.grant_store.load_grants(identity.identity_id)
        module_grant = find_module_grant(grant_set, request.module_key, navigation_role)
        allowed = module_grant is not None and resolve(
            grant_set,
            module_grant.module_key,
            action,
            request.sub_module,
        )
        if allowed:
            return success_response({"allowed": True})

        logger.info(
            "Agent '%s' denied %s on '%s'.",
            identity.identity_id,
            action.value,
            request.module_key,
        )
        return error_response(
            status=STATUS_FORBIDDEN,
            message=(
                f"Permission denied: {action.value} action not allowed "
                f"for module {request.module_key}"
            ),
            details={"allowed": False},
        )

    return _run(_call)


def post_navigation_seed(
    request: NavigationSeedRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> HttpApiResponse:
    def _call() -> HttpApiResponse:
        issuer = resolve_identity(headers, dependencies.identity_provider)
        authorize_navigation_seed(issuer, request.role)
        result = dependencies.navigation_catalog.seed_navigation(request.role)
        return success_response(
            result.to_dict(),
            message=f"Navigation items seeded for {request.role}",
        )

    return _run(_call)
