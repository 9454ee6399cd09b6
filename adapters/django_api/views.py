"""
Staffgate Django Adapter Views
==============================
Pass-through HTTP views over staffgate/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from staffgate.http_api.contracts import (
    AgentPermissionsReadRequest,
    AgentPermissionsWriteRequest,
    HttpApiResponse,
    ModulePermissionsRequest,
    NavigationSeedRequest,
    PermissionCheckRequest,
)
from staffgate.http_api.errors import STATUS_BAD_REQUEST, error_response, method_not_allowed
from staffgate.http_api.handlers import (
    get_agent_permissions,
    get_module_permissions,
    get_permission_check,
    get_sidebar_navigation,
    post_agent_permissions,
    post_agent_permissions_deactivate,
    post_navigation_seed,
)


def _headers_from_request(request: HttpRequest) -> dict[str, str]:
    return {str(key): str(value) for key, value in request.headers.items()}


def _to_json_response(response: HttpApiResponse) -> JsonResponse:
    return JsonResponse(response.to_dict(), status=response.status)


def _json_error(message: str) -> JsonResponse:
    return _to_json_response(
        error_response(status=STATUS_BAD_REQUEST, message=message)
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _dispatch(handler, contract_factory, request: HttpRequest) -> JsonResponse:
    headers = _headers_from_request(request)
    try:
        contract = contract_factory(request)
    except ValueError as exc:
        return _json_error(str(exc))

    response = handler(
        contract,
        build_dependencies(),
        headers=headers,
    )
    return _to_json_response(response)


def _agent_read_contract(request: HttpRequest) -> AgentPermissionsReadRequest:
    return AgentPermissionsReadRequest(agent_id=request.GET.get("agentId"))


def _agent_write_contract(request: HttpRequest) -> AgentPermissionsWriteRequest:
    body = _parse_json_body(request)
    return AgentPermissionsWriteRequest(
        agent_id=body.get("agentId"),
        permissions=body.get("permissions"),
    )


def _agent_deactivate_contract(request: HttpRequest) -> AgentPermissionsReadRequest:
    body = _parse_json_body(request)
    return AgentPermissionsReadRequest(agent_id=body.get("agentId"))


def _module_permissions_contract(request: HttpRequest) -> ModulePermissionsRequest:
    return ModulePermissionsRequest(
        module_key=request.GET.get("moduleKey"),
        sub_module=request.GET.get("subModule"),
    )


def _permission_check_contract(request: HttpRequest) -> PermissionCheckRequest:
    return PermissionCheckRequest(
        module_key=request.GET.get("moduleKey"),
        action=request.GET.get("action"),
        sub_module=request.GET.get("subModule"),
    )


def _navigation_seed_contract(request: HttpRequest) -> NavigationSeedRequest:
    body = _parse_json_body(request)
    return NavigationSeedRequest(role=body.get("role"))


@csrf_exempt
def agent_permissions_view(request: HttpRequest) -> JsonResponse:
    if request.method == "GET":
        return _dispatch(get_agent_permissions, _agent_read_contract, request)
    if request.method == "POST":
        return _dispatch(post_agent_permissions, _agent_write_contract, request)
    return _to_json_response(method_not_allowed())


@csrf_exempt
def agent_permissions_deactivate_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _to_json_response(method_not_allowed())
    return _dispatch(
        post_agent_permissions_deactivate,
        _agent_deactivate_contract,
        request,
    )


@csrf_exempt
def sidebar_permissions_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _to_json_response(method_not_allowed())
    response = get_sidebar_navigation(
        build_dependencies(),
        headers=_headers_from_request(request),
    )
    return _to_json_response(response)


@csrf_exempt
def module_permissions_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _to_json_response(method_not_allowed())
    return _dispatch(get_module_permissions, _module_permissions_contract, request)


@csrf_exempt
def check_permission_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _to_json_response(method_not_allowed())
    return _dispatch(get_permission_check, _permission_check_contract, request)


@csrf_exempt
def navigation_seed_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _to_json_response(method_not_allowed())
    return _dispatch(post_navigation_seed, _navigation_seed_contract, request)
