from __future__ import annotations

import json

import pytest

from adapters.django_api.wiring import (
    DEV_ADMIN_TOKEN,
    DEV_AGENT_TOKEN,
    DEV_CLINIC_TOKEN,
    reset_dependencies,
)
from staffgate.identity_store.service import (
    create_account,
    create_clinic,
    issue_access_token,
)


@pytest.fixture
def memory_backend(settings):
    settings.STAFFGATE_STORE_BACKEND = "memory"
    reset_dependencies()
    yield
    reset_dependencies()


@pytest.fixture
def django_backend(settings):
    settings.STAFFGATE_STORE_BACKEND = "django"
    reset_dependencies()
    yield
    reset_dependencies()


def _post(client, path: str, body, token: str | None = None):
    extra = {} if token is None else {"HTTP_AUTHORIZATION": f"Bearer {token}"}
    return client.post(
        path,
        data=json.dumps(body),
        content_type="application/json",
        **extra,
    )


def _get(client, path: str, token: str | None = None, **params):
    extra = {} if token is None else {"HTTP_AUTHORIZATION": f"Bearer {token}"}
    return client.get(path, params, **extra)


def test_sidebar_requires_bearer_token(client, memory_backend) -> None:
    response = _get(client, "/v1/agent/sidebar-permissions")

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "message": "Unauthorized: Missing or invalid token",
    }


def test_wrong_method_is_405(client, memory_backend) -> None:
    assert _post(client, "/v1/agent/sidebar-permissions", {}).status_code == 405
    assert _get(client, "/v1/navigation/seed").status_code == 405
    assert client.delete("/v1/agent/permissions").status_code == 405


def test_invalid_json_body_is_400(client, memory_backend) -> None:
    response = client.post(
        "/v1/agent/permissions",
        data="{not json",
        content_type="application/json",
        HTTP_AUTHORIZATION=f"Bearer {DEV_CLINIC_TOKEN}",
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_missing_agent_id_is_400(client, memory_backend) -> None:
    response = _get(client, "/v1/agent/permissions", DEV_CLINIC_TOKEN)

    assert response.status_code == 400
    assert response.json()["message"] == "Agent ID is required"


def test_grant_flow_over_http(client, memory_backend) -> None:
    written = _post(
        client,
        "/v1/agent/permissions",
        {
            "agentId": "dev-agent",
            "permissions": [
                {
                    "module": "lead",
                    "actions": {},
                    "subModules": [
                        {"name": "Create Lead", "actions": {"create": True}}
                    ],
                }
            ],
        },
        DEV_CLINIC_TOKEN,
    )
    assert written.status_code == 200
    assert written.json()["success"] is True

    sidebar = _get(client, "/v1/agent/sidebar-permissions", DEV_AGENT_TOKEN)
    assert sidebar.status_code == 200
    [item] = sidebar.json()["data"]["navigationItems"]
    assert item["moduleKey"] == "clinic_lead"
    assert [sub["path"] for sub in item["subModules"]] == [
        "/staff/clinic-lead-create-lead"
    ]

    allowed = _get(
        client,
        "/v1/agent/check-permission",
        DEV_AGENT_TOKEN,
        moduleKey="lead",
        action="create",
        subModule="Create Lead",
    )
    assert allowed.status_code == 200
    assert allowed.json() == {"success": True, "data": {"allowed": True}}

    denied = _get(
        client,
        "/v1/agent/check-permission",
        DEV_AGENT_TOKEN,
        moduleKey="lead",
        action="read",
    )
    assert denied.status_code == 403

    module = _get(
        client,
        "/v1/agent/module-permissions",
        DEV_AGENT_TOKEN,
        moduleKey="lead",
    )
    assert module.status_code == 200
    assert module.json()["data"]["capabilities"]["canCreate"] is False


def test_admin_cannot_manage_clinic_agent(client, memory_backend) -> None:
    response = _post(
        client,
        "/v1/agent/permissions",
        {"agentId": "dev-agent", "permissions": []},
        DEV_ADMIN_TOKEN,
    )

    assert response.status_code == 403


def test_deactivate_over_http(client, memory_backend) -> None:
    _post(
        client,
        "/v1/agent/permissions",
        {"agentId": "dev-agent", "permissions": [{"module": "lead", "actions": {"all": True}}]},
        DEV_CLINIC_TOKEN,
    )

    response = _post(
        client,
        "/v1/agent/permissions/deactivate",
        {"agentId": "dev-agent"},
        DEV_CLINIC_TOKEN,
    )

    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is False
    sidebar = _get(client, "/v1/agent/sidebar-permissions", DEV_AGENT_TOKEN)
    assert sidebar.json()["data"]["navigationItems"] == []


@pytest.mark.django_db(transaction=True)
def test_django_backend_end_to_end(client, django_backend) -> None:
    create_account(account_id="doctor-1", role="doctor")
    create_clinic(clinic_id="clinic-9", name="Harbor Clinic")
    create_account(
        account_id="staff-agent",
        role="doctorStaff",
        created_by="doctor-1",
        clinic_id="clinic-9",
    )
    issue_access_token(account_id="doctor-1", token="doctor-secret")
    issue_access_token(account_id="staff-agent", token="agent-secret")

    seeded = _post(client, "/v1/navigation/seed", {"role": "doctor"}, "doctor-secret")
    assert seeded.status_code == 200
    assert seeded.json()["data"]["inserted"] == seeded.json()["data"]["totalTemplates"]

    forbidden_seed = _post(
        client, "/v1/navigation/seed", {"role": "clinic"}, "doctor-secret"
    )
    assert forbidden_seed.status_code == 403

    granted = _post(
        client,
        "/v1/agent/permissions",
        {
            "agentId": "staff-agent",
            "permissions": [{"module": "clinic_jobs", "actions": {"read": True}}],
        },
        "doctor-secret",
    )
    assert granted.status_code == 200

    sidebar = _get(client, "/v1/agent/sidebar-permissions", "agent-secret")
    data = sidebar.json()["data"]
    assert data["navigationRole"] == "doctor"
    assert [item["moduleKey"] for item in data["navigationItems"]] == ["doctor_jobs"]

    read_back = _get(
        client, "/v1/agent/permissions", "doctor-secret", agentId="staff-agent"
    )
    assert read_back.json()["data"]["permissions"][0]["module"] == "clinic_jobs"
