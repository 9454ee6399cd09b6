"""
Manual smoke runner for the Staffgate Django adapter endpoints.

Expects a server started with STAFFGATE_STORE_BACKEND=memory so the dev
bearer tokens resolve.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, parse, request


DEV_ADMIN_TOKEN = "dev-admin-token"
DEV_CLINIC_TOKEN = "dev-clinic-token"
DEV_AGENT_TOKEN = "dev-agent-token"
DEV_AGENT_ID = "dev-agent"


def _call(
    *,
    method: str,
    url: str,
    token: str | None = None,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers: dict[str, str] = {}
    if token is not None:
        req_headers["Authorization"] = f"Bearer {token}"
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"

    status, payload = _call(method="GET", url=f"{api}/agent/sidebar-permissions")
    _print_case("missing-token", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/agent/permissions",
        token=DEV_ADMIN_TOKEN,
        body={"agentId": DEV_AGENT_ID, "permissions": []},
    )
    _print_case("grant-not-owner", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/agent/permissions",
        token=DEV_CLINIC_TOKEN,
        body={
            "agentId": DEV_AGENT_ID,
            "permissions": [
                {
                    "module": "staff_management",
                    "actions": {"read": True},
                    "subModules": [
                        {"name": "Add Service", "actions": {"create": True}}
                    ],
                }
            ],
        },
    )
    _print_case("grant-success", status, payload)

    status, payload = _call(
        method="GET",
        url=f"{api}/agent/sidebar-permissions",
        token=DEV_AGENT_TOKEN,
    )
    _print_case("agent-sidebar", status, payload)

    for label, params in (
        ("check-allowed", {"moduleKey": "staff_management", "action": "read"}),
        ("check-denied", {"moduleKey": "staff_management", "action": "delete"}),
        (
            "check-sub-module",
            {
                "moduleKey": "staff_management",
                "action": "create",
                "subModule": "Add Service",
            },
        ),
    ):
        status, payload = _call(
            method="GET",
            url=f"{api}/agent/check-permission?{parse.urlencode(params)}",
            token=DEV_AGENT_TOKEN,
        )
        _print_case(label, status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
