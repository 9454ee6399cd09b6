"""
Staffgate HTTP API - Bearer Identity Resolution
===============================================
The identity is resolved once, here, and passed by value into the
engine. Nothing downstream reads credentials.
"""

from __future__ import annotations

from typing import Any

from staffgate.identity.models import Identity
from staffgate.permissions.exceptions import Unauthenticated

HEADER_AUTHORIZATION = "authorization"
BEARER_SCHEME = "bearer"


def _normalize_headers(headers: dict[str, Any] | None) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for key, value in (headers or {}).items():
        normalized[str(key).strip().lower()] = str(value).strip()
    return normalized


def extract_bearer_token(headers: dict[str, Any] | None) -> str | None:
    authorization = _normalize_headers(headers).get(HEADER_AUTHORIZATION)
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    token = token.strip()
    return token or None


def resolve_identity(headers: dict[str, Any] | None, provider) -> Identity:
    token = extract_bearer_token(headers)
    if token is None:
        raise Unauthenticated()
    identity = provider.resolve_token(token)
    if identity is None:
        raise Unauthenticated()
    return identity
