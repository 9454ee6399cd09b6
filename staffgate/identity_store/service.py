"""
Staffgate Identity Store - Account and Token Service
====================================================
Deterministic normalization and lifecycle for accounts and bearer tokens.
"""

from __future__ import annotations

import hashlib
from typing import Any

from django.db import IntegrityError, transaction
from django.utils import timezone

from staffgate.identity_store.models import (
    AccessToken,
    AccessTokenStatus,
    Account,
    AccountRole,
    Clinic,
)

_VALID_ROLES = frozenset(choice.value for choice in AccountRole)


def _ensure_string(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} must be a non-empty string.")
    return stripped


def hash_token(token: str) -> str:
    raw = _ensure_string(token, field_name="token")
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def _resolve_account(account_id: str | None, *, field_name: str) -> Account | None:
    if account_id is None:
        return None
    canonical = _ensure_string(account_id, field_name=field_name)
    account = Account.objects.filter(account_id=canonical).first()
    if account is None:
        raise ValueError(f"{field_name} '{canonical}' was not found.")
    return account


@transaction.atomic
def create_account(
    *,
    account_id: str,
    role: str,
    created_by: str | None = None,
    clinic_id: str | None = None,
    display_name: str = "",
) -> Account:
    if role not in _VALID_ROLES:
        raise ValueError(f"role must be one of: {sorted(_VALID_ROLES)}")

    clinic = None
    if clinic_id is not None:
        clinic = Clinic.objects.filter(
            clinic_id=_ensure_string(clinic_id, field_name="clinic_id")
        ).first()
        if clinic is None:
            raise ValueError(f"clinic_id '{clinic_id}' was not found.")

    try:
        return Account.objects.create(
            account_id=_ensure_string(account_id, field_name="account_id"),
            role=role,
            display_name=str(display_name or "").strip(),
            created_by=_resolve_account(created_by, field_name="created_by"),
            clinic=clinic,
        )
    except IntegrityError as exc:
        raise ValueError("account_id already exists.") from exc


@transaction.atomic
def create_clinic(*, clinic_id: str, name: str, owner_id: str | None = None) -> Clinic:
    try:
        return Clinic.objects.create(
            clinic_id=_ensure_string(clinic_id, field_name="clinic_id"),
            name=_ensure_string(name, field_name="name"),
            owner=_resolve_account(owner_id, field_name="owner_id"),
        )
    except IntegrityError as exc:
        raise ValueError("clinic_id already exists.") from exc


def issue_access_token(*, account_id: str, token: str) -> AccessToken:
    account = _resolve_account(account_id, field_name="account_id")
    try:
        return AccessToken.objects.create(
            token_hash=hash_token(token),
            account=account,
            status=AccessTokenStatus.ACTIVE,
        )
    except IntegrityError as exc:
        raise ValueError("Token hash already exists.") from exc


def revoke_access_token(*, token: str) -> AccessToken | None:
    access_token = AccessToken.objects.filter(token_hash=hash_token(token)).first()
    if access_token is None:
        return None
    if access_token.status == AccessTokenStatus.REVOKED:
        return access_token
    access_token.status = AccessTokenStatus.REVOKED
    access_token.revoked_at = timezone.now()
    access_token.save(update_fields=["status", "revoked_at"])
    return access_token
