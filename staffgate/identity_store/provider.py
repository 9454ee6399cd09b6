"""
Staffgate Identity Store - DB-backed Identity Provider
======================================================
Resolves bearer tokens and account ids from persistent identity storage.
"""

from __future__ import annotations

from staffgate.identity.models import Identity
from staffgate.identity_store.models import AccessTokenStatus, AccountRole
from staffgate.identity_store.service import hash_token


def _account_to_identity(account) -> Identity:
    clinic_id = account.clinic_id
    if account.role == AccountRole.CLINIC:
        owned = account.owned_clinics.order_by("clinic_id").first()
        if owned is not None:
            clinic_id = owned.clinic_id

    return Identity(
        identity_id=account.account_id,
        role=account.role,
        created_by=account.created_by_id,
        clinic_id=clinic_id,
        is_active=bool(account.is_active),
    )


class DbIdentityProvider:
    def resolve_token(self, token: str) -> Identity | None:
        if not isinstance(token, str) or not token.strip():
            return None

        from staffgate.identity_store.models import AccessToken

        access_token = (
            AccessToken.objects.select_related("account")
            .filter(
                token_hash=hash_token(token),
                status=AccessTokenStatus.ACTIVE,
            )
            .first()
        )
        if access_token is None or not access_token.account.is_active:
            return None
        return _account_to_identity(access_token.account)

    def get_identity(self, identity_id: str) -> Identity | None:
        if not isinstance(identity_id, str) or not identity_id.strip():
            return None

        from staffgate.identity_store.models import Account

        account = Account.objects.filter(account_id=identity_id.strip()).first()
        if account is None:
            return None
        return _account_to_identity(account)
