from __future__ import annotations

import pytest

from staffgate.identity_store.models import AccessToken, AccessTokenStatus
from staffgate.identity_store.provider import DbIdentityProvider
from staffgate.identity_store.service import (
    create_account,
    create_clinic,
    hash_token,
    issue_access_token,
    revoke_access_token,
)

pytestmark = pytest.mark.django_db(transaction=True)


def _bootstrap() -> None:
    create_account(account_id="admin-1", role="admin")
    create_account(account_id="clinic-owner", role="clinic")
    create_clinic(clinic_id="clinic-1", name="Sunrise Clinic", owner_id="clinic-owner")
    create_account(
        account_id="agent-1",
        role="agent",
        created_by="clinic-owner",
        clinic_id="clinic-1",
    )


def test_token_is_stored_hashed() -> None:
    _bootstrap()
    issue_access_token(account_id="agent-1", token="agent-secret")

    row = AccessToken.objects.get(account_id="agent-1")
    assert row.token_hash == hash_token("agent-secret")
    assert row.token_hash != "agent-secret"
    assert len(row.token_hash) == 64


def test_resolve_token_returns_agent_identity() -> None:
    _bootstrap()
    issue_access_token(account_id="agent-1", token="agent-secret")

    identity = DbIdentityProvider().resolve_token("agent-secret")

    assert identity.identity_id == "agent-1"
    assert identity.role == "agent"
    assert identity.created_by == "clinic-owner"
    assert identity.clinic_id == "clinic-1"
    assert identity.is_agent


def test_clinic_owner_identity_carries_owned_clinic() -> None:
    _bootstrap()

    identity = DbIdentityProvider().get_identity("clinic-owner")

    assert identity.role == "clinic"
    assert identity.clinic_id == "clinic-1"


def test_unknown_or_revoked_tokens_do_not_resolve() -> None:
    _bootstrap()
    issue_access_token(account_id="agent-1", token="agent-secret")
    provider = DbIdentityProvider()

    assert provider.resolve_token("wrong") is None
    assert provider.resolve_token("") is None

    revoked = revoke_access_token(token="agent-secret")
    assert revoked.status == AccessTokenStatus.REVOKED
    assert revoked.revoked_at is not None
    assert provider.resolve_token("agent-secret") is None


def test_inactive_account_token_does_not_resolve() -> None:
    _bootstrap()
    issue_access_token(account_id="agent-1", token="agent-secret")
    from staffgate.identity_store.models import Account

    Account.objects.filter(account_id="agent-1").update(is_active=False)

    assert DbIdentityProvider().resolve_token("agent-secret") is None


def test_get_identity_unknown_returns_none() -> None:
    assert DbIdentityProvider().get_identity("nobody") is None
    assert DbIdentityProvider().get_identity("") is None


def test_service_validation_errors() -> None:
    _bootstrap()

    with pytest.raises(ValueError):
        create_account(account_id="agent-1", role="agent")
    with pytest.raises(ValueError):
        create_account(account_id="x", role="nurse")
    with pytest.raises(ValueError):
        create_account(account_id="y", role="agent", created_by="ghost")
    with pytest.raises(ValueError):
        create_account(account_id="z", role="agent", clinic_id="ghost-clinic")
    with pytest.raises(ValueError):
        issue_access_token(account_id="ghost", token="t")
    assert revoke_access_token(token="never-issued") is None
