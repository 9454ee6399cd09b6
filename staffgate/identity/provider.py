"""
Staffgate Identity - Provider Protocol and In-Memory Provider
=============================================================
Bearer-token to Identity resolution plus identity lookup by id.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol

from staffgate.identity.models import Identity


class IdentityProvider(Protocol):
    def resolve_token(self, token: str) -> Identity | None:
        ...

    def get_identity(self, identity_id: str) -> Identity | None:
        ...


class InMemoryIdentityProvider:
    """
    Deterministic in-memory provider for tests/bootstrap.
    """

    def __init__(
        self,
        identities: Iterable[Identity] | None = None,
        tokens: Mapping[str, str] | None = None,
    ):
        self._identities: dict[str, Identity] = {}
        for identity in identities or ():
            if identity.identity_id in self._identities:
                raise ValueError(f"Duplicate identity_id '{identity.identity_id}'.")
            self._identities[identity.identity_id] = identity

        self._token_to_identity_id: dict[str, str] = {}
        for token, identity_id in dict(tokens or {}).items():
            if not isinstance(token, str) or not token.strip():
                raise ValueError("Token must be a non-empty string.")
            if identity_id not in self._identities:
                raise ValueError(f"Token references unknown identity '{identity_id}'.")
            self._token_to_identity_id[token] = identity_id

    def resolve_token(self, token: str) -> Identity | None:
        if not isinstance(token, str):
            return None
        identity_id = self._token_to_identity_id.get(token)
        if identity_id is None:
            return None
        identity = self._identities.get(identity_id)
        if identity is None or not identity.is_active:
            return None
        return identity

    def get_identity(self, identity_id: str) -> Identity | None:
        if not isinstance(identity_id, str):
            return None
        return self._identities.get(identity_id)
