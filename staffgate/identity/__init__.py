"""
Staffgate Identity - Public API
===============================
"""

from staffgate.identity.models import Identity
from staffgate.identity.policy import (
    authorize_issuer,
    authorize_navigation_seed,
    navigation_role_for,
)
from staffgate.identity.provider import IdentityProvider, InMemoryIdentityProvider

__all__ = [
    "Identity",
    "IdentityProvider",
    "InMemoryIdentityProvider",
    "authorize_issuer",
    "authorize_navigation_seed",
    "navigation_role_for",
]
