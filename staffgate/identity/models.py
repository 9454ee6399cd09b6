"""
Staffgate Identity - Identity Model
===================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from staffgate.permissions.constants import AGENT_ROLES, ISSUER_ROLES, VALID_ROLES
from staffgate.permissions.exceptions import InvalidArgument


@dataclass(frozen=True)
class Identity:
    identity_id: str
    role: str
    created_by: Optional[str] = None
    clinic_id: Optional[str] = None
    is_active: bool = True

    def __post_init__(self):
        if not self.identity_id or not isinstance(self.identity_id, str):
            raise InvalidArgument("identity_id must be a non-empty string.")
        if self.role not in VALID_ROLES:
            raise InvalidArgument(
                f"role '{self.role}' not valid. "
                f"Must be one of: {sorted(VALID_ROLES)}"
            )
        if self.created_by is not None and not isinstance(self.created_by, str):
            raise InvalidArgument("created_by must be a string or None.")
        if self.clinic_id is not None and not isinstance(self.clinic_id, str):
            raise InvalidArgument("clinic_id must be a string or None.")

    @property
    def is_agent(self) -> bool:
        return self.role in AGENT_ROLES

    @property
    def is_issuer(self) -> bool:
        return self.role in ISSUER_ROLES
