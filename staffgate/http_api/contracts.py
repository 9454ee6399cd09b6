"""
Staffgate HTTP API - Contracts
==============================
Framework-agnostic request/response DTOs for permission endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from staffgate.permissions.exceptions import InvalidArgument


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(message)
    return value.strip()


def _optional_text(value: Any, *, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidArgument(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True)
class AgentPermissionsReadRequest:
    agent_id: str

    def __post_init__(self):
        object.__setattr__(
            self, "agent_id", _require_text(self.agent_id, "Agent ID is required")
        )


@dataclass(frozen=True)
class AgentPermissionsWriteRequest:
    agent_id: str
    permissions: tuple

    def __post_init__(self):
        object.__setattr__(
            self, "agent_id", _require_text(self.agent_id, "Agent ID is required")
        )
        if isinstance(self.permissions, list):
            object.__setattr__(self, "permissions", tuple(self.permissions))
        if not isinstance(self.permissions, tuple):
            raise InvalidArgument("Permissions array is required")


@dataclass(frozen=True)
class ModulePermissionsRequest:
    module_key: str
    sub_module: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "module_key", _require_text(self.module_key, "Module key is required")
        )
        object.__setattr__(
            self, "sub_module", _optional_text(self.sub_module, field_name="subModule")
        )


@dataclass(frozen=True)
class PermissionCheckRequest:
    module_key: str
    action: str
    sub_module: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "module_key", _require_text(self.module_key, "Module key is required")
        )
        object.__setattr__(
            self, "action", _require_text(self.action, "Action is required")
        )
        object.__setattr__(
            self, "sub_module", _optional_text(self.sub_module, field_name="subModule")
        )


@dataclass(frozen=True)
class NavigationSeedRequest:
    role: str

    def __post_init__(self):
        object.__setattr__(
            self,
            "role",
            _require_text(self.role, "Invalid role. Must be admin, clinic, or doctor"),
        )


@dataclass(frozen=True)
class HttpApiResponse:
    success: bool
    status: int = 200
    data: Any = None
    message: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.success and not self.message:
            raise ValueError("message must be set when success is False.")

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            body: dict[str, Any] = {"success": True, "data": self.data}
            if self.message:
                body["message"] = self.message
            return body
        body = {"success": False, "message": self.message}
        if self.details:
            body["details"] = dict(self.details)
        return body
