"""
Staffgate Permissions - Immutable Grant Models
==============================================
ActionSet, SubModuleGrant, ModuleGrant and PermissionGrantSet.

Payload parsing (``from_payload``) accepts the loosely-typed JSON the
issuer UI sends ("module" or "moduleKey", "subModules", string booleans)
and rejects anything outside the closed action vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from staffgate.permissions.constants import ACTION_KEYS, ActionKind
from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.grammar import parse_action, strip_role_prefix

_TRUE_STRINGS = frozenset({"true"})
_FALSE_STRINGS = frozenset({"false", ""})


def _coerce_flag(value: Any, *, field_name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidArgument(f"{field_name} must be a boolean.")


def _ensure_string(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field_name} must be a non-empty string.")
    return value.strip()


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_order(value: Any, *, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    return default


def normalize_sub_module_name(name: Any) -> str:
    return str(name or "").strip().casefold()


@dataclass(frozen=True)
class ActionSet:
    all: bool = False
    create: bool = False
    read: bool = False
    update: bool = False
    delete: bool = False
    print: bool = False
    export: bool = False
    approve: bool = False

    def __post_init__(self):
        for key in ACTION_KEYS:
            if not isinstance(getattr(self, key), bool):
                raise InvalidArgument(f"actions.{key} must be a boolean.")

    @classmethod
    def full(cls) -> "ActionSet":
        return cls(**{key: True for key in ACTION_KEYS})

    @classmethod
    def from_payload(cls, payload: Any) -> "ActionSet":
        if isinstance(payload, ActionSet):
            return payload
        if not isinstance(payload, Mapping):
            raise InvalidArgument("actions must be an object.")

        flags: dict[str, bool] = {}
        for raw_key, raw_value in payload.items():
            kind = parse_action(raw_key)
            flags[kind.value] = _coerce_flag(raw_value, field_name=f"actions.{kind.value}")
        return cls(**flags)

    def flag(self, action: ActionKind | str) -> bool:
        return bool(getattr(self, parse_action(action).value))

    def allows(self, action: ActionKind | str) -> bool:
        """Specific action OR the blanket ``all`` flag."""
        return self.all or self.flag(action)

    def has_any(self) -> bool:
        return any(getattr(self, key) for key in ACTION_KEYS)

    def to_dict(self) -> dict[str, bool]:
        return {key: getattr(self, key) for key in ACTION_KEYS}


@dataclass(frozen=True)
class SubModuleGrant:
    name: str
    actions: ActionSet = field(default_factory=ActionSet)
    path: str = ""
    icon: str = ""
    order: int = 0

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument("subModule name must be a non-empty string.")
        if not isinstance(self.actions, ActionSet):
            raise InvalidArgument("subModule actions must be ActionSet.")

    def matches(self, name: Any) -> bool:
        return normalize_sub_module_name(self.name) == normalize_sub_module_name(name)

    @classmethod
    def from_payload(cls, payload: Any) -> "SubModuleGrant":
        if not isinstance(payload, Mapping):
            raise InvalidArgument("subModules items must be objects.")
        return cls(
            name=_ensure_string(payload.get("name"), field_name="subModule name"),
            actions=ActionSet.from_payload(payload.get("actions") or {}),
            path=_optional_text(payload.get("path")),
            icon=_optional_text(payload.get("icon")),
            order=_optional_order(payload.get("order")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "icon": self.icon,
            "order": self.order,
            "actions": self.actions.to_dict(),
        }


@dataclass(frozen=True)
class ModuleGrant:
    module_key: str
    actions: ActionSet = field(default_factory=ActionSet)
    sub_modules: tuple[SubModuleGrant, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.module_key, str) or not strip_role_prefix(self.module_key):
            raise InvalidArgument("Each permission must have a module")
        if not isinstance(self.actions, ActionSet):
            raise InvalidArgument("Each permission must have actions object")
        if not isinstance(self.sub_modules, tuple):
            raise InvalidArgument("subModules must be an array")
        for sub_module in self.sub_modules:
            if not isinstance(sub_module, SubModuleGrant):
                raise InvalidArgument("subModules items must be SubModuleGrant.")

    @classmethod
    def from_payload(cls, payload: Any) -> "ModuleGrant":
        if isinstance(payload, ModuleGrant):
            return payload
        if not isinstance(payload, Mapping):
            raise InvalidArgument("Each permission must be an object")

        module_key = payload.get("module") or payload.get("moduleKey") or payload.get("module_key")
        if not isinstance(module_key, str) or not module_key.strip():
            raise InvalidArgument("Each permission must have a module")

        actions = payload.get("actions")
        if not isinstance(actions, Mapping):
            raise InvalidArgument("Each permission must have actions object")

        raw_sub_modules = payload.get("subModules", payload.get("sub_modules"))
        if raw_sub_modules is None:
            raw_sub_modules = []
        if not isinstance(raw_sub_modules, (list, tuple)):
            raise InvalidArgument("subModules must be an array")

        name = payload.get("name") or payload.get("label")
        return cls(
            module_key=module_key.strip(),
            actions=ActionSet.from_payload(actions),
            sub_modules=tuple(SubModuleGrant.from_payload(item) for item in raw_sub_modules),
            name=None if name is None else str(name),
        )

    def find_sub_module(self, name: Any) -> SubModuleGrant | None:
        for sub_module in self.sub_modules:
            if sub_module.matches(name):
                return sub_module
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "module": self.module_key,
            "actions": self.actions.to_dict(),
            "subModules": [sub_module.to_dict() for sub_module in self.sub_modules],
        }
        if self.name is not None:
            data["name"] = self.name
        return data


@dataclass(frozen=True)
class PermissionGrantSet:
    agent_id: str
    modules: tuple[ModuleGrant, ...] = field(default_factory=tuple)
    granted_by: Optional[str] = None
    is_active: bool = True
    last_modified: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.agent_id, str) or not self.agent_id.strip():
            raise InvalidArgument("agent_id must be a non-empty string.")
        if not isinstance(self.modules, tuple):
            raise InvalidArgument("modules must be a tuple.")
        for module in self.modules:
            if not isinstance(module, ModuleGrant):
                raise InvalidArgument("modules items must be ModuleGrant.")
        if not isinstance(self.is_active, bool):
            raise InvalidArgument("is_active must be a boolean.")

    @property
    def is_empty(self) -> bool:
        """Inactive sets count as empty."""
        return not self.is_active or not self.modules

    @classmethod
    def from_payload(
        cls,
        *,
        agent_id: str,
        modules: Any,
        granted_by: Optional[str] = None,
        is_active: bool = True,
        last_modified: Optional[datetime] = None,
    ) -> "PermissionGrantSet":
        if not isinstance(modules, (list, tuple)):
            raise InvalidArgument("Permissions array is required")
        return cls(
            agent_id=agent_id,
            modules=tuple(ModuleGrant.from_payload(item) for item in modules),
            granted_by=granted_by,
            is_active=is_active,
            last_modified=last_modified,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "agentId": self.agent_id,
            "grantedBy": self.granted_by,
            "isActive": self.is_active,
            "lastModified": (
                None if self.last_modified is None else self.last_modified.isoformat()
            ),
            "permissions": [module.to_dict() for module in self.modules],
        }
