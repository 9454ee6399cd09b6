"""
Staffgate Navigation - Catalog Item Models
==========================================
Read-only navigation catalog entries. Filtered copies carry the resolved
``actions`` so the UI can render action buttons without re-querying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.models import ActionSet


@dataclass(frozen=True)
class NavigationSubItem:
    name: str
    path: str = ""
    icon: str = ""
    order: int = 0
    actions: Optional[ActionSet] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument("sub-module name must be a non-empty string.")
        if self.actions is not None and not isinstance(self.actions, ActionSet):
            raise InvalidArgument("actions must be ActionSet or None.")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NavigationSubItem":
        return cls(
            name=str(data.get("name") or data.get("label") or ""),
            path=str(data.get("path") or ""),
            icon=str(data.get("icon") or ""),
            order=int(data.get("order") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "icon": self.icon,
            "order": self.order,
            "permissions": None if self.actions is None else self.actions.to_dict(),
        }


@dataclass(frozen=True)
class NavigationItem:
    label: str
    module_key: str
    path: str = ""
    icon: str = ""
    description: str = ""
    order: int = 0
    role: Optional[str] = None
    is_active: bool = True
    sub_modules: tuple[NavigationSubItem, ...] = field(default_factory=tuple)
    actions: Optional[ActionSet] = None

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidArgument("label must be a non-empty string.")
        if not isinstance(self.module_key, str) or not self.module_key.strip():
            raise InvalidArgument("module_key must be a non-empty string.")
        if not isinstance(self.sub_modules, tuple):
            raise InvalidArgument("sub_modules must be a tuple.")
        if self.actions is not None and not isinstance(self.actions, ActionSet):
            raise InvalidArgument("actions must be ActionSet or None.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "path": self.path or None,
            "icon": self.icon,
            "description": self.description,
            "order": self.order,
            "moduleKey": self.module_key,
            "subModules": [sub_module.to_dict() for sub_module in self.sub_modules],
            "permissions": None if self.actions is None else self.actions.to_dict(),
        }


@dataclass(frozen=True)
class SeedResult:
    role: str
    inserted: int
    updated: int
    total_templates: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "inserted": self.inserted,
            "updated": self.updated,
            "totalTemplates": self.total_templates,
        }
