"""
Staffgate Navigation - Catalog Protocol, Seeding and In-Memory Catalog
======================================================================
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, Mapping, Protocol

from staffgate.navigation.models import NavigationItem, NavigationSubItem, SeedResult
from staffgate.navigation.templates import NAVIGATION_TEMPLATES_BY_ROLE
from staffgate.permissions.constants import NAVIGATION_ROLES
from staffgate.permissions.exceptions import InvalidArgument
from staffgate.permissions.grammar import prefix_module_key, slugify_module_key


class NavigationCatalog(Protocol):
    def items_for_role(self, role: str) -> tuple[NavigationItem, ...]:
        ...

    def seed_navigation(
        self,
        role: str,
        templates: Iterable[Mapping[str, Any]] | None = None,
    ) -> SeedResult:
        ...


def _template_order(value: Any, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def build_seed_items(
    role: str,
    templates: Iterable[Mapping[str, Any]],
) -> tuple[NavigationItem, ...]:
    """
    Turn menu templates into catalog items with role-prefixed module keys.
    Missing module keys are derived from the label.
    """
    if role not in NAVIGATION_ROLES:
        raise InvalidArgument("Invalid role. Must be admin, clinic, or doctor")

    items: list[NavigationItem] = []
    for index, template in enumerate(templates, start=1):
        label = str(template.get("label") or "").strip()
        module_key = template.get("moduleKey") or slugify_module_key(label)
        children = template.get("children") or ()
        items.append(
            NavigationItem(
                label=label,
                module_key=prefix_module_key(role, module_key),
                path=str(template.get("path") or "").strip(),
                icon=str(template.get("icon") or ""),
                description=str(template.get("description") or ""),
                order=_template_order(template.get("order"), index),
                role=role,
                is_active=True,
                sub_modules=tuple(
                    NavigationSubItem(
                        name=str(child.get("label") or child.get("name") or ""),
                        path=str(child.get("path") or ""),
                        icon=str(child.get("icon") or ""),
                        order=_template_order(child.get("order"), child_index),
                    )
                    for child_index, child in enumerate(children, start=1)
                ),
            )
        )
    return tuple(items)


def default_templates(role: str) -> tuple[Mapping[str, Any], ...]:
    templates = NAVIGATION_TEMPLATES_BY_ROLE.get(role)
    if templates is None:
        raise InvalidArgument("Invalid role. Must be admin, clinic, or doctor")
    return templates


def sort_catalog_items(items: Iterable[NavigationItem]) -> tuple[NavigationItem, ...]:
    return tuple(sorted(items, key=lambda item: item.order))


class InMemoryNavigationCatalog:
    """
    Deterministic in-memory catalog for bootstrap/tests.
    Items are keyed by (role, module_key).
    """

    def __init__(self, items: Iterable[NavigationItem] | None = None):
        self._items: dict[tuple[str, str], NavigationItem] = {}
        self._lock = threading.Lock()
        for item in items or ():
            if item.role is None:
                raise ValueError(f"Navigation item '{item.module_key}' has no role.")
            self._items[(item.role, item.module_key)] = item

    def items_for_role(self, role: str) -> tuple[NavigationItem, ...]:
        return sort_catalog_items(
            item
            for (item_role, _), item in self._items.items()
            if item_role == role and item.is_active
        )

    def seed_navigation(
        self,
        role: str,
        templates: Iterable[Mapping[str, Any]] | None = None,
    ) -> SeedResult:
        seed_items = build_seed_items(
            role,
            default_templates(role) if templates is None else templates,
        )
        inserted = 0
        updated = 0
        with self._lock:
            for item in seed_items:
                key = (role, item.module_key)
                existing = self._items.get(key)
                if existing is None:
                    inserted += 1
                elif existing != item:
                    updated += 1
                else:
                    continue
                self._items[key] = item
        return SeedResult(
            role=role,
            inserted=inserted,
            updated=updated,
            total_templates=len(seed_items),
        )
