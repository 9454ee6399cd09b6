"""
Staffgate Navigation - DB-backed Catalog
========================================
Reads and seeds the relational navigation catalog.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from staffgate.navigation.catalog import build_seed_items, default_templates
from staffgate.navigation.models import NavigationItem, NavigationSubItem, SeedResult

logger = logging.getLogger("staffgate.navigation")


def _entry_to_item(entry) -> NavigationItem:
    return NavigationItem(
        label=entry.label,
        module_key=entry.module_key,
        path=entry.path,
        icon=entry.icon,
        description=entry.description,
        order=entry.order,
        role=entry.role,
        is_active=bool(entry.is_active),
        sub_modules=tuple(
            NavigationSubItem.from_dict(sub_module)
            for sub_module in (entry.sub_modules or [])
            if isinstance(sub_module, dict)
        ),
    )


def _sub_modules_payload(item: NavigationItem) -> list[dict[str, Any]]:
    return [
        {
            "name": sub_module.name,
            "path": sub_module.path,
            "icon": sub_module.icon,
            "order": sub_module.order,
        }
        for sub_module in item.sub_modules
    ]


class DbNavigationCatalog:
    def items_for_role(self, role: str) -> tuple[NavigationItem, ...]:
        from staffgate.navigation_store.models import NavigationEntry

        rows = NavigationEntry.objects.filter(role=role, is_active=True).order_by(
            "order", "id"
        )
        return tuple(_entry_to_item(row) for row in rows)

    def seed_navigation(
        self,
        role: str,
        templates: Iterable[Mapping[str, Any]] | None = None,
    ) -> SeedResult:
        from django.db import transaction

        from staffgate.navigation_store.models import NavigationEntry

        seed_items = build_seed_items(
            role,
            default_templates(role) if templates is None else templates,
        )
        inserted = 0
        updated = 0
        with transaction.atomic():
            for item in seed_items:
                payload = {
                    "label": item.label,
                    "path": item.path,
                    "icon": item.icon,
                    "description": item.description,
                    "order": item.order,
                    "sub_modules": _sub_modules_payload(item),
                    "is_active": True,
                }
                existing = (
                    NavigationEntry.objects.select_for_update()
                    .filter(role=role, module_key=item.module_key)
                    .first()
                )
                if existing is None:
                    NavigationEntry.objects.create(
                        role=role,
                        module_key=item.module_key,
                        **payload,
                    )
                    inserted += 1
                    continue

                changed = [
                    field_name
                    for field_name, value in payload.items()
                    if getattr(existing, field_name) != value
                ]
                if not changed:
                    continue
                for field_name in changed:
                    setattr(existing, field_name, payload[field_name])
                existing.save(update_fields=[*changed, "updated_at"])
                updated += 1

        logger.info(
            "Seeded %s navigation: %d inserted, %d updated.",
            role,
            inserted,
            updated,
        )
        return SeedResult(
            role=role,
            inserted=inserted,
            updated=updated,
            total_templates=len(seed_items),
        )
