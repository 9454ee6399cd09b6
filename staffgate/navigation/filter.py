"""
Staffgate Navigation - Navigation Filter
========================================
Prunes a role's navigation catalog down to what an agent's grant set
permits, attaches resolved actions and rewrites paths into /staff.

Rules per top-level item:
- module-level "all" keeps every sub-module, granted or not;
- otherwise only sub-modules with at least one truthy action survive;
- the item survives with any module-level action OR any surviving
  sub-module.

No grants means no navigation. Output keeps the input order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from staffgate.navigation.models import NavigationItem, NavigationSubItem
from staffgate.navigation.paths import convert_path_to_staff
from staffgate.permissions.models import ActionSet, ModuleGrant, PermissionGrantSet
from staffgate.permissions.resolver import find_module_grant, has_any_action

logger = logging.getLogger("staffgate.navigation")


def _filter_sub_modules(
    item: NavigationItem,
    module_grant: ModuleGrant,
) -> tuple[NavigationSubItem, ...]:
    module_all_enabled = module_grant.actions.all
    kept: list[NavigationSubItem] = []
    for sub_item in item.sub_modules:
        sub_grant = module_grant.find_sub_module(sub_item.name)
        sub_actions = None if sub_grant is None else sub_grant.actions

        if not module_all_enabled and not has_any_action(sub_actions):
            continue

        if sub_actions is None:
            sub_actions = module_grant.actions

        kept.append(
            NavigationSubItem(
                name=sub_item.name,
                path=convert_path_to_staff(sub_item.path) or "",
                icon=sub_item.icon,
                order=sub_item.order,
                actions=sub_actions,
            )
        )
    return tuple(kept)


def _rewrite_item(
    item: NavigationItem,
    sub_modules: tuple[NavigationSubItem, ...],
    actions: Optional[ActionSet],
) -> NavigationItem:
    return NavigationItem(
        label=item.label,
        module_key=item.module_key,
        path=convert_path_to_staff(item.path) or "",
        icon=item.icon,
        description=item.description,
        order=item.order,
        role=item.role,
        is_active=item.is_active,
        sub_modules=sub_modules,
        actions=actions,
    )


def filter_navigation(
    nav_items: Iterable[NavigationItem],
    grant_set: Optional[PermissionGrantSet],
    navigation_role: Optional[str] = None,
) -> list[NavigationItem]:
    if grant_set is None or grant_set.is_empty:
        return []

    filtered: list[NavigationItem] = []
    for item in nav_items:
        module_grant = find_module_grant(grant_set, item.module_key, navigation_role)
        if module_grant is None:
            continue

        has_module_permission = has_any_action(module_grant.actions)
        sub_modules = _filter_sub_modules(item, module_grant)

        if not has_module_permission and not sub_modules:
            continue

        filtered.append(_rewrite_item(item, sub_modules, module_grant.actions))

    logger.debug(
        "Agent '%s' sees %d navigation item(s).",
        grant_set.agent_id,
        len(filtered),
    )
    return filtered


def unfiltered_navigation(nav_items: Iterable[NavigationItem]) -> list[NavigationItem]:
    """Issuer roles see their own full catalog, rewritten into /staff."""
    return [
        _rewrite_item(
            item,
            tuple(
                NavigationSubItem(
                    name=sub_item.name,
                    path=convert_path_to_staff(sub_item.path) or "",
                    icon=sub_item.icon,
                    order=sub_item.order,
                )
                for sub_item in item.sub_modules
            ),
            None,
        )
        for item in nav_items
    ]
