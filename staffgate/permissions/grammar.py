"""
Staffgate Permissions - Module/Action Grammar
=============================================
Canonical module-key comparison and action vocabulary parsing.

Grants may be stored with a different role prefix than the one used to
query them ("clinic_marketing" vs "marketing" vs "doctor_marketing").
All of that fallback matching lives here.
"""

from __future__ import annotations

import re
from typing import Any

from staffgate.permissions.constants import ROLE_PREFIXES, ActionKind
from staffgate.permissions.exceptions import InvalidActionKind

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def _split_role_prefix(key: str) -> tuple[str | None, str]:
    lowered = key.lower()
    for role in ROLE_PREFIXES:
        token = f"{role}_"
        if lowered.startswith(token):
            return role, key[len(token):]
    return None, key


def strip_role_prefix(key: Any) -> str:
    """
    Remove one leading role token (admin_, clinic_, doctor_, agent_)
    and case-fold. Never fails; None becomes "".
    """
    if key is None:
        return ""
    _, bare = _split_role_prefix(str(key).strip())
    return bare.lower()


def keys_match(a: Any, b: Any, candidate_role: str | None = None) -> bool:
    if a is None or b is None:
        return False
    left = str(a).strip()
    right = str(b).strip()
    if not left or not right:
        return False

    if left == right:
        return True

    bare = strip_role_prefix(left)
    if bare and bare == strip_role_prefix(right):
        return True

    if candidate_role:
        if f"{candidate_role}_{left}" == right or f"{candidate_role}_{right}" == left:
            return True

    return False


def prefix_module_key(role: str, key: str) -> str:
    """Role-namespaced key; an existing role prefix is replaced, case kept."""
    _, bare = _split_role_prefix(str(key).strip())
    return f"{role}_{bare}"


def slugify_module_key(label: str) -> str:
    return _SLUG_PATTERN.sub("_", str(label).lower()).strip("_")


def parse_action(action: Any) -> ActionKind:
    if isinstance(action, ActionKind):
        return action
    if not isinstance(action, str):
        raise InvalidActionKind(action)
    try:
        return ActionKind(action.strip().lower())
    except ValueError:
        raise InvalidActionKind(action) from None
