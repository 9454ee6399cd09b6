"""
Staffgate Navigation - Staff Route Rewriting
============================================
Issuer routes (/admin/..., /clinic/..., /doctor/...) map onto the flat
agent namespace under /staff.
"""

from __future__ import annotations

import re

from staffgate.permissions.constants import STAFF_ROUTE_ROOT

_REPEATED_DASH = re.compile(r"-{2,}")
_LEADING_SLASHES = re.compile(r"^/+")

# Native namespace -> slug prefix in the staff namespace.
_NAMESPACE_PREFIXES = (
    ("clinic/", "clinic-"),
    ("doctor/", "doctor-"),
    ("agent/", ""),
    ("admin/", ""),
)


def format_slug_segment(segment: str) -> str:
    joined = "-".join(part for part in segment.split("/") if part)
    return _REPEATED_DASH.sub("-", joined)


def convert_path_to_staff(path: str | None) -> str | None:
    if not path:
        return path

    trimmed = _LEADING_SLASHES.sub("", path)
    if trimmed.startswith("staff/"):
        return f"/{trimmed}"

    for namespace, slug_prefix in _NAMESPACE_PREFIXES:
        if trimmed.startswith(namespace):
            relative = trimmed[len(namespace):]
            return f"{STAFF_ROUTE_ROOT}/{slug_prefix}{format_slug_segment(relative)}"

    return f"{STAFF_ROUTE_ROOT}/{format_slug_segment(trimmed)}"
