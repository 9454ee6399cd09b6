"""
Staffgate Permissions - Vocabulary Constants
============================================
Roles, role prefixes and the closed action vocabulary.
"""

from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    ALL = "all"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    PRINT = "print"
    EXPORT = "export"
    APPROVE = "approve"


ACTION_KEYS = tuple(kind.value for kind in ActionKind)

# ── Roles ─────────────────────────────────────────────────────
ROLE_ADMIN = "admin"
ROLE_CLINIC = "clinic"
ROLE_DOCTOR = "doctor"
ROLE_AGENT = "agent"
ROLE_STAFF = "staff"
ROLE_DOCTOR_STAFF = "doctorStaff"

VALID_ROLES = frozenset(
    {
        ROLE_ADMIN,
        ROLE_CLINIC,
        ROLE_DOCTOR,
        ROLE_AGENT,
        ROLE_STAFF,
        ROLE_DOCTOR_STAFF,
    }
)

# Issuers create agents and grant them permissions.
ISSUER_ROLES = (ROLE_ADMIN, ROLE_CLINIC, ROLE_DOCTOR)

# Only these roles go through fine-grained permission checks.
AGENT_ROLES = (ROLE_AGENT, ROLE_DOCTOR_STAFF)

# Order matters: first matching prefix is stripped.
ROLE_PREFIXES = (ROLE_ADMIN, ROLE_CLINIC, ROLE_DOCTOR, ROLE_AGENT)

NAVIGATION_ROLES = ISSUER_ROLES
DEFAULT_NAVIGATION_ROLE = ROLE_CLINIC

STAFF_ROUTE_ROOT = "/staff"
