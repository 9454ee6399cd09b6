"""
Staffgate Django HTTP adapter.
Thin framework glue over staffgate/http_api handlers.
"""

from adapters.django_api.wiring import (
    DEV_ADMIN_TOKEN,
    DEV_AGENT_TOKEN,
    DEV_CLINIC_ID,
    DEV_CLINIC_TOKEN,
    DEV_DOCTOR_STAFF_TOKEN,
    build_dependencies,
    reset_dependencies,
)

__all__ = [
    "DEV_ADMIN_TOKEN",
    "DEV_CLINIC_TOKEN",
    "DEV_AGENT_TOKEN",
    "DEV_DOCTOR_STAFF_TOKEN",
    "DEV_CLINIC_ID",
    "build_dependencies",
    "reset_dependencies",
]
