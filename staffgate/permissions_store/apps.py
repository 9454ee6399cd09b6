"""
Staffgate Permissions Store - App Configuration
===============================================
Persistent per-agent permission grant sets.
"""

from django.apps import AppConfig


class StaffgatePermissionsStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffgate.permissions_store"
    label = "staffgate_permissions_store"
    verbose_name = "Staffgate Permissions Store"
