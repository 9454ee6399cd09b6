"""
Staffgate Navigation Store - App Configuration
==============================================
Seeded per-role navigation catalog.
"""

from django.apps import AppConfig


class StaffgateNavigationStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffgate.navigation_store"
    label = "staffgate_navigation_store"
    verbose_name = "Staffgate Navigation Store"
