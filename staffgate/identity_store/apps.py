"""
Staffgate Identity Store - App Configuration
============================================
Accounts, clinics and bearer access tokens.
"""

from django.apps import AppConfig


class StaffgateIdentityStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffgate.identity_store"
    label = "staffgate_identity_store"
    verbose_name = "Staffgate Identity Store"
