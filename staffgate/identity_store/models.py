"""
Staffgate Identity Store - Relational Identity State
====================================================
Accounts (every role), clinics with their owning account, and hashed
bearer tokens.
"""

from __future__ import annotations

import uuid

from django.db import models


class AccountRole(models.TextChoices):
    ADMIN = "admin", "Admin"
    CLINIC = "clinic", "Clinic"
    DOCTOR = "doctor", "Doctor"
    AGENT = "agent", "Agent"
    STAFF = "staff", "Staff"
    DOCTOR_STAFF = "doctorStaff", "Doctor Staff"


class AccessTokenStatus(models.TextChoices):
    ACTIVE = "ACTIVE", "Active"
    REVOKED = "REVOKED", "Revoked"


class Clinic(models.Model):
    clinic_id = models.CharField(primary_key=True, max_length=255)
    name = models.CharField(max_length=255)
    owner = models.ForeignKey(
        "Account",
        on_delete=models.PROTECT,
        related_name="owned_clinics",
        db_column="owner_id",
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "staffgate_identity_clinics"
        ordering = ["clinic_id"]

    def __str__(self) -> str:
        return f"{self.clinic_id} ({self.name})"


class Account(models.Model):
    account_id = models.CharField(primary_key=True, max_length=255)
    role = models.CharField(max_length=20, choices=AccountRole.choices)
    display_name = models.CharField(max_length=255, default="", blank=True)
    created_by = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        related_name="created_accounts",
        db_column="created_by_id",
        null=True,
        blank=True,
    )
    clinic = models.ForeignKey(
        Clinic,
        on_delete=models.PROTECT,
        related_name="members",
        db_column="clinic_id",
        null=True,
        blank=True,
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "staffgate_identity_accounts"
        ordering = ["account_id"]
        indexes = [
            models.Index(fields=["role", "account_id"], name="idx_account_role"),
        ]

    def __str__(self) -> str:
        return f"{self.account_id} ({self.role})"


class AccessToken(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    token_hash = models.CharField(max_length=64, unique=True, db_index=True)
    account = models.ForeignKey(
        Account,
        on_delete=models.PROTECT,
        related_name="access_tokens",
        db_column="account_id",
    )
    status = models.CharField(
        max_length=20,
        choices=AccessTokenStatus.choices,
        default=AccessTokenStatus.ACTIVE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    revoked_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "staffgate_identity_access_tokens"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"
