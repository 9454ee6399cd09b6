"""
Staffgate Permissions Store - Agent Permission Grants
=====================================================
One row per agent. ``permissions`` holds the ordered module grant list
exactly as the issuer submitted it (after validation).
"""

from __future__ import annotations

from django.db import models


class AgentPermission(models.Model):
    agent_id = models.CharField(max_length=255, unique=True)
    permissions = models.JSONField(default=list)
    granted_by = models.CharField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    last_modified = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "staffgate_agent_permissions"
        ordering = ["agent_id", "id"]
        indexes = [
            models.Index(fields=["is_active", "agent_id"], name="idx_agent_perm_active"),
        ]

    def __str__(self) -> str:
        return f"{self.agent_id} ({'active' if self.is_active else 'inactive'})"
