"""
Staffgate Navigation Store - Navigation Catalog Entries
=======================================================
"""

from __future__ import annotations

from django.db import models


class NavigationEntry(models.Model):
    role = models.CharField(max_length=20)
    module_key = models.CharField(max_length=128)
    label = models.CharField(max_length=255)
    path = models.CharField(max_length=512, blank=True, default="")
    icon = models.CharField(max_length=64, blank=True, default="")
    description = models.CharField(max_length=512, blank=True, default="")
    order = models.IntegerField(default=0)
    sub_modules = models.JSONField(default=list)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "staffgate_navigation_entries"
        ordering = ["role", "order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["role", "module_key"],
                name="uq_navigation_role_module",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.role}:{self.module_key}"
