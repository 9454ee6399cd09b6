from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AgentPermission",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("agent_id", models.CharField(max_length=255, unique=True)),
                ("permissions", models.JSONField(default=list)),
                ("granted_by", models.CharField(blank=True, max_length=255, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("last_modified", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "staffgate_agent_permissions",
                "ordering": ["agent_id", "id"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "agent_id"],
                        name="idx_agent_perm_active",
                    ),
                ],
            },
        ),
    ]
