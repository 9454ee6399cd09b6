from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NavigationEntry",
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
                ("role", models.CharField(max_length=20)),
                ("module_key", models.CharField(max_length=128)),
                ("label", models.CharField(max_length=255)),
                ("path", models.CharField(blank=True, default="", max_length=512)),
                ("icon", models.CharField(blank=True, default="", max_length=64)),
                ("description", models.CharField(blank=True, default="", max_length=512)),
                ("order", models.IntegerField(default=0)),
                ("sub_modules", models.JSONField(default=list)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "staffgate_navigation_entries",
                "ordering": ["role", "order", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("role", "module_key"),
                        name="uq_navigation_role_module",
                    ),
                ],
            },
        ),
    ]
