import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                (
                    "account_id",
                    models.CharField(max_length=255, primary_key=True, serialize=False),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("admin", "Admin"),
                            ("clinic", "Clinic"),
                            ("doctor", "Doctor"),
                            ("agent", "Agent"),
                            ("staff", "Staff"),
                            ("doctorStaff", "Doctor Staff"),
                        ],
                        max_length=20,
                    ),
                ),
                ("display_name", models.CharField(blank=True, default="", max_length=255)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        db_column="created_by_id",
                        null=True,
                        on_delete=models.deletion.PROTECT,
                        related_name="created_accounts",
                        to="staffgate_identity_store.account",
                    ),
                ),
            ],
            options={
                "db_table": "staffgate_identity_accounts",
                "ordering": ["account_id"],
            },
        ),
        migrations.CreateModel(
            name="Clinic",
            fields=[
                (
                    "clinic_id",
                    models.CharField(max_length=255, primary_key=True, serialize=False),
                ),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        db_column="owner_id",
                        null=True,
                        on_delete=models.deletion.PROTECT,
                        related_name="owned_clinics",
                        to="staffgate_identity_store.account",
                    ),
                ),
            ],
            options={
                "db_table": "staffgate_identity_clinics",
                "ordering": ["clinic_id"],
            },
        ),
        migrations.AddField(
            model_name="account",
            name="clinic",
            field=models.ForeignKey(
                blank=True,
                db_column="clinic_id",
                null=True,
                on_delete=models.deletion.PROTECT,
                related_name="members",
                to="staffgate_identity_store.clinic",
            ),
        ),
        migrations.AddIndex(
            model_name="account",
            index=models.Index(fields=["role", "account_id"], name="idx_account_role"),
        ),
        migrations.CreateModel(
            name="AccessToken",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "token_hash",
                    models.CharField(db_index=True, max_length=64, unique=True),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("ACTIVE", "Active"), ("REVOKED", "Revoked")],
                        default="ACTIVE",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("revoked_at", models.DateTimeField(blank=True, null=True)),
                (
                    "account",
                    models.ForeignKey(
                        db_column="account_id",
                        on_delete=models.deletion.PROTECT,
                        related_name="access_tokens",
                        to="staffgate_identity_store.account",
                    ),
                ),
            ],
            options={
                "db_table": "staffgate_identity_access_tokens",
                "ordering": ["created_at", "id"],
            },
        ),
    ]
