from django.db import migrations, models


ROLE_CHOICES = [
    ("employee", "Employee"),
    ("manager", "Manager"),
    ("hr_manager", "HR Manager"),
    ("company_admin", "Company Admin"),
    ("super_admin", "Super Admin"),
]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CompanyMember",
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
                ("company_id", models.UUIDField()),
                ("user_id", models.CharField(max_length=255)),
                ("role", models.CharField(choices=ROLE_CHOICES, max_length=32)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "hrcore_company_users",
                "ordering": ["company_id", "user_id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("company_id", "user_id"),
                        name="uq_company_user",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="RolePermission",
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
                ("company_id", models.UUIDField()),
                ("role", models.CharField(choices=ROLE_CHOICES, max_length=32)),
                ("permission_key", models.CharField(max_length=64)),
                ("created_by", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "hrcore_role_permissions",
                "ordering": ["company_id", "role", "permission_key"],
                "indexes": [
                    models.Index(
                        fields=["company_id", "role"],
                        name="idx_role_perm_company_role",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("company_id", "role", "permission_key"),
                        name="uq_role_permission",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="UserPermission",
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
                ("company_id", models.UUIDField()),
                ("user_id", models.CharField(max_length=255)),
                ("permission_key", models.CharField(max_length=64)),
                ("granted", models.BooleanField(default=True)),
                ("created_by", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "hrcore_user_permissions",
                "ordering": ["company_id", "user_id", "permission_key"],
                "indexes": [
                    models.Index(
                        fields=["company_id", "user_id"],
                        name="idx_user_perm_company_user",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("company_id", "user_id", "permission_key"),
                        name="uq_user_permission",
                    ),
                ],
            },
        ),
    ]
