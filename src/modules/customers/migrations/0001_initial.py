from django.db import migrations, models

import uuid6


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=50)),
                (
                    "middle_name",
                    models.TextField(blank=True, default=None, null=True),
                ),
                ("last_name", models.CharField(max_length=50)),
                ("email_address", models.EmailField(max_length=254)),
                ("phone_number", models.CharField(max_length=16)),
            ],
            options={
                "db_table": "customers",
                "indexes": [
                    models.Index(
                        fields=["email_address"], name="customers_email_idx"
                    )
                ],
            },
        ),
    ]
