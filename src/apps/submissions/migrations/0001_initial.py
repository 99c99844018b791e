"""Initial migration for submissions app - Submission model."""

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Submission",
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
                ("name", models.TextField()),
                ("business", models.TextField()),
                ("service", models.TextField()),
                ("phone", models.TextField()),
                ("message", models.TextField(blank=True, default="")),
                ("timestamp", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("status", models.CharField(default="new", max_length=32)),
            ],
            options={
                "verbose_name": "submission",
                "verbose_name_plural": "submissions",
                "db_table": "submissions",
                "ordering": ["-timestamp", "-id"],
            },
        ),
    ]
