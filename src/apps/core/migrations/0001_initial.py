"""Initial migration for core app - SiteContent model."""

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SiteContent",
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
                (
                    "section",
                    models.CharField(
                        choices=[
                            ("hero", "Hero"),
                            ("services", "Services"),
                            ("portfolio", "Portfolio"),
                            ("contact", "Contact"),
                        ],
                        max_length=50,
                        unique=True,
                    ),
                ),
                ("data", models.JSONField(default=dict)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "site content section",
                "verbose_name_plural": "site content",
                "ordering": ["section"],
            },
        ),
    ]
