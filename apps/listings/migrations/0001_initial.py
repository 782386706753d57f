import decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=255)),
                ("category", models.CharField(blank=True, max_length=50)),
                ("latitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Price per night.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(decimal.Decimal("0.00"))],
                    ),
                ),
                ("guests", models.PositiveSmallIntegerField(default=1, help_text="Maximum number of guests.")),
                ("bedrooms", models.PositiveSmallIntegerField(default=1)),
                ("bathrooms", models.PositiveSmallIntegerField(default=1)),
                ("amenities", models.JSONField(blank=True, default=dict, help_text="Amenity name -> available.")),
                ("house_rules", models.JSONField(blank=True, default=dict)),
                ("images", models.JSONField(blank=True, default=list, help_text="Image URLs.")),
                ("rating", models.DecimalField(decimal_places=2, default=decimal.Decimal("0.00"), max_digits=3)),
                ("views", models.PositiveIntegerField(default=0)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("live", "Live"),
                            ("paused", "Paused"),
                            ("rejected", "Rejected"),
                            ("pending", "Pending review"),
                        ],
                        default="live",
                        max_length=20,
                    ),
                ),
                ("rejection_reason", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "host",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="listings_li_status_5b0e1d_idx"),
                    models.Index(fields=["host", "status"], name="listings_li_host_id_8c2f4a_idx"),
                ],
            },
        ),
    ]
