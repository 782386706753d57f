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
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("booking_request", "Booking request"),
                            ("booking_created", "Booking created"),
                            ("booking_approved", "Booking approved"),
                            ("booking_confirmed", "Booking confirmed"),
                            ("booking_rejected", "Booking rejected"),
                            ("booking_paused", "Booking paused"),
                            ("booking_cancelled", "Booking cancelled"),
                            ("property_approved", "Property approved"),
                            ("property_rejected", "Property rejected"),
                            ("property_paused", "Property paused"),
                            ("property_activated", "Property activated"),
                            ("property_deleted", "Property deleted"),
                            ("system", "System"),
                        ],
                        default="system",
                        max_length=40,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField()),
                ("data", models.JSONField(blank=True, default=dict)),
                (
                    "priority",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        default="medium",
                        max_length=10,
                    ),
                ),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["user", "is_read"], name="notificatio_user_id_3f9a1c_idx")],
            },
        ),
    ]
