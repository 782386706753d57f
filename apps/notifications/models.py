"""Notification model.

Notifications are created as a side effect of booking and listing state
changes and consumed by their addressee. Apart from the read flag they are
never modified; read notifications past the retention window are purged by
a periodic task.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Notification(models.Model):
    """A message sent to a user about some event."""

    class Type(models.TextChoices):
        BOOKING_REQUEST = "booking_request", _("Booking request")
        BOOKING_CREATED = "booking_created", _("Booking created")
        BOOKING_APPROVED = "booking_approved", _("Booking approved")
        BOOKING_CONFIRMED = "booking_confirmed", _("Booking confirmed")
        BOOKING_REJECTED = "booking_rejected", _("Booking rejected")
        BOOKING_PAUSED = "booking_paused", _("Booking paused")
        BOOKING_CANCELLED = "booking_cancelled", _("Booking cancelled")
        PROPERTY_APPROVED = "property_approved", _("Property approved")
        PROPERTY_REJECTED = "property_rejected", _("Property rejected")
        PROPERTY_PAUSED = "property_paused", _("Property paused")
        PROPERTY_ACTIVATED = "property_activated", _("Property activated")
        PROPERTY_DELETED = "property_deleted", _("Property deleted")
        SYSTEM = "system", _("System")

    class Priority(models.TextChoices):
        LOW = "low", _("Low")
        MEDIUM = "medium", _("Medium")
        HIGH = "high", _("High")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications"
    )
    type = models.CharField(max_length=40, choices=Type.choices, default=Type.SYSTEM)
    title = models.CharField(max_length=255)
    message = models.TextField()
    data = models.JSONField(default=dict, blank=True)
    priority = models.CharField(max_length=10, choices=Priority.choices, default=Priority.MEDIUM)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["user", "is_read"], name="notificatio_user_id_3f9a1c_idx")]

    def __str__(self) -> str:
        return f"Notification to {self.user_id}: {self.title}"
