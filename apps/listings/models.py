"""Listing domain models for StayFinder."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.db.models import F  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Listing(models.Model):
    """A property offered for short-term rent by a host."""

    class Status(models.TextChoices):
        LIVE = "live", _("Live")
        PAUSED = "paused", _("Paused")
        REJECTED = "rejected", _("Rejected")
        PENDING = "pending", _("Pending review")

    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="listings",
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    category = models.CharField(max_length=50, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Price per night."),
    )
    guests = models.PositiveSmallIntegerField(default=1, help_text=_("Maximum number of guests."))
    bedrooms = models.PositiveSmallIntegerField(default=1)
    bathrooms = models.PositiveSmallIntegerField(default=1)
    amenities = models.JSONField(default=dict, blank=True, help_text=_("Amenity name -> available."))
    house_rules = models.JSONField(default=dict, blank=True)
    images = models.JSONField(default=list, blank=True, help_text=_("Image URLs."))
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal("0.00"))
    views = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.LIVE)
    rejection_reason = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="listings_li_status_5b0e1d_idx"),
            models.Index(fields=["host", "status"], name="listings_li_host_id_8c2f4a_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    def register_view(self) -> None:
        """Atomically bump the view counter."""
        Listing.objects.filter(pk=self.pk).update(views=F("views") + 1)
        self.refresh_from_db(fields=["views"])

    def set_status(self, status: str, reason: str = "") -> None:
        self.status = status
        self.rejection_reason = reason if status == self.Status.REJECTED else ""
        self.save(update_fields=["status", "rejection_reason", "updated_at"])
