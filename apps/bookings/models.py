"""Booking domain models for StayFinder."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A guest's request to stay at a listing for a date range."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        APPROVED = "approved", _("Approved")
        CONFIRMED = "confirmed", _("Confirmed")
        REJECTED = "rejected", _("Rejected")
        CANCELLED = "cancelled", _("Cancelled")
        PAUSED = "paused", _("Paused")

    guest = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="host_bookings",
    )
    # Bookings outlive their listing; readers must null-check.
    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    guests = models.PositiveSmallIntegerField(default=1)
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    rejection_reason = models.CharField(max_length=255, blank=True)
    cancellation_reason = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "check_in", "check_out"], name="bookings_bo_listing_7d1e2b_idx"),
            models.Index(fields=["host", "status"], name="bookings_bo_host_id_4a9c0f_idx"),
            models.Index(fields=["status"], name="bookings_bo_status_e21b6d_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for listing {self.listing_id}"

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def set_status(self, status: str, *, rejection_reason: str = "", cancellation_reason: str = "") -> None:
        self.status = status
        fields = ["status", "updated_at"]
        if status == self.Status.REJECTED and rejection_reason:
            self.rejection_reason = rejection_reason
            fields.append("rejection_reason")
        if status == self.Status.CANCELLED and cancellation_reason:
            self.cancellation_reason = cancellation_reason
            fields.append("cancellation_reason")
        self.save(update_fields=fields)
