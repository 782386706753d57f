"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.serializers import ListingSummarySerializer
from apps.users.serializers import UserSummarySerializer

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Booking request sent by a guest."""

    listing = serializers.IntegerField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    guests = serializers.IntegerField(min_value=1, default=1)

    def validate(self, attrs):  # type: ignore
        if attrs["check_in"] >= attrs["check_out"]:
            raise serializers.ValidationError("Check-out must be after check-in.")
        return attrs


class BookingStatusChangeSerializer(serializers.Serializer):
    """
    Body of the host decision endpoints.

    ``userId`` is accepted for client compatibility only; the acting user is
    always the authenticated one. ``status`` is checked by the service so that
    ownership is verified first.
    """

    bookingId = serializers.CharField()
    status = serializers.CharField(required=False, allow_blank=True, default="")
    userId = serializers.CharField(required=False, allow_blank=True)


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class BookingSerializer(serializers.ModelSerializer):
    guest = UserSummarySerializer(read_only=True)
    host_id = serializers.ReadOnlyField()
    listing = ListingSummarySerializer(read_only=True, allow_null=True)
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "guest",
            "host_id",
            "listing",
            "check_in",
            "check_out",
            "nights",
            "guests",
            "total_price",
            "status",
            "rejection_reason",
            "cancellation_reason",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
