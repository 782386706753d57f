"""Serializers for the listings domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Listing


class ListingSummarySerializer(serializers.ModelSerializer):
    """Compact listing card for bookings and wishlists."""

    class Meta:
        model = Listing
        fields = ["id", "title", "location", "price", "images", "category", "rating", "status"]


class ListingSerializer(serializers.ModelSerializer):
    host = UserSummarySerializer(read_only=True)
    host_id = serializers.ReadOnlyField(source="host.id")

    class Meta:
        model = Listing
        fields = [
            "id",
            "host_id",
            "host",
            "title",
            "description",
            "location",
            "category",
            "latitude",
            "longitude",
            "price",
            "guests",
            "bedrooms",
            "bathrooms",
            "amenities",
            "house_rules",
            "images",
            "rating",
            "views",
            "status",
            "rejection_reason",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ListingWriteSerializer(serializers.ModelSerializer):
    """Create and update payload sent by hosts."""

    images = serializers.ListField(child=serializers.URLField(), required=False)

    class Meta:
        model = Listing
        fields = [
            "title",
            "description",
            "location",
            "category",
            "latitude",
            "longitude",
            "price",
            "guests",
            "bedrooms",
            "bathrooms",
            "amenities",
            "house_rules",
            "images",
        ]

    def validate_amenities(self, value):  # type: ignore
        if not isinstance(value, dict):
            raise serializers.ValidationError("Amenities must be an object of name -> true/false.")
        if any(not isinstance(flag, bool) for flag in value.values()):
            raise serializers.ValidationError("Amenity values must be true or false.")
        return value

    def validate_house_rules(self, value):  # type: ignore
        if not isinstance(value, dict):
            raise serializers.ValidationError("House rules must be an object.")
        return value

    def validate_guests(self, value: int) -> int:
        if value < 1:
            raise serializers.ValidationError("A listing must host at least one guest.")
        return value


class TrendingListingSerializer(ListingSummarySerializer):
    booking_count = serializers.IntegerField(read_only=True)
    views = serializers.IntegerField(read_only=True)

    class Meta(ListingSummarySerializer.Meta):
        fields = ListingSummarySerializer.Meta.fields + ["views", "booking_count"]
