"""Serializers for the wishlist."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class WishlistToggleSerializer(serializers.Serializer):
    listingId = serializers.CharField()
