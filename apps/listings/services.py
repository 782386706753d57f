"""Domain services for listings."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Count  # type: ignore

from .models import Listing

logger = logging.getLogger(__name__)


@transaction.atomic
def create_listing(host, validated_data: dict) -> Listing:
    """Create a listing and promote a guest author to host."""

    status = Listing.Status.PENDING if settings.LISTING_REQUIRES_APPROVAL else Listing.Status.LIVE
    listing = Listing.objects.create(host=host, status=status, **validated_data)
    host.become_host()
    logger.info(f"Listing {listing.pk} created by {host.email} with status {listing.status}")
    return listing


def trending_listings(limit: int | None = None):
    """Most booked listings that are not paused. Listings without bookings are left out."""

    limit = limit or settings.TRENDING_LISTINGS_LIMIT
    return (
        Listing.objects.exclude(status=Listing.Status.PAUSED)
        .annotate(booking_count=Count("bookings"))
        .filter(booking_count__gt=0)
        .order_by("-booking_count", "-created_at")[:limit]
    )


class ListingNotFound(Exception):
    status_code = 404

    def __init__(self, message: str = "Listing not found"):
        self.message = message
        super().__init__(message)


def get_listing_or_raise(listing_id) -> Listing:
    try:
        listing = Listing.objects.filter(pk=listing_id).first()
    except (TypeError, ValueError):
        listing = None
    if listing is None:
        raise ListingNotFound()
    return listing
