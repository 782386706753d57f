"""Wishlist services."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore

from apps.listings.services import get_listing_or_raise

from .models import WishlistItem

logger = logging.getLogger(__name__)


def toggle_wishlist(user_id: int, listing_id) -> bool:
    """
    Add the listing to the user's wishlist, or remove it if already saved.

    Returns ``True`` when the listing is saved after the call.
    Raises ``ListingNotFound`` for an unknown listing.
    """
    listing = get_listing_or_raise(listing_id)

    deleted, _ = WishlistItem.objects.filter(user_id=user_id, listing=listing).delete()
    if deleted:
        logger.info(f"Listing {listing.pk} removed from wishlist of user {user_id}")
        return False

    try:
        with transaction.atomic():
            WishlistItem.objects.create(user_id=user_id, listing=listing)
    except IntegrityError:
        # Concurrent toggle already inserted the row.
        logger.warning(f"Listing {listing.pk} already in wishlist of user {user_id}")
        return True
    logger.info(f"Listing {listing.pk} added to wishlist of user {user_id}")
    return True


def wishlist_for_user(user_id: int):
    return WishlistItem.objects.filter(user_id=user_id).select_related("listing")
