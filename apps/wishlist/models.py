"""Model definition for the wishlist.

A ``WishlistItem`` is a bookmark of a listing by a user. A listing appears
at most once in a user's wishlist, enforced by a unique constraint.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore


class WishlistItem(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="wishlist_items"
    )
    listing = models.ForeignKey(
        "listings.Listing", on_delete=models.CASCADE, related_name="saved_by"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["user", "listing"], name="unique_wishlist_item"),
        ]

    def __str__(self) -> str:
        return f"Listing {self.listing_id} saved by user {self.user_id}"
