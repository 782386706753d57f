"""API views for the wishlist."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.listings.serializers import ListingSummarySerializer
from apps.listings.services import ListingNotFound

from .serializers import WishlistToggleSerializer
from .services import toggle_wishlist, wishlist_for_user


class WishlistViewSet(viewsets.GenericViewSet):
    """
    Saved listings of the authenticated user.

    Endpoints:
    - GET /api/v1/wishlist/ - saved listing ids and summaries
    - POST /api/v1/wishlist/toggle/ - save or unsave a listing
    - GET /api/v1/wishlist/check/{listing_id}/ - is the listing saved
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = WishlistToggleSerializer

    def list(self, request):  # type: ignore
        items = list(wishlist_for_user(request.user.id))
        listings = [item.listing for item in items]
        return Response(
            {
                "success": True,
                "wishlist": [listing.pk for listing in listings],
                "listings": ListingSummarySerializer(listings, many=True).data,
            }
        )

    @action(detail=False, methods=["post"])
    def toggle(self, request):
        serializer = WishlistToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            saved = toggle_wishlist(request.user.id, serializer.validated_data["listingId"])
        except ListingNotFound as e:
            return Response({"success": False, "message": e.message}, status=e.status_code)
        return Response(
            {
                "success": True,
                "saved": saved,
                "message": "Added to wishlist" if saved else "Removed from wishlist",
            }
        )

    @action(detail=False, methods=["get"], url_path=r"check/(?P<listing_id>[0-9]+)")
    def check(self, request, listing_id=None):  # type: ignore
        saved = wishlist_for_user(request.user.id).filter(listing_id=listing_id).exists()
        return Response({"success": True, "saved": saved})
