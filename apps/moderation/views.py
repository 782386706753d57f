"""Admin moderation API views."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.serializers import BookingSerializer
from apps.listings.serializers import ListingSerializer
from apps.users.permissions import IsPlatformAdmin
from apps.users.serializers import UserSerializer

from .services import (
    ModerationError,
    delete_listing,
    moderate_booking,
    moderate_listing,
    set_user_blocked,
)

PAST_TENSE = {
    "approve": "approved",
    "reject": "rejected",
    "pause": "paused",
    "activate": "activated",
    "cancel": "cancelled",
    "block": "blocked",
    "unblock": "unblocked",
}


def _error(exc: ModerationError) -> Response:
    return Response({"success": False, "message": exc.message}, status=exc.status_code)


class ListingModerationViewSet(viewsets.ViewSet):
    """
    Listing moderation.

    Endpoints:
    - PUT /api/v1/admin/listings/{id}/approve/
    - PUT /api/v1/admin/listings/{id}/reject/ (body: reason)
    - PUT /api/v1/admin/listings/{id}/pause/
    - PUT /api/v1/admin/listings/{id}/activate/
    - DELETE /api/v1/admin/listings/{id}/
    """

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]
    lookup_value_regex = r"[0-9]+"

    def _apply(self, request, pk, action_name: str) -> Response:
        try:
            listing = moderate_listing(int(pk), action_name, request.data.get("reason", ""))
        except ModerationError as e:
            return _error(e)
        return Response(
            {
                "success": True,
                "message": f"Property {PAST_TENSE[action_name]} successfully",
                "listing": ListingSerializer(listing).data,
            }
        )

    @action(detail=True, methods=["put"])
    def approve(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "approve")

    @action(detail=True, methods=["put"])
    def reject(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "reject")

    @action(detail=True, methods=["put"])
    def pause(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "pause")

    @action(detail=True, methods=["put"])
    def activate(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "activate")

    def destroy(self, request, pk=None):  # type: ignore
        try:
            delete_listing(int(pk))
        except ModerationError as e:
            return _error(e)
        return Response({"success": True, "message": "Property deleted successfully"})


class BookingModerationViewSet(viewsets.ViewSet):
    """
    Booking moderation.

    Endpoints:
    - PUT /api/v1/admin/bookings/{id}/approve/ (status becomes confirmed)
    - PUT /api/v1/admin/bookings/{id}/reject/ (body: reason)
    - PUT /api/v1/admin/bookings/{id}/cancel/ (body: reason)
    """

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]
    lookup_value_regex = r"[0-9]+"

    def _apply(self, request, pk, action_name: str) -> Response:
        try:
            booking = moderate_booking(int(pk), action_name, request.data.get("reason", ""))
        except ModerationError as e:
            return _error(e)
        return Response(
            {
                "success": True,
                "message": f"Booking {PAST_TENSE[action_name]} successfully",
                "booking": BookingSerializer(booking).data,
            }
        )

    @action(detail=True, methods=["put"])
    def approve(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "approve")

    @action(detail=True, methods=["put"])
    def reject(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "reject")

    @action(detail=True, methods=["put"])
    def cancel(self, request, pk=None):  # type: ignore
        return self._apply(request, pk, "cancel")


class UserModerationView(APIView):
    """PUT /api/v1/admin/users/{id}/{block|unblock}/"""

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]

    def put(self, request, user_id: int, action_name: str):  # type: ignore
        try:
            user = set_user_blocked(user_id, action_name, acting_user=request.user)
        except ModerationError as e:
            return _error(e)
        return Response(
            {
                "success": True,
                "message": f"User {PAST_TENSE[action_name]} successfully",
                "user": UserSerializer(user).data,
            }
        )
