"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.listings.services import ListingNotFound
from apps.users.permissions import is_platform_admin

from .models import Booking
from .serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    BookingStatusChangeSerializer,
)
from .services import (
    BookingActionError,
    cancel_booking_by_guest,
    change_booking_status,
    create_booking,
    pause_booking as pause_booking_service,
)


def _error(exc) -> Response:
    return Response({"success": False, "message": exc.message}, status=exc.status_code)


class IsBookingStakeholder(permissions.BasePermission):
    """The guest, the host and admins may see a booking."""

    def has_object_permission(self, request, view, obj: Booking):  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        return user.id in (obj.guest_id, obj.host_id)


class BookingViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Booking requests, host decisions and guest cancellations."""

    queryset = Booking.objects.select_related("guest", "listing").all()
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsBookingStakeholder]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action in {"approve_booking", "pause_booking"}:
            return BookingStatusChangeSerializer
        if self.action == "cancel":
            return BookingCancelSerializer
        return BookingSerializer

    def list(self, request):  # type: ignore
        """Bookings made by the current user, newest first."""
        qs = self.get_queryset().filter(guest=request.user)
        return Response({"success": True, "bookings": BookingSerializer(qs, many=True).data})

    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            booking = create_booking(
                request.user,
                data["listing"],
                data["check_in"],
                data["check_out"],
                data["guests"],
            )
        except (BookingActionError, ListingNotFound) as e:
            return _error(e)
        return Response(
            {"success": True, "message": "Booking request sent", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], url_path="approve-booking")
    def approve_booking(self, request):
        serializer = BookingStatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = change_booking_status(
                serializer.validated_data["bookingId"],
                serializer.validated_data["status"],
                request.user.id,
            )
        except BookingActionError as e:
            return _error(e)
        return Response(
            {
                "success": True,
                "message": f"Booking {booking.status}",
                "updatedBooking": BookingSerializer(booking).data,
            }
        )

    @action(detail=False, methods=["post"], url_path="pause-booking")
    def pause_booking(self, request):
        serializer = BookingStatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = pause_booking_service(serializer.validated_data["bookingId"], request.user.id)
        except BookingActionError as e:
            return _error(e)
        return Response(
            {
                "success": True,
                "message": f"Booking {booking.status}",
                "updatedBooking": BookingSerializer(booking).data,
            }
        )

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = cancel_booking_by_guest(pk, request.user, serializer.validated_data["reason"])
        except BookingActionError as e:
            return _error(e)
        return Response(
            {"success": True, "message": "Booking cancelled", "booking": BookingSerializer(booking).data}
        )

    @action(detail=False, methods=["get"], url_path="host-requests")
    def host_requests(self, request):
        """Bookings on listings hosted by the current user."""
        qs = self.get_queryset().filter(host=request.user)
        return Response({"success": True, "bookings": BookingSerializer(qs, many=True).data})
