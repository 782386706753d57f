"""Domain services for booking workflows.

The host status handler follows a fixed order: persist the new status, look
up the listing, push ``booking-updated`` to the guest, then create the guest
and host notifications. Nothing after the save is allowed to undo it; fan-out
failures are logged and the caller still gets the updated booking.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, TYPE_CHECKING

from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.listings.models import Listing
from apps.listings.services import get_listing_or_raise
from apps.notifications.models import Notification
from apps.notifications.services import create_notification, notify_booking_status_change
from apps.realtime.server import push_to_user

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.users.models import CustomUser

logger = logging.getLogger(__name__)

HOST_STATUS_TARGETS: tuple[str, ...] = (
    Booking.Status.APPROVED,
    Booking.Status.REJECTED,
    Booking.Status.PAUSED,
)

BLOCKING_STATUSES: tuple[str, ...] = (
    Booking.Status.APPROVED,
    Booking.Status.CONFIRMED,
)


class BookingActionError(Exception):
    """Base error for booking operations; carries the HTTP status to answer with."""

    status_code = 400
    default_message = "Booking action failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BookingNotAuthorizedError(BookingActionError):
    status_code = 403
    default_message = "Not authorized"


class BookingNotFoundError(BookingActionError):
    status_code = 404
    default_message = "Booking not found"


class InvalidBookingStatusError(BookingActionError):
    default_message = "Invalid status"


class BookingConflictError(BookingActionError):
    """Raised when a listing is busy for requested dates."""

    default_message = "Listing is not available for the selected dates"


def _get_booking(booking_id) -> Booking | None:
    try:
        return Booking.objects.select_related("listing").filter(pk=booking_id).first()
    except (TypeError, ValueError):
        return None


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def ensure_listing_is_available(listing: Listing, check_in: date, check_out: date, *, exclude_booking_id=None) -> None:
    """Ensure no approved or confirmed booking overlaps the period."""

    overlapping = Q(check_in__lt=check_out) & Q(check_out__gt=check_in)
    blocking: Iterable[str] = BLOCKING_STATUSES

    bookings_qs = Booking.objects.filter(listing=listing, status__in=blocking).filter(overlapping)
    if exclude_booking_id is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)

    if _lock_queryset_if_possible(bookings_qs).exists():
        raise BookingConflictError()


def _push_booking_update(booking: Booking, acting_user_id: int) -> None:
    payload = {
        "status": booking.status,
        "bookingId": booking.pk,
        "userId": acting_user_id,
        "message": f"Your booking has been {booking.status}",
    }
    try:
        push_to_user(booking.guest_id, "booking-updated", payload)
    except Exception as e:
        logger.error(f"Failed to push booking-updated for booking {booking.pk}: {e}", exc_info=True)


def change_booking_status(booking_id, target_status: str, acting_user_id: int) -> Booking:
    """
    Apply a host decision (approved, rejected or paused) to a booking.

    A missing booking and a booking hosted by someone else both raise
    ``BookingNotAuthorizedError``. The target is validated only after the
    ownership check. Any current status may move to any accepted target.
    """
    booking = _get_booking(booking_id)
    if booking is None or booking.host_id is None or booking.host_id != acting_user_id:
        logger.warning(f"User {acting_user_id} not authorized to change booking {booking_id}")
        raise BookingNotAuthorizedError()
    if target_status not in HOST_STATUS_TARGETS:
        raise InvalidBookingStatusError()

    old_status = booking.status
    booking.set_status(target_status)
    logger.info(f"Booking {booking.pk} moved from {old_status} to {target_status} by user {acting_user_id}")

    listing = Listing.objects.filter(pk=booking.listing_id).first() if booking.listing_id else None

    _push_booking_update(booking, acting_user_id)

    if listing is None:
        logger.warning(f"Listing of booking {booking.pk} is gone, notifications skipped")
        return booking

    try:
        notify_booking_status_change(booking, old_status, target_status, booking.guest_id, listing.host_id)
    except Exception as e:
        logger.error(f"Notification fan-out failed for booking {booking.pk}: {e}", exc_info=True)
    return booking


def pause_booking(booking_id, acting_user_id: int) -> Booking:
    return change_booking_status(booking_id, Booking.Status.PAUSED, acting_user_id)


def create_booking(guest: "CustomUser", listing_id, check_in: date, check_out: date, guests: int = 1) -> Booking:
    """Create a pending booking request and notify both parties."""

    listing = get_listing_or_raise(listing_id)
    if listing.status != Listing.Status.LIVE:
        raise BookingActionError("Listing is not available for booking")
    if check_out <= check_in:
        raise BookingActionError("Check-out must be after check-in")
    if guests < 1 or guests > listing.guests:
        raise BookingActionError(f"This listing allows between 1 and {listing.guests} guests")
    if listing.host_id == guest.id:
        raise BookingActionError("You cannot book your own listing")

    nights = (check_out - check_in).days
    with transaction.atomic():
        ensure_listing_is_available(listing, check_in, check_out)
        booking = Booking.objects.create(
            guest=guest,
            host_id=listing.host_id,
            listing=listing,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=listing.price * Decimal(nights),
        )
    logger.info(f"Booking {booking.pk} requested by {guest.email} for listing {listing.pk}")

    data = {"bookingId": booking.pk, "listingId": listing.pk}
    try:
        create_notification(
            listing.host_id,
            Notification.Type.BOOKING_REQUEST,
            "New Booking Request",
            f'{guest.display_name} wants to stay at "{listing.title}" from {check_in} to {check_out}.',
            data=data,
            priority=Notification.Priority.HIGH,
        )
        create_notification(
            guest.id,
            Notification.Type.BOOKING_CREATED,
            "Booking Request Sent",
            f'Your request for "{listing.title}" was sent to the host.',
            data=data,
        )
    except Exception as e:
        logger.error(f"Notification fan-out failed for new booking {booking.pk}: {e}", exc_info=True)
    return booking


def cancel_booking_by_guest(booking_id, user: "CustomUser", reason: str = "") -> Booking:
    booking = _get_booking(booking_id)
    if booking is None:
        raise BookingNotFoundError()
    if booking.guest_id != user.id:
        raise BookingNotAuthorizedError()
    if booking.status in (Booking.Status.REJECTED, Booking.Status.CANCELLED):
        raise BookingActionError(f"A {booking.status} booking cannot be cancelled")

    old_status = booking.status
    booking.set_status(Booking.Status.CANCELLED, cancellation_reason=reason or "Cancelled by guest")
    logger.info(f"Booking {booking.pk} cancelled by guest {user.id}")

    if booking.host_id is None:
        logger.warning(f"Booking {booking.pk} has no host, notifications skipped")
        return booking
    try:
        notify_booking_status_change(booking, old_status, Booking.Status.CANCELLED, booking.guest_id, booking.host_id)
    except Exception as e:
        logger.error(f"Notification fan-out failed for booking {booking.pk}: {e}", exc_info=True)
    return booking
