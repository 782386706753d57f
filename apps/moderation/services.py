"""Moderation services.

Every moderation action persists the change first and then notifies the
affected users. Missing listings on a booking are tolerated: the message
falls back to a generic title.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore

from apps.bookings.models import Booking
from apps.listings.models import Listing
from apps.notifications.models import Notification
from apps.notifications.services import create_notification

logger = logging.getLogger(__name__)

User = get_user_model()

DEFAULT_LISTING_REJECTION = "Property does not meet our standards"
DEFAULT_BOOKING_REJECTION = "Booking rejected by admin"
DEFAULT_BOOKING_CANCELLATION = "Booking cancelled by admin"

LISTING_ACTIONS = {
    "approve": (Listing.Status.LIVE, Notification.Type.PROPERTY_APPROVED, "Property Approved"),
    "reject": (Listing.Status.REJECTED, Notification.Type.PROPERTY_REJECTED, "Property Rejected"),
    "pause": (Listing.Status.PAUSED, Notification.Type.PROPERTY_PAUSED, "Property Paused"),
    "activate": (Listing.Status.LIVE, Notification.Type.PROPERTY_ACTIVATED, "Property Activated"),
}

BOOKING_ACTIONS = {
    "approve": (Booking.Status.CONFIRMED, Notification.Type.BOOKING_CONFIRMED, "Booking Confirmed"),
    "reject": (Booking.Status.REJECTED, Notification.Type.BOOKING_REJECTED, "Booking Rejected"),
    "cancel": (Booking.Status.CANCELLED, Notification.Type.BOOKING_CANCELLED, "Booking Cancelled"),
}

USER_ACTIONS = ("block", "unblock")


class ModerationError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


def _listing_message(action: str, listing: Listing) -> str:
    if action == "approve":
        return f'Your property "{listing.title}" has been approved and is now live.'
    if action == "reject":
        return f'Your property "{listing.title}" has been rejected. Reason: {listing.rejection_reason}'
    if action == "pause":
        return f'Your property "{listing.title}" has been paused by admin.'
    return f'Your property "{listing.title}" has been activated and is now live.'


def moderate_listing(listing_id: int, action: str, reason: str = "") -> Listing:
    if action not in LISTING_ACTIONS:
        raise ModerationError("Invalid action")
    listing = Listing.objects.filter(pk=listing_id).first()
    if listing is None:
        raise ModerationError("Listing not found", status_code=404)

    status, type_tag, title = LISTING_ACTIONS[action]
    listing.set_status(status, reason=reason or DEFAULT_LISTING_REJECTION)
    logger.info(f"Admin {action} on listing {listing.pk}: status is now {listing.status}")

    data = {"listingId": listing.pk}
    if action == "reject":
        data["reason"] = listing.rejection_reason
    create_notification(listing.host_id, type_tag, title, _listing_message(action, listing), data=data)
    return listing


def delete_listing(listing_id: int) -> None:
    listing = Listing.objects.filter(pk=listing_id).first()
    if listing is None:
        raise ModerationError("Listing not found", status_code=404)

    host_id, title, pk = listing.host_id, listing.title, listing.pk
    listing.delete()
    logger.info(f"Admin deleted listing {pk}")
    create_notification(
        host_id,
        Notification.Type.PROPERTY_DELETED,
        "Property Deleted",
        f'Your property "{title}" has been deleted by admin.',
        data={"listingId": pk},
    )


def moderate_booking(booking_id: int, action: str, reason: str = "") -> Booking:
    if action not in BOOKING_ACTIONS:
        raise ModerationError("Invalid action")
    booking = Booking.objects.select_related("listing").filter(pk=booking_id).first()
    if booking is None:
        raise ModerationError("Booking not found", status_code=404)

    status, type_tag, title = BOOKING_ACTIONS[action]
    booking.set_status(
        status,
        rejection_reason=reason or DEFAULT_BOOKING_REJECTION,
        cancellation_reason=reason or DEFAULT_BOOKING_CANCELLATION,
    )
    logger.info(f"Admin {action} on booking {booking.pk}: status is now {booking.status}")

    listing_title = booking.listing.title if booking.listing else "a listing"
    data = {"bookingId": booking.pk}
    if action == "approve":
        guest_message = f'Your booking for "{listing_title}" has been confirmed by admin.'
        host_message = f'A booking for "{listing_title}" has been confirmed by admin.'
    elif action == "reject":
        guest_message = f'Your booking for "{listing_title}" has been rejected. Reason: {booking.rejection_reason}'
        host_message = f'A booking for "{listing_title}" has been rejected by admin.'
    else:
        guest_message = (
            f'Your booking for "{listing_title}" has been cancelled by admin. '
            f"Reason: {booking.cancellation_reason}"
        )
        host_message = f'A booking for "{listing_title}" has been cancelled by admin.'

    guest_data = dict(data)
    if action == "reject":
        guest_data["reason"] = booking.rejection_reason
    elif action == "cancel":
        guest_data["reason"] = booking.cancellation_reason

    create_notification(booking.guest_id, type_tag, title, guest_message, data=guest_data)
    if booking.host_id is not None:
        create_notification(booking.host_id, type_tag, title, host_message, data=data)
    return booking


def set_user_blocked(user_id: int, action: str, acting_user=None):
    if action not in USER_ACTIONS:
        raise ModerationError("Invalid action")
    user = User.objects.filter(pk=user_id).first()
    if user is None:
        raise ModerationError("User not found", status_code=404)
    if acting_user is not None and action == "block" and user.pk == acting_user.pk:
        raise ModerationError("You cannot block your own account")

    if action == "block":
        user.block()
    else:
        user.unblock()
    logger.info(f"User {user.pk} {action}ed")
    return user
