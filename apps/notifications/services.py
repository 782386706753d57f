"""Notification services: persisted records plus a real-time push."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.realtime.server import push_to_user

from .models import Notification
from .serializers import NotificationSerializer

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    status_code = 400
    default_message = "Notification error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotificationNotFound(NotificationError):
    status_code = 404
    default_message = "Notification not found"


class NotificationAccessDenied(NotificationError):
    status_code = 403
    default_message = "Not authorized"


def create_notification(
    user_id: int,
    type: str,
    title: str,
    message: str,
    data: dict[str, Any] | None = None,
    priority: str = Notification.Priority.MEDIUM,
    push: bool = True,
) -> Notification:
    """
    Persist a notification and push it to the addressee if connected.

    There is no deduplication: every call creates a new record. A failing
    push is logged and never undoes the record.
    """
    notification = Notification.objects.create(
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        data=data or {},
        priority=priority,
    )
    logger.info(f"Notification {notification.pk} ({type}) created for user {user_id}")

    if push:
        try:
            push_to_user(user_id, "notification", NotificationSerializer(notification).data)
        except Exception as e:
            logger.error(f"Failed to push notification {notification.pk} to user {user_id}: {e}", exc_info=True)
    return notification


def notify_booking_status_change(
    booking: "Booking",
    old_status: str,
    new_status: str,
    guest_id: int,
    host_id: int,
) -> tuple[Notification, Notification]:
    """Create the guest-facing and host-facing records for a status change."""

    title_of_listing = booking.listing.title if booking.listing_id and booking.listing else "your stay"
    data = {
        "bookingId": booking.pk,
        "listingId": booking.listing_id,
        "oldStatus": old_status,
        "newStatus": new_status,
    }
    type_tag = f"booking_{new_status}"
    priority = (
        Notification.Priority.HIGH
        if new_status in {"approved", "confirmed", "rejected", "cancelled"}
        else Notification.Priority.MEDIUM
    )

    guest_notification = create_notification(
        guest_id,
        type_tag,
        f"Booking {new_status.capitalize()}",
        f'Your booking for "{title_of_listing}" has been {new_status}.',
        data=data,
        priority=priority,
    )
    host_notification = create_notification(
        host_id,
        type_tag,
        f"Booking {new_status.capitalize()}",
        f'A booking for "{title_of_listing}" changed from {old_status} to {new_status}.',
        data=data,
        priority=Notification.Priority.MEDIUM,
    )
    return guest_notification, host_notification


def list_for_user(user_id: int):
    return Notification.objects.filter(user_id=user_id).order_by("-created_at", "-id")


def get_unread_count(user_id: int) -> int:
    return Notification.objects.filter(user_id=user_id, is_read=False).count()


def mark_as_read(notification_id: int, user_id: int) -> Notification:
    """Set the read flag. Writes on every call, even when already read."""

    notification = Notification.objects.filter(pk=notification_id).first()
    if notification is None:
        raise NotificationNotFound()
    if notification.user_id != user_id:
        raise NotificationAccessDenied()
    notification.is_read = True
    notification.save(update_fields=["is_read"])
    return notification


def mark_all_as_read(user_id: int) -> int:
    updated = Notification.objects.filter(user_id=user_id, is_read=False).update(is_read=True)
    logger.info(f"Marked {updated} notifications as read for user {user_id}")
    return updated


def purge_read_notifications(older_than_days: int | None = None) -> int:
    """Delete read notifications older than the retention window."""

    days = older_than_days if older_than_days is not None else settings.NOTIFICATION_RETENTION_DAYS
    cutoff = timezone.now() - timedelta(days=days)
    deleted, _ = Notification.objects.filter(is_read=True, created_at__lt=cutoff).delete()
    logger.info(f"Purged {deleted} read notifications older than {days} days")
    return deleted
