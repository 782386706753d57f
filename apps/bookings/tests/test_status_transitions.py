"""Tests for host decisions on bookings and their fan-out."""

from __future__ import annotations

import pytest

from apps.bookings.models import Booking
from apps.bookings.services import (
    BookingNotAuthorizedError,
    InvalidBookingStatusError,
    change_booking_status,
    pause_booking,
)
from apps.notifications.models import Notification
from apps.realtime.registry import registry
from apps.users.models import User

pytestmark = pytest.mark.django_db


def _booking_events(emitted):
    return [call for call in emitted if call["event"] == "booking-updated"]


def test_host_approves_pending_booking(booking, guest, host, emitted):
    registry.register(guest.id, "sid-guest")

    updated = change_booking_status(booking.id, "approved", host.id)

    booking.refresh_from_db()
    assert updated.status == Booking.Status.APPROVED
    assert booking.status == Booking.Status.APPROVED

    events = _booking_events(emitted)
    assert len(events) == 1
    assert events[0]["to"] == f"user:{guest.id}"
    assert events[0]["data"] == {
        "status": "approved",
        "bookingId": booking.id,
        "userId": host.id,
        "message": "Your booking has been approved",
    }

    notifications = Notification.objects.filter(data__bookingId=booking.id)
    assert notifications.count() == 2
    assert set(notifications.values_list("user_id", flat=True)) == {guest.id, host.id}
    assert set(notifications.values_list("type", flat=True)) == {"booking_approved"}


def test_other_user_cannot_change_status(booking, guest, emitted):
    stranger = User.objects.create_user(email="stranger@example.com", password="Stranger123")
    registry.register(guest.id, "sid-guest")

    with pytest.raises(BookingNotAuthorizedError) as excinfo:
        change_booking_status(booking.id, "approved", stranger.id)

    assert excinfo.value.status_code == 403
    assert excinfo.value.message == "Not authorized"
    booking.refresh_from_db()
    assert booking.status == Booking.Status.PENDING
    assert Notification.objects.count() == 0
    assert emitted == []


def test_guest_cannot_approve_own_request(booking, guest):
    with pytest.raises(BookingNotAuthorizedError):
        change_booking_status(booking.id, "approved", guest.id)


def test_missing_booking_reads_as_not_authorized(host):
    with pytest.raises(BookingNotAuthorizedError):
        change_booking_status(999999, "approved", host.id)

    with pytest.raises(BookingNotAuthorizedError):
        change_booking_status("not-an-id", "approved", host.id)


def test_unknown_target_is_rejected(booking, host):
    with pytest.raises(InvalidBookingStatusError) as excinfo:
        change_booking_status(booking.id, "confirmed", host.id)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Invalid status"
    booking.refresh_from_db()
    assert booking.status == Booking.Status.PENDING


def test_ownership_is_checked_before_target(booking):
    stranger = User.objects.create_user(email="stranger@example.com", password="Stranger123")

    with pytest.raises(BookingNotAuthorizedError):
        change_booking_status(booking.id, "bogus", stranger.id)


def test_any_status_may_move_to_any_host_target(booking, host):
    booking.set_status(Booking.Status.CANCELLED)

    change_booking_status(booking.id, "approved", host.id)
    booking.refresh_from_db()
    assert booking.status == Booking.Status.APPROVED

    change_booking_status(booking.id, "rejected", host.id)
    booking.refresh_from_db()
    assert booking.status == Booking.Status.REJECTED


def test_pause_booking(booking, host):
    updated = pause_booking(booking.id, host.id)

    assert updated.status == Booking.Status.PAUSED
    assert Notification.objects.filter(type="booking_paused").count() == 2


def test_listing_deleted_skips_notifications(booking, listing, guest, host, emitted):
    registry.register(guest.id, "sid-guest")
    listing.delete()
    booking.refresh_from_db()
    assert booking.listing_id is None

    updated = change_booking_status(booking.id, "rejected", host.id)

    assert updated.status == Booking.Status.REJECTED
    booking.refresh_from_db()
    assert booking.status == Booking.Status.REJECTED
    assert Notification.objects.count() == 0
    assert len(_booking_events(emitted)) == 1


def test_offline_guest_gets_no_push_but_notifications_persist(booking, host, emitted):
    change_booking_status(booking.id, "approved", host.id)

    assert emitted == []
    assert Notification.objects.count() == 2


def test_fan_out_failure_keeps_status(booking, host, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("notification store down")

    monkeypatch.setattr("apps.bookings.services.notify_booking_status_change", explode)

    updated = change_booking_status(booking.id, "approved", host.id)

    assert updated.status == Booking.Status.APPROVED
    booking.refresh_from_db()
    assert booking.status == Booking.Status.APPROVED


def test_each_transition_creates_two_more_notifications(booking, host):
    change_booking_status(booking.id, "approved", host.id)
    change_booking_status(booking.id, "approved", host.id)

    assert Notification.objects.count() == 4
