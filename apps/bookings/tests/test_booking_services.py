"""Tests for booking creation and guest cancellation."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.bookings.services import (
    BookingActionError,
    BookingConflictError,
    BookingNotAuthorizedError,
    BookingNotFoundError,
    cancel_booking_by_guest,
    create_booking,
)
from apps.listings.models import Listing
from apps.listings.services import ListingNotFound
from apps.notifications.models import Notification

pytestmark = pytest.mark.django_db


def _dates(offset: int = 5, nights: int = 3):
    check_in = date.today() + timedelta(days=offset)
    return check_in, check_in + timedelta(days=nights)


def test_create_booking_computes_total_and_notifies(guest, host, listing):
    check_in, check_out = _dates(nights=3)

    booking = create_booking(guest, listing.id, check_in, check_out, 2)

    assert booking.status == Booking.Status.PENDING
    assert booking.host_id == host.id
    assert booking.total_price == Decimal("300.00")
    assert Notification.objects.get(user=host).type == Notification.Type.BOOKING_REQUEST
    assert Notification.objects.get(user=guest).type == Notification.Type.BOOKING_CREATED


def test_create_booking_rejects_overlap_with_approved(guest, host, listing):
    check_in, check_out = _dates()
    first = create_booking(guest, listing.id, check_in, check_out, 1)
    first.set_status(Booking.Status.APPROVED)

    with pytest.raises(BookingConflictError):
        create_booking(guest, listing.id, check_in + timedelta(days=1), check_out + timedelta(days=1), 1)


def test_pending_requests_do_not_block_dates(guest, listing):
    check_in, check_out = _dates()
    create_booking(guest, listing.id, check_in, check_out, 1)

    second = create_booking(guest, listing.id, check_in, check_out, 1)
    assert second.pk is not None


def test_back_to_back_stays_do_not_overlap(guest, listing):
    check_in, check_out = _dates()
    first = create_booking(guest, listing.id, check_in, check_out, 1)
    first.set_status(Booking.Status.CONFIRMED)

    following = create_booking(guest, listing.id, check_out, check_out + timedelta(days=2), 1)
    assert following.check_in == first.check_out


@pytest.mark.parametrize("guests", [0, 5])
def test_guest_count_must_fit_listing(guest, listing, guests):
    check_in, check_out = _dates()
    with pytest.raises(BookingActionError):
        create_booking(guest, listing.id, check_in, check_out, guests)


def test_host_cannot_book_own_listing(host, listing):
    check_in, check_out = _dates()
    with pytest.raises(BookingActionError, match="own listing"):
        create_booking(host, listing.id, check_in, check_out, 1)


def test_paused_listing_cannot_be_booked(guest, listing):
    listing.set_status(Listing.Status.PAUSED)
    check_in, check_out = _dates()
    with pytest.raises(BookingActionError, match="not available"):
        create_booking(guest, listing.id, check_in, check_out, 1)


def test_unknown_listing(guest):
    check_in, check_out = _dates()
    with pytest.raises(ListingNotFound):
        create_booking(guest, 424242, check_in, check_out, 1)


def test_guest_cancels_booking(booking, guest, host):
    cancelled = cancel_booking_by_guest(booking.id, guest, "Change of plans")

    assert cancelled.status == Booking.Status.CANCELLED
    assert cancelled.cancellation_reason == "Change of plans"
    assert set(Notification.objects.values_list("user_id", flat=True)) == {guest.id, host.id}


def test_only_the_guest_can_cancel(booking, host):
    with pytest.raises(BookingNotAuthorizedError):
        cancel_booking_by_guest(booking.id, host)


def test_cancelled_booking_cannot_be_cancelled_again(booking, guest):
    cancel_booking_by_guest(booking.id, guest)

    with pytest.raises(BookingActionError):
        cancel_booking_by_guest(booking.id, guest)


def test_cancel_missing_booking(guest):
    with pytest.raises(BookingNotFoundError):
        cancel_booking_by_guest(123456, guest)
