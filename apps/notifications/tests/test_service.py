"""Tests for the notification service."""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.notifications.models import Notification
from apps.notifications.services import (
    NotificationAccessDenied,
    NotificationNotFound,
    create_notification,
    get_unread_count,
    list_for_user,
    mark_all_as_read,
    mark_as_read,
    notify_booking_status_change,
    purge_read_notifications,
)
from apps.notifications.tasks import purge_read_notifications as purge_task
from apps.realtime.registry import registry

pytestmark = pytest.mark.django_db


def test_create_notification_pushes_to_connected_user(guest, emitted):
    registry.register(guest.id, "sid-1")

    notification = create_notification(guest.id, "system", "Hello", "Welcome aboard", data={"k": 1})

    assert notification.priority == Notification.Priority.MEDIUM
    assert len(emitted) == 1
    assert emitted[0]["event"] == "notification"
    assert emitted[0]["to"] == f"user:{guest.id}"
    assert emitted[0]["data"]["id"] == notification.id
    assert emitted[0]["data"]["data"] == {"k": 1}


def test_create_notification_without_push(guest, emitted):
    registry.register(guest.id, "sid-1")

    create_notification(guest.id, "system", "Quiet", "No push", push=False)

    assert emitted == []


def test_no_deduplication(guest):
    create_notification(guest.id, "system", "Same", "Same")
    create_notification(guest.id, "system", "Same", "Same")

    assert Notification.objects.filter(user=guest).count() == 2


def test_push_failure_keeps_record(guest, monkeypatch):
    registry.register(guest.id, "sid-1")

    def broken_emit(*args, **kwargs):
        raise ConnectionError("socket gone")

    monkeypatch.setattr("apps.realtime.server.sio.emit", broken_emit)

    notification = create_notification(guest.id, "system", "Still saved", "Even without push")

    assert Notification.objects.filter(pk=notification.pk).exists()


def test_notify_booking_status_change_addresses_both_parties(booking, guest, host):
    guest_note, host_note = notify_booking_status_change(booking, "pending", "approved", guest.id, host.id)

    assert guest_note.user_id == guest.id
    assert host_note.user_id == host.id
    assert guest_note.type == host_note.type == "booking_approved"
    assert "Sea View Cottage" in guest_note.message
    assert guest_note.data == {
        "bookingId": booking.id,
        "listingId": booking.listing_id,
        "oldStatus": "pending",
        "newStatus": "approved",
    }


def test_list_is_newest_first(guest):
    first = create_notification(guest.id, "system", "First", "1")
    second = create_notification(guest.id, "system", "Second", "2")

    assert list(list_for_user(guest.id)) == [second, first]


def test_unread_count_is_recomputed(guest, host):
    create_notification(guest.id, "system", "A", "a")
    other = create_notification(guest.id, "system", "B", "b")
    create_notification(host.id, "system", "C", "c")
    assert get_unread_count(guest.id) == 2

    mark_as_read(other.id, guest.id)
    assert get_unread_count(guest.id) == 1


def test_mark_as_read_twice_writes_each_time(guest, django_assert_num_queries):
    notification = create_notification(guest.id, "system", "A", "a")

    mark_as_read(notification.id, guest.id)
    with django_assert_num_queries(2):
        again = mark_as_read(notification.id, guest.id)

    assert again.is_read is True
    notification.refresh_from_db()
    assert notification.is_read is True


def test_mark_as_read_checks_addressee(guest, host):
    notification = create_notification(guest.id, "system", "A", "a")

    with pytest.raises(NotificationAccessDenied):
        mark_as_read(notification.id, host.id)
    with pytest.raises(NotificationNotFound):
        mark_as_read(987654, guest.id)

    notification.refresh_from_db()
    assert notification.is_read is False


def test_mark_all_as_read(guest, host):
    create_notification(guest.id, "system", "A", "a")
    create_notification(guest.id, "system", "B", "b")
    foreign = create_notification(host.id, "system", "C", "c")

    assert mark_all_as_read(guest.id) == 2
    assert get_unread_count(guest.id) == 0
    foreign.refresh_from_db()
    assert foreign.is_read is False


def test_purge_removes_only_old_read_notifications(guest, settings):
    settings.NOTIFICATION_RETENTION_DAYS = 30
    old_read = create_notification(guest.id, "system", "Old read", "x")
    old_unread = create_notification(guest.id, "system", "Old unread", "x")
    fresh_read = create_notification(guest.id, "system", "Fresh read", "x")
    Notification.objects.filter(pk__in=[old_read.pk, fresh_read.pk]).update(is_read=True)
    Notification.objects.filter(pk__in=[old_read.pk, old_unread.pk]).update(
        created_at=timezone.now() - timedelta(days=31)
    )

    assert purge_read_notifications() == 1
    assert set(Notification.objects.values_list("pk", flat=True)) == {old_unread.pk, fresh_read.pk}


def test_purge_task_runs_eagerly(guest):
    read = create_notification(guest.id, "system", "Read", "x")
    Notification.objects.filter(pk=read.pk).update(is_read=True, created_at=timezone.now() - timedelta(days=5))

    assert purge_task.delay(older_than_days=1).get() == 1
