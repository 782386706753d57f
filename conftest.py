"""Shared pytest fixtures."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest


@pytest.fixture(autouse=True)
def clean_socket_registry():
    from apps.realtime.registry import registry

    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def emitted(monkeypatch):
    """Capture Socket.IO emits instead of sending them."""
    from apps.realtime import server

    calls: list[dict] = []

    def fake_emit(event, data=None, to=None, **kwargs):
        calls.append({"event": event, "data": data, "to": to})

    monkeypatch.setattr(server.sio, "emit", fake_emit)
    return calls


@pytest.fixture
def guest(db):
    from apps.users.models import User

    return User.objects.create_user(email="guest@example.com", password="GuestPass123", name="Guest")


@pytest.fixture
def host(db):
    from apps.users.models import User

    return User.objects.create_user(
        email="host@example.com",
        password="HostPass123",
        name="Host",
        role=User.RoleChoices.HOST,
    )


@pytest.fixture
def platform_admin(db):
    from apps.users.models import User

    return User.objects.create_user(
        email="moderator@example.com",
        password="AdminPass123",
        role=User.RoleChoices.ADMIN,
    )


@pytest.fixture
def listing(host):
    from apps.listings.models import Listing

    return Listing.objects.create(
        host=host,
        title="Sea View Cottage",
        description="Two minutes from the beach.",
        location="Goa",
        category="beach",
        price=Decimal("100.00"),
        guests=4,
        amenities={"wifi": True, "pool": False},
    )


@pytest.fixture
def booking(guest, host, listing):
    from apps.bookings.models import Booking

    check_in = date.today() + timedelta(days=10)
    return Booking.objects.create(
        guest=guest,
        host=host,
        listing=listing,
        check_in=check_in,
        check_out=check_in + timedelta(days=3),
        guests=2,
        total_price=Decimal("300.00"),
    )


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient

    return APIClient()
