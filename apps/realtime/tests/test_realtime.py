"""Tests for the connection registry and socket authentication."""

from __future__ import annotations

import threading

import pytest
from rest_framework_simplejwt.tokens import RefreshToken
from socketio.exceptions import ConnectionRefusedError as SocketConnectionRefused

from apps.realtime import server
from apps.realtime.registry import ConnectionRegistry, registry


def test_registry_keeps_other_sockets_on_disconnect():
    reg = ConnectionRegistry()
    reg.register(1, "a")
    reg.register(1, "b")
    reg.register(2, "c")

    assert reg.unregister("a") == 1
    assert reg.sids_for(1) == {"b"}
    assert reg.is_online(1)

    reg.unregister("b")
    assert not reg.is_online(1)
    assert reg.is_online(2)


def test_registry_unknown_sid():
    reg = ConnectionRegistry()
    assert reg.unregister("missing") is None
    assert reg.sids_for(42) == set()


def test_reused_sid_moves_to_new_user():
    reg = ConnectionRegistry()
    reg.register(1, "a")
    reg.register(2, "a")

    assert not reg.is_online(1)
    assert reg.sids_for(2) == {"a"}


def test_registry_is_thread_safe():
    reg = ConnectionRegistry()

    def churn(user_id):
        for i in range(200):
            sid = f"{user_id}-{i}"
            reg.register(user_id, sid)
            reg.unregister(sid)

    threads = [threading.Thread(target=churn, args=(uid,)) for uid in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not any(reg.is_online(uid) for uid in range(8))


def test_push_to_offline_user_is_skipped(emitted):
    assert server.push_to_user(5, "booking-updated", {"status": "approved"}) is False
    assert emitted == []


def test_push_with_shared_queue_always_emits(emitted, settings):
    settings.SOCKETIO_MESSAGE_QUEUE = "redis://localhost:6379/1"

    assert server.push_to_user(5, "notification", {"id": 1}) is True
    assert emitted == [{"event": "notification", "data": {"id": 1}, "to": "user:5"}]


@pytest.mark.django_db
def test_connect_registers_authenticated_user(guest, monkeypatch):
    rooms = []
    monkeypatch.setattr(server.sio, "enter_room", lambda sid, room, **kw: rooms.append((sid, room)))
    token = str(RefreshToken.for_user(guest).access_token)

    server.connect("sid-1", {"QUERY_STRING": ""}, {"token": token})

    assert registry.sids_for(guest.id) == {"sid-1"}
    assert rooms == [("sid-1", f"user:{guest.id}")]

    server.disconnect("sid-1")
    assert not registry.is_online(guest.id)


@pytest.mark.django_db
def test_connect_accepts_query_string_token(guest, monkeypatch):
    monkeypatch.setattr(server.sio, "enter_room", lambda *a, **kw: None)
    token = str(RefreshToken.for_user(guest).access_token)

    server.connect("sid-2", {"QUERY_STRING": f"EIO=4&token={token}"}, None)

    assert registry.is_online(guest.id)


@pytest.mark.django_db
def test_connect_refuses_bad_or_blocked_users(guest):
    with pytest.raises(SocketConnectionRefused):
        server.connect("sid-3", {"QUERY_STRING": ""}, {"token": "garbage"})
    with pytest.raises(SocketConnectionRefused):
        server.connect("sid-4", {"QUERY_STRING": ""}, None)

    token = str(RefreshToken.for_user(guest).access_token)
    guest.block()
    with pytest.raises(SocketConnectionRefused):
        server.connect("sid-5", {"QUERY_STRING": ""}, {"token": token})

    assert not registry.is_online(guest.id)
