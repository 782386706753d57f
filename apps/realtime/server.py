"""Socket.IO server and the push helper used by the domain services."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qs

import socketio  # type: ignore
from socketio.exceptions import ConnectionRefusedError as SocketConnectionRefused  # type: ignore
from django.conf import settings  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from rest_framework_simplejwt.exceptions import TokenError  # type: ignore
from rest_framework_simplejwt.tokens import AccessToken  # type: ignore

from .registry import registry

logger = logging.getLogger(__name__)


def _client_manager():
    if settings.SOCKETIO_MESSAGE_QUEUE:
        return socketio.RedisManager(settings.SOCKETIO_MESSAGE_QUEUE)
    return None


sio = socketio.Server(
    async_mode="threading",
    cors_allowed_origins=settings.CORS_ALLOWED_ORIGINS,
    client_manager=_client_manager(),
    logger=False,
)


def user_room(user_id: int) -> str:
    return f"user:{user_id}"


def _extract_token(environ: dict, auth: Any) -> str | None:
    if isinstance(auth, dict) and auth.get("token"):
        return str(auth["token"])
    query = parse_qs(environ.get("QUERY_STRING", ""))
    tokens = query.get("token")
    return tokens[0] if tokens else None


def authenticate_socket(environ: dict, auth: Any):
    """Resolve the connecting user from a JWT access token, or ``None``."""

    raw = _extract_token(environ, auth)
    if not raw:
        return None
    try:
        token = AccessToken(raw)
    except TokenError as e:
        logger.warning(f"Socket connection with invalid token refused: {e}")
        return None

    user_id = token.get(settings.SIMPLE_JWT.get("USER_ID_CLAIM", "user_id"))
    user = get_user_model().objects.filter(pk=user_id).first()
    if user is None or not user.is_active or user.is_blocked:
        return None
    return user


@sio.event
def connect(sid, environ, auth=None):  # type: ignore
    user = authenticate_socket(environ, auth)
    if user is None:
        raise SocketConnectionRefused("authentication failed")
    registry.register(user.id, sid)
    sio.enter_room(sid, user_room(user.id))
    logger.info(f"Socket {sid} connected for user {user.id}")


@sio.event
def disconnect(sid, *args):  # type: ignore
    user_id = registry.unregister(sid)
    logger.info(f"Socket {sid} disconnected (user {user_id})")


def push_to_user(user_id: int, event: str, payload: dict) -> bool:
    """
    Emit ``event`` to every connection of ``user_id``.

    Returns ``False`` when nothing was sent because the user has no local
    connection. With a shared message queue the emit always goes out, since
    the user may be connected to another instance.
    """
    if not settings.SOCKETIO_MESSAGE_QUEUE and not registry.is_online(user_id):
        logger.info(f"User {user_id} offline, {event} not pushed")
        return False
    sio.emit(event, payload, to=user_room(user_id))
    logger.info(f"Pushed {event} to user {user_id}")
    return True
