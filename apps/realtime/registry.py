"""Process-local map of user id -> active socket ids."""

from __future__ import annotations

import threading
from collections import defaultdict


class ConnectionRegistry:
    """
    Track which sockets belong to which user.

    A user may hold several connections (phone and tablet, reconnects that
    overlap with a stale socket). Disconnecting one socket never drops the
    others. The socket server runs in threading mode, hence the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_user: dict[int, set[str]] = defaultdict(set)
        self._by_sid: dict[str, int] = {}

    def register(self, user_id: int, sid: str) -> None:
        with self._lock:
            previous = self._by_sid.get(sid)
            if previous is not None and previous != user_id:
                self._discard(previous, sid)
            self._by_user[user_id].add(sid)
            self._by_sid[sid] = user_id

    def unregister(self, sid: str) -> int | None:
        """Forget one socket; returns the user it belonged to."""
        with self._lock:
            user_id = self._by_sid.pop(sid, None)
            if user_id is not None:
                self._discard(user_id, sid)
            return user_id

    def sids_for(self, user_id: int) -> set[str]:
        with self._lock:
            return set(self._by_user.get(user_id, ()))

    def is_online(self, user_id: int) -> bool:
        with self._lock:
            return bool(self._by_user.get(user_id))

    def clear(self) -> None:
        with self._lock:
            self._by_user.clear()
            self._by_sid.clear()

    def _discard(self, user_id: int, sid: str) -> None:
        sids = self._by_user.get(user_id)
        if sids is None:
            return
        sids.discard(sid)
        if not sids:
            del self._by_user[user_id]


registry = ConnectionRegistry()
