from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from .model import SessionUser


@dataclass(frozen=True)
class _Entry:
    user: SessionUser
    expires_at: datetime


class SessionStore:
    """Login tokens with a fixed time-to-live, kept in process memory."""

    def __init__(self, *, ttl_minutes: int, clock: Callable[[], datetime] = now_local):
        self._ttl = timedelta(minutes=int(ttl_minutes))
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def issue(self, user: SessionUser) -> str:
        token = secrets.token_urlsafe(32)
        self.purge_expired()
        with self._lock:
            self._entries[token] = _Entry(user=user, expires_at=self._clock() + self._ttl)
        return token

    def get(self, token: Optional[str]) -> Optional[SessionUser]:
        if not token:
            return None
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[token]
                return None
            return entry.user

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._entries.pop(token, None)

    def revoke_user(self, user_id: str) -> None:
        with self._lock:
            for token in [t for t, e in self._entries.items() if e.user.user_id == user_id]:
                del self._entries[token]

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [t for t, e in self._entries.items() if e.expires_at <= now]
            for token in expired:
                del self._entries[token]
            return len(expired)
