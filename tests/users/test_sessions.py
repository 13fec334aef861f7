from __future__ import annotations

from datetime import datetime, timedelta

from academic_portal.core.enums import Role
from academic_portal.users.model import SessionUser
from academic_portal.users.sessions import SessionStore


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def _user(user_id="F1"):
    return SessionUser(user_id=user_id, name="Ravi", role=Role.FACULTY)


def test_token_expires_after_ttl(fixed_now):
    clock = FakeClock(fixed_now)
    sessions = SessionStore(ttl_minutes=30, clock=clock)
    token = sessions.issue(_user())

    clock.advance(minutes=29)
    assert sessions.get(token).user_id == "F1"

    clock.advance(minutes=1)
    assert sessions.get(token) is None


def test_unknown_and_empty_tokens(fixed_now):
    sessions = SessionStore(ttl_minutes=30, clock=FakeClock(fixed_now))

    assert sessions.get(None) is None
    assert sessions.get("") is None
    assert sessions.get("nope") is None
    sessions.revoke(None)


def test_tokens_are_unique_per_login(fixed_now):
    sessions = SessionStore(ttl_minutes=30, clock=FakeClock(fixed_now))

    assert sessions.issue(_user()) != sessions.issue(_user())


def test_revoke_user_drops_all_of_their_tokens(fixed_now):
    sessions = SessionStore(ttl_minutes=30, clock=FakeClock(fixed_now))
    a = sessions.issue(_user("F1"))
    b = sessions.issue(_user("F1"))
    c = sessions.issue(_user("F2"))

    sessions.revoke_user("F1")

    assert sessions.get(a) is None and sessions.get(b) is None
    assert sessions.get(c).user_id == "F2"


def test_purge_expired(fixed_now):
    clock = FakeClock(fixed_now)
    sessions = SessionStore(ttl_minutes=10, clock=clock)
    sessions.issue(_user("F1"))
    clock.advance(minutes=5)
    fresh = sessions.issue(_user("F2"))
    clock.advance(minutes=6)

    assert sessions.purge_expired() == 1
    assert sessions.get(fresh) is not None
