from __future__ import annotations

from datetime import datetime

import pytest
from werkzeug.security import generate_password_hash

from academic_portal.attendance.memory_attendance_repository import MemoryAttendanceRepository
from academic_portal.attendance.service import AttendanceService
from academic_portal.core.enums import Department, Role
from academic_portal.database.memory_store import MemoryStore
from academic_portal.main import create_app
from academic_portal.marks.memory_marks_repository import MemoryMarksRepository
from academic_portal.marks.service import MarksService
from academic_portal.users.memory_user_repository import MemoryUserRepository
from academic_portal.users.model import User


class FakeCursor:
    def __init__(self, rows=None, *, rowcount: int = 1, lastrowid: int = 1, error: Exception | None = None):
        self.executed: list[tuple[str, tuple]] = []
        self._error = error
        self._rows = list(rows or [])
        self.rowcount = rowcount
        self.lastrowid = lastrowid

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))
        if self._error is not None:
            raise self._error

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    """Stands in for DatabaseConnection; every connect() shares one FakeCursor."""

    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connections: list[FakeConnection] = []

    def connect(self, *, with_database: bool = True):
        conn = FakeConnection(self.cursor)
        self.connections.append(conn)
        return conn


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 15, 0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def users_repo(store) -> MemoryUserRepository:
    return MemoryUserRepository(store)


@pytest.fixture
def attendance_service(store) -> AttendanceService:
    return AttendanceService(MemoryAttendanceRepository(store))


@pytest.fixture
def marks_service(store) -> MarksService:
    return MarksService(MemoryMarksRepository(store))


@pytest.fixture
def add_user(users_repo):
    def _add(user_id: str, role: Role = Role.STUDENT, *, name: str | None = None, password: str = "pw123456", **extra) -> User:
        user = User(
            user_id=user_id,
            role=role,
            name=name or user_id,
            email=f"{user_id.lower()}@sbk.edu",
            password_hash=generate_password_hash(password),
            **extra,
        )
        users_repo.create_user(user)
        return user

    return _add


@pytest.fixture
def cs_student(add_user):
    return add_user("S1", Role.STUDENT, name="Asha", department=Department.COMPUTER_SCIENCE, join_year="2024-2027")


@pytest.fixture
def app():
    return create_app("academic_portal.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/login", json={"id": "admin", "password": "admin123", "role": "admin"})
    assert resp.get_json()["success"] is True
    return client


@pytest.fixture
def fake_conn():
    """Build a FakeConnFactory whose cursor returns ``rows`` or raises ``error``."""

    def _make(rows=None, *, rowcount: int = 1, lastrowid: int = 1, error: Exception | None = None) -> FakeConnFactory:
        return FakeConnFactory(FakeCursor(rows, rowcount=rowcount, lastrowid=lastrowid, error=error))

    return _make
