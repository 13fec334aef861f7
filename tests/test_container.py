from __future__ import annotations

import mysql.connector
import pytest

from academic_portal.container import build_container
from academic_portal.core.enums import Role, StorageMode
from academic_portal.database.connection import DatabaseConnection
from academic_portal.attendance.memory_attendance_repository import MemoryAttendanceRepository
from academic_portal.attendance.mysql_attendance_repository import MySQLAttendanceRepository

DB = {"host": "db.invalid", "port": 3306, "user": "root", "password": "x", "database": "sbk_portal"}


@pytest.mark.parametrize(
    "error",
    [mysql.connector.errors.InterfaceError("Can't connect"), OSError("connection refused")],
)
def test_unreachable_mysql_falls_back_to_memory(monkeypatch, error):
    def boom(self):
        raise error

    monkeypatch.setattr(DatabaseConnection, "ping", boom)

    container = build_container(db_config=DB, use_database=True)

    assert container.mode is StorageMode.MEMORY
    assert container.conn is None
    assert isinstance(container.attendance_repo, MemoryAttendanceRepository)
    admin = container.users_repo.get_by_id("admin")
    assert admin is not None and admin.role is Role.ADMIN


def test_reachable_mysql_is_used(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "ping", lambda self: None)

    container = build_container(db_config=DB, use_database=True)

    assert container.mode is StorageMode.MYSQL
    assert container.store is None
    assert isinstance(container.attendance_repo, MySQLAttendanceRepository)


def test_memory_repositories_share_one_store():
    container = build_container(db_config=DB, use_database=False)

    container.attendance_service.record_attendance(
        student_id="S1", subject_name="Maths", attendance_date="2024-01-10", status="present", faculty_id="F1"
    )

    assert container.mode is StorageMode.MEMORY
    assert len(container.store.attendance) == 1
    assert container.store.users["admin"].role is Role.ADMIN
