from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from werkzeug.security import generate_password_hash

from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_ID, DEFAULT_ADMIN_NAME, DEFAULT_SESSION_TTL_MINUTES
from .core.enums import Role, StorageMode
from .core.exceptions import StoreUnavailable
from .database.bootstrap import apply_schema, ensure_default_admin
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import MemoryStore
from .marks.memory_marks_repository import MemoryMarksRepository
from .marks.mysql_marks_repository import MySQLMarksRepository
from .marks.repository import MarksRepository
from .marks.service import MarksService
from .subjects.memory_subject_repository import MemorySubjectRepository
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .timetable.memory_timetable_repository import MemoryTimetableRepository
from .timetable.mysql_timetable_repository import MySQLTimetableRepository
from .timetable.repository import TimetableRepository
from .timetable.service import TimetableService
from .users.memory_user_repository import MemoryUserRepository
from .users.model import User
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.sessions import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    mode: StorageMode
    conn: Optional[DatabaseConnection]
    store: Optional[MemoryStore]
    sessions: SessionStore

    users_repo: UserRepository
    subjects_repo: SubjectRepository
    timetable_repo: TimetableRepository
    attendance_repo: AttendanceRepository
    marks_repo: MarksRepository

    auth_service: AuthService
    user_service: UserService
    subject_service: SubjectService
    timetable_service: TimetableService
    attendance_service: AttendanceService
    marks_service: MarksService


def connect_mysql(db_config: dict, *, auto_init_db: bool, admin_password: str) -> DatabaseConnection:
    """Open the MySQL backend or raise StoreUnavailable."""

    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    try:
        if auto_init_db:
            apply_schema(conn)
            ensure_default_admin(conn, password=admin_password)
        conn.ping()
    except (mysql.connector.Error, OSError) as e:
        raise StoreUnavailable(f"MySQL unavailable at {conn.config.describe()}: {e}") from e
    return conn


def _seed_memory_admin(users: UserRepository, *, password: str) -> None:
    if users.get_by_id(DEFAULT_ADMIN_ID):
        return
    users.create_user(
        User(
            user_id=DEFAULT_ADMIN_ID,
            role=Role.ADMIN,
            name=DEFAULT_ADMIN_NAME,
            email=DEFAULT_ADMIN_EMAIL,
            password_hash=generate_password_hash(password),
        )
    )


def build_container(
    *,
    db_config: dict,
    use_database: bool = True,
    auto_init_db: bool = False,
    admin_password: str = "admin123",
    session_ttl_minutes: int = DEFAULT_SESSION_TTL_MINUTES,
) -> Container:
    """Wire repositories and services. The storage mode is decided here, once."""

    conn: Optional[DatabaseConnection] = None
    if use_database:
        try:
            conn = connect_mysql(db_config, auto_init_db=auto_init_db, admin_password=admin_password)
        except StoreUnavailable as e:
            logger.warning("%s; using in-memory storage instead", e)

    store: Optional[MemoryStore] = None
    if conn is not None:
        mode = StorageMode.MYSQL
        users_repo = MySQLUserRepository(conn)
        subjects_repo = MySQLSubjectRepository(conn)
        timetable_repo = MySQLTimetableRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        marks_repo = MySQLMarksRepository(conn)
    else:
        mode = StorageMode.MEMORY
        store = MemoryStore()
        users_repo = MemoryUserRepository(store)
        subjects_repo = MemorySubjectRepository(store)
        timetable_repo = MemoryTimetableRepository(store)
        attendance_repo = MemoryAttendanceRepository(store)
        marks_repo = MemoryMarksRepository(store)
        _seed_memory_admin(users_repo, password=admin_password)

    logger.info("storage mode: %s", mode.value)

    sessions = SessionStore(ttl_minutes=session_ttl_minutes)

    return Container(
        mode=mode,
        conn=conn,
        store=store,
        sessions=sessions,
        users_repo=users_repo,
        subjects_repo=subjects_repo,
        timetable_repo=timetable_repo,
        attendance_repo=attendance_repo,
        marks_repo=marks_repo,
        auth_service=AuthService(users_repo, sessions),
        user_service=UserService(users_repo, sessions),
        subject_service=SubjectService(subjects_repo),
        timetable_service=TimetableService(timetable_repo, users_repo),
        attendance_service=AttendanceService(attendance_repo),
        marks_service=MarksService(marks_repo),
    )
