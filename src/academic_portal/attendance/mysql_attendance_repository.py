from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceListRow, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "a.attendance_id, a.student_id, a.subject_name, a.attendance_date, a.status, a.faculty_id, a.recorded_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=r["student_id"],
        subject_name=r["subject_name"],
        attendance_date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
        faculty_id=r["faculty_id"],
        recorded_at=r["recorded_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_key(self, *, student_id: str, subject_name: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.student_id=%s AND a.subject_name=%s AND a.attendance_date=%s
                """,
                (student_id, subject_name, attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        attendance_date: date,
        status: AttendanceStatus,
        faculty_id: str,
    ) -> None:
        # One statement: the unique key resolves concurrent duplicates, and the
        # first faculty_id/recorded_at survive a resubmission.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, subject_name, attendance_date, status, faculty_id)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (student_id, subject_name, attendance_date, status.value, faculty_id),
            )

    def delete_by_id(self, *, attendance_id: int, faculty_id: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if faculty_id is None:
                cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            else:
                cur.execute(
                    "DELETE FROM attendance WHERE attendance_id=%s AND faculty_id=%s",
                    (int(attendance_id), faculty_id),
                )
            return cur.rowcount > 0

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance")
            return int(cur.rowcount)

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.student_id=%s
                ORDER BY a.subject_name, a.attendance_date, a.attendance_id
                """,
                (student_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[AttendanceListRow]:
        where = ""
        params: tuple = ()
        if faculty_id is not None:
            where = "WHERE a.faculty_id=%s"
            params = (faculty_id,)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, u.name AS student_name
                FROM attendance a
                JOIN users u ON u.user_id = a.student_id
                {where}
                ORDER BY a.attendance_date DESC, a.subject_name
                """,
                params,
            )
            return [AttendanceListRow(record=_to_record(r), student_name=r["student_name"]) for r in fetchall(cur)]
