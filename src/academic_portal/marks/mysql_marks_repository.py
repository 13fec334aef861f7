from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ExamType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import MarksListRow, MarksRecord
from .repository import MarksRepository

_COLUMNS = "m.marks_id, m.student_id, m.subject_name, m.exam_type, m.marks, m.faculty_id, m.recorded_at"


def _to_record(r: dict) -> MarksRecord:
    return MarksRecord(
        marks_id=int(r["marks_id"]),
        student_id=r["student_id"],
        subject_name=r["subject_name"],
        exam_type=ExamType(r["exam_type"]),
        marks=int(r["marks"]),
        faculty_id=r["faculty_id"],
        recorded_at=r["recorded_at"],
    )


class MySQLMarksRepository(MarksRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        exam_type: ExamType,
        marks: int,
        faculty_id: str,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO marks(student_id, subject_name, exam_type, marks, faculty_id)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE marks=VALUES(marks)
                """,
                (student_id, subject_name, exam_type.value, int(marks), faculty_id),
            )

    def delete_by_id(self, *, marks_id: int, faculty_id: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if faculty_id is None:
                cur.execute("DELETE FROM marks WHERE marks_id=%s", (int(marks_id),))
            else:
                cur.execute("DELETE FROM marks WHERE marks_id=%s AND faculty_id=%s", (int(marks_id), faculty_id))
            return cur.rowcount > 0

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM marks")
            return int(cur.rowcount)

    def list_for_student(self, student_id: str) -> Sequence[MarksRecord]:
        # exam_type is an ENUM column, so it sorts by declaration order
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM marks m
                WHERE m.student_id=%s
                ORDER BY m.subject_name, m.exam_type
                """,
                (student_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[MarksListRow]:
        where = ""
        params: tuple = ()
        if faculty_id is not None:
            where = "WHERE m.faculty_id=%s"
            params = (faculty_id,)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, u.name AS student_name
                FROM marks m
                JOIN users u ON u.user_id = m.student_id
                {where}
                ORDER BY m.recorded_at DESC, m.subject_name
                """,
                params,
            )
            return [MarksListRow(record=_to_record(r), student_name=r["student_name"]) for r in fetchall(cur)]

    def list_subjects_for_faculty(self, faculty_id: str) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT DISTINCT subject_name FROM marks WHERE faculty_id=%s ORDER BY subject_name",
                (faculty_id,),
            )
            return [r["subject_name"] for r in fetchall(cur)]
