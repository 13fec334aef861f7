from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import DayOfWeek, Department, TimeSlot
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, enum_field_sql, fetchall
from .model import AssignedSubject, TimetableSlotView
from .repository import TimetableRepository


class MySQLTimetableRepository(TimetableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        department: Department,
        join_year: str,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
        subject_name: str,
        faculty_id: Optional[str],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timetable(department, join_year, day_of_week, time_slot, subject_name, faculty_id)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE subject_name=VALUES(subject_name), faculty_id=VALUES(faculty_id)
                """,
                (department.value, join_year, day_of_week.value, time_slot.value, subject_name, faculty_id),
            )

    def list_assigned_subjects(self, faculty_id: str) -> Sequence[AssignedSubject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT department, join_year, subject_name
                FROM timetable
                WHERE faculty_id=%s
                ORDER BY department, join_year, subject_name
                """,
                (faculty_id,),
            )
            return [
                AssignedSubject(
                    department=Department(r["department"]),
                    join_year=r["join_year"],
                    subject_name=r["subject_name"],
                )
                for r in fetchall(cur)
            ]

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[TimetableSlotView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT t.day_of_week, t.time_slot, t.subject_name, t.faculty_id, u.name AS faculty_name
                FROM timetable t
                LEFT JOIN users u ON u.user_id = t.faculty_id
                WHERE t.department=%s AND t.join_year=%s
                ORDER BY {enum_field_sql("t.day_of_week", DayOfWeek)}, {enum_field_sql("t.time_slot", TimeSlot)}
                """,
                (department.value, join_year),
            )
            return [
                TimetableSlotView(
                    day_of_week=DayOfWeek(r["day_of_week"]),
                    time_slot=TimeSlot(r["time_slot"]),
                    subject_name=r["subject_name"],
                    faculty_id=r.get("faculty_id"),
                    faculty_name=r.get("faculty_name"),
                )
                for r in fetchall(cur)
            ]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM timetable")
            return int(cur.rowcount)
