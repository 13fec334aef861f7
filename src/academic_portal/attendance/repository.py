from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceListRow, AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    Both the MySQL and the in-memory implementation honour the same contract:
    ``upsert`` is atomic and, for an existing key, changes ``status`` only.
    """

    def get_by_key(self, *, student_id: str, subject_name: str, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        attendance_date: date,
        status: AttendanceStatus,
        faculty_id: str,
    ) -> None:
        raise NotImplementedError

    def delete_by_id(self, *, attendance_id: int, faculty_id: Optional[str] = None) -> bool:
        """Delete one record; when ``faculty_id`` is given only a record it owns matches."""

        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        """Records of one student ordered by subject name, then date."""

        raise NotImplementedError

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[AttendanceListRow]:
        """Records joined with the student name, newest date first."""

        raise NotImplementedError
