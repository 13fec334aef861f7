from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import iso
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark, unique per (student, subject, date).

    ``faculty_id`` is the faculty that first recorded it and never changes on resubmission.
    """

    attendance_id: int
    student_id: str
    subject_name: str
    attendance_date: date
    status: AttendanceStatus
    faculty_id: str
    recorded_at: datetime

    @property
    def key(self) -> tuple[str, str, date]:
        return self.student_id, self.subject_name, self.attendance_date

    def to_json(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "subjectName": self.subject_name,
            "date": iso(self.attendance_date),
            "status": self.status.value,
            "facultyId": self.faculty_id,
            "timestamp": iso(self.recorded_at),
        }


@dataclass(frozen=True)
class AttendanceListRow:
    """Read-model for admin/faculty record listings (joined with the student name)."""

    record: AttendanceRecord
    student_name: str

    def to_json(self) -> dict:
        out = self.record.to_json()
        out["studentName"] = self.student_name
        return out
