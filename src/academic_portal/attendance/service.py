from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.scoping import Actor, owner_scope, require_admin
from .model import AttendanceListRow
from .repository import AttendanceRepository
from .summary import AttendanceSummary, summarize_attendance

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: record attendance, summarize it, and delete within scope."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_attendance(
        self,
        *,
        student_id: Any,
        subject_name: Any,
        attendance_date: Any,
        status: Any,
        faculty_id: Any,
    ) -> None:
        """Insert, or overwrite the status of, the record for (student, subject, date).

        A resubmission by another faculty keeps the first owner and timestamp.
        """
        student_id = require_non_empty(student_id, "studentId")
        subject_name = require_non_empty(subject_name, "subjectName")
        day = parse_iso_date(attendance_date)
        status = require_choice(status, AttendanceStatus, "status")
        faculty_id = require_non_empty(faculty_id, "facultyId")

        self._attendance.upsert(
            student_id=student_id,
            subject_name=subject_name,
            attendance_date=day,
            status=status,
            faculty_id=faculty_id,
        )
        logger.debug("attendance %s/%s/%s=%s by %s", student_id, subject_name, day, status.value, faculty_id)

    def attendance_exists(self, *, student_id: Any, subject_name: Any, attendance_date: Any) -> bool:
        record = self._attendance.get_by_key(
            student_id=require_non_empty(student_id, "studentId"),
            subject_name=require_non_empty(subject_name, "subjectName"),
            attendance_date=parse_iso_date(attendance_date),
        )
        return record is not None

    def student_summary(self, student_id: str) -> AttendanceSummary:
        return summarize_attendance(self._attendance.list_for_student(student_id))

    def list_records(self, *, actor: Actor) -> Sequence[AttendanceListRow]:
        return self._attendance.list_rows(faculty_id=owner_scope(actor))

    def delete_record(self, *, actor: Actor, attendance_id: int) -> bool:
        """Scoped delete. Missing or foreign ids are a no-op, never an error."""

        deleted = self._attendance.delete_by_id(attendance_id=int(attendance_id), faculty_id=owner_scope(actor))
        if not deleted:
            logger.info("attendance %s not deleted for %s %s (missing or not owned)", attendance_id, actor.role.value, actor.user_id)
        return deleted

    def clear_all(self, *, actor: Actor) -> int:
        require_admin(actor)
        count = self._attendance.delete_all()
        logger.warning("cleared %d attendance records", count)
        return count
