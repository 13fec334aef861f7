from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_choice, require_int, require_non_empty
from ..core.constants import MAX_MARKS, MIN_MARKS
from ..core.enums import ExamType
from ..core.scoping import Actor, owner_scope, require_admin
from .model import MarksListRow, MarksRecord
from .repository import MarksRepository

logger = logging.getLogger(__name__)


class MarksService:
    def __init__(self, marks: MarksRepository):
        self._marks = marks

    def record_marks(
        self,
        *,
        student_id: Any,
        subject_name: Any,
        exam_type: Any,
        marks: Any,
        faculty_id: Any,
    ) -> None:
        """Insert, or overwrite the marks of, the record for (student, subject, exam type)."""
        student_id = require_non_empty(student_id, "studentId")
        subject_name = require_non_empty(subject_name, "subjectName")
        exam_type = require_choice(exam_type, ExamType, "examType")
        marks = require_int(marks, "marks", min_value=MIN_MARKS, max_value=MAX_MARKS)
        faculty_id = require_non_empty(faculty_id, "facultyId")

        self._marks.upsert(
            student_id=student_id,
            subject_name=subject_name,
            exam_type=exam_type,
            marks=marks,
            faculty_id=faculty_id,
        )
        logger.debug("marks %s/%s/%s=%d by %s", student_id, subject_name, exam_type.value, marks, faculty_id)

    def student_marks(self, student_id: str) -> Sequence[MarksRecord]:
        # Raw per-exam rows; no averaging is done anywhere.
        return self._marks.list_for_student(student_id)

    def subjects_for_faculty(self, faculty_id: str | None) -> Sequence[str]:
        if not faculty_id:
            return []
        return self._marks.list_subjects_for_faculty(faculty_id)

    def list_records(self, *, actor: Actor) -> Sequence[MarksListRow]:
        return self._marks.list_rows(faculty_id=owner_scope(actor))

    def delete_record(self, *, actor: Actor, marks_id: int) -> bool:
        deleted = self._marks.delete_by_id(marks_id=int(marks_id), faculty_id=owner_scope(actor))
        if not deleted:
            logger.info("marks %s not deleted for %s %s (missing or not owned)", marks_id, actor.role.value, actor.user_id)
        return deleted

    def clear_all(self, *, actor: Actor) -> int:
        require_admin(actor)
        count = self._marks.delete_all()
        logger.warning("cleared %d marks records", count)
        return count
