from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ExamType
from .model import MarksListRow, MarksRecord


class MarksRepository(Protocol):
    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        exam_type: ExamType,
        marks: int,
        faculty_id: str,
    ) -> None:
        """Create the mark or, for an existing key, replace ``marks`` only."""

        raise NotImplementedError

    def delete_by_id(self, *, marks_id: int, faculty_id: Optional[str] = None) -> bool:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[MarksRecord]:
        """Marks of one student ordered by subject name, then exam type."""

        raise NotImplementedError

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[MarksListRow]:
        raise NotImplementedError

    def list_subjects_for_faculty(self, faculty_id: str) -> Sequence[str]:
        raise NotImplementedError
