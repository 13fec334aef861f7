from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import iso
from ..core.enums import ExamType


@dataclass(frozen=True)
class MarksRecord:
    """Domain entity: one mark, unique per (student, subject, exam type)."""

    marks_id: int
    student_id: str
    subject_name: str
    exam_type: ExamType
    marks: int
    faculty_id: str
    recorded_at: datetime

    @property
    def key(self) -> tuple[str, str, ExamType]:
        return self.student_id, self.subject_name, self.exam_type

    def to_json(self) -> dict:
        return {
            "id": self.marks_id,
            "studentId": self.student_id,
            "subjectName": self.subject_name,
            "examType": self.exam_type.value,
            "marks": self.marks,
            "facultyId": self.faculty_id,
            "date": iso(self.recorded_at),
        }

    def to_student_json(self) -> dict:
        return {
            "subjectName": self.subject_name,
            "examType": self.exam_type.value,
            "marks": self.marks,
            "date": iso(self.recorded_at),
        }


@dataclass(frozen=True)
class MarksListRow:
    record: MarksRecord
    student_name: str

    def to_json(self) -> dict:
        out = self.record.to_json()
        out["studentName"] = self.student_name
        return out
