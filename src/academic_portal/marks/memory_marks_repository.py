from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ExamType
from ..database.memory_store import MemoryStore
from .model import MarksListRow, MarksRecord
from .repository import MarksRepository

_EXAM_ORDER = {exam: i for i, exam in enumerate(ExamType)}


class MemoryMarksRepository(MarksRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def _find(self, key: tuple[str, str, ExamType]) -> Optional[MarksRecord]:
        record_id = self._store.marks_keys.get(key)
        return self._store.marks.get(record_id) if record_id is not None else None

    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        exam_type: ExamType,
        marks: int,
        faculty_id: str,
    ) -> None:
        with self._store.lock:
            existing = self._find((student_id, subject_name, exam_type))
            if existing:
                self._store.marks[existing.marks_id] = replace(existing, marks=int(marks))
                return

            marks_id = self._store.next_id("marks")
            self._store.marks[marks_id] = MarksRecord(
                marks_id=marks_id,
                student_id=student_id,
                subject_name=subject_name,
                exam_type=exam_type,
                marks=int(marks),
                faculty_id=faculty_id,
                recorded_at=now_local(),
            )
            self._store.marks_keys[(student_id, subject_name, exam_type)] = marks_id

    def delete_by_id(self, *, marks_id: int, faculty_id: Optional[str] = None) -> bool:
        with self._store.lock:
            record = self._store.marks.get(int(marks_id))
            if not record:
                return False
            if faculty_id is not None and record.faculty_id != faculty_id:
                return False
            del self._store.marks[record.marks_id]
            self._store.marks_keys.pop(record.key, None)
            return True

    def delete_all(self) -> int:
        with self._store.lock:
            count = len(self._store.marks)
            self._store.marks.clear()
            self._store.marks_keys.clear()
            return count

    def list_for_student(self, student_id: str) -> Sequence[MarksRecord]:
        with self._store.lock:
            rows = [r for r in self._store.marks.values() if r.student_id == student_id]
        rows.sort(key=lambda r: (r.subject_name, _EXAM_ORDER[r.exam_type]))
        return rows

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[MarksListRow]:
        with self._store.lock:
            out = []
            for record in self._store.marks.values():
                if faculty_id is not None and record.faculty_id != faculty_id:
                    continue
                student = self._store.users.get(record.student_id)
                if not student:
                    continue
                out.append(MarksListRow(record=record, student_name=student.name))

        out.sort(key=lambda row: row.record.subject_name)
        out.sort(key=lambda row: row.record.recorded_at, reverse=True)
        return out

    def list_subjects_for_faculty(self, faculty_id: str) -> Sequence[str]:
        with self._store.lock:
            return sorted({r.subject_name for r in self._store.marks.values() if r.faculty_id == faculty_id})
