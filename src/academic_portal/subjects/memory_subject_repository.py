from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.enums import Department
from ..core.exceptions import DuplicateKeyConflict
from ..database.memory_store import MemoryStore
from .model import Subject
from .repository import SubjectRepository


class MemorySubjectRepository(SubjectRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def create(self, *, department: Department, join_year: str, subject_name: str) -> int:
        with self._store.lock:
            for s in self._store.subjects.values():
                if (s.department, s.join_year, s.subject_name) == (department, join_year, subject_name):
                    raise DuplicateKeyConflict("Subject already exists")

            subject_id = self._store.next_id("subjects")
            self._store.subjects[subject_id] = Subject(
                subject_id=subject_id,
                department=department,
                join_year=join_year,
                subject_name=subject_name,
                created_at=now_local(),
            )
            return subject_id

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[Subject]:
        with self._store.lock:
            rows = [s for s in self._store.subjects.values() if s.department is department and s.join_year == join_year]
        return sorted(rows, key=lambda s: s.subject_name)

    def delete(self, *, subject_id: int) -> bool:
        with self._store.lock:
            return self._store.subjects.pop(int(subject_id), None) is not None
