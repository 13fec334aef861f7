from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Department
from .model import Subject


class SubjectRepository(Protocol):
    def create(self, *, department: Department, join_year: str, subject_name: str) -> int:
        """Insert a subject; raises DuplicateKeyConflict if the cohort already has it."""

        raise NotImplementedError

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[Subject]:
        raise NotImplementedError

    def delete(self, *, subject_id: int) -> bool:
        raise NotImplementedError
