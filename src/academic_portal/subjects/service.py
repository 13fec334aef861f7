from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_choice, require_non_empty
from ..core.enums import Department
from ..core.scoping import Actor, require_admin
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def add_subject(self, *, actor: Actor, department: Any, join_year: Any, subject_name: Any) -> int:
        require_admin(actor)
        subject_id = self._subjects.create(
            department=require_choice(department, Department, "department"),
            join_year=require_non_empty(join_year, "joinYear"),
            subject_name=require_non_empty(subject_name, "subjectName"),
        )
        logger.info("subject %s added (id=%s)", subject_name, subject_id)
        return subject_id

    def list_for_cohort(self, *, department: Any, join_year: Any) -> Sequence[Subject]:
        return self._subjects.list_for_cohort(
            department=require_choice(department, Department, "department"),
            join_year=require_non_empty(join_year, "joinYear"),
        )

    def delete_subject(self, *, actor: Actor, subject_id: int) -> bool:
        # Missing ids are a no-op, as with record deletes.
        require_admin(actor)
        return self._subjects.delete(subject_id=int(subject_id))
