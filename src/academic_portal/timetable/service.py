from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_choice, require_non_empty
from ..core.enums import DayOfWeek, Department, Role, TimeSlot
from ..core.scoping import Actor, require_admin
from ..users.repository import UserRepository
from .model import AssignedSubject, TimetableSlotView
from .repository import TimetableRepository

logger = logging.getLogger(__name__)


class TimetableService:
    def __init__(self, timetable: TimetableRepository, users: UserRepository):
        self._timetable = timetable
        self._users = users

    def assign_slot(
        self,
        *,
        department: Any,
        join_year: Any,
        day_of_week: Any,
        time_slot: Any,
        subject_name: Any,
        faculty_id: Optional[str] = None,
    ) -> None:
        """Set the subject/faculty of one cohort hour. Used by the seed script."""

        self._timetable.upsert(
            department=require_choice(department, Department, "department"),
            join_year=require_non_empty(join_year, "joinYear"),
            day_of_week=require_choice(day_of_week, DayOfWeek, "dayOfWeek"),
            time_slot=require_choice(time_slot, TimeSlot, "timeSlot"),
            subject_name=require_non_empty(subject_name, "subjectName"),
            faculty_id=faculty_id or None,
        )

    def assigned_subjects(self, faculty_id: Optional[str]) -> Sequence[AssignedSubject]:
        if not faculty_id:
            # No faculty given: fall back to the first faculty account.
            first = self._users.first_by_role(Role.FACULTY)
            if not first:
                return []
            faculty_id = first.user_id
        return self._timetable.list_assigned_subjects(faculty_id)

    def student_timetable(self, student_id: str) -> Sequence[TimetableSlotView]:
        student = self._users.get_by_id_and_role(student_id, Role.STUDENT)
        if not student or not student.department or not student.join_year:
            return []
        return self._timetable.list_for_cohort(department=student.department, join_year=student.join_year)

    def clear_all(self, *, actor: Actor) -> int:
        require_admin(actor)
        count = self._timetable.delete_all()
        logger.warning("cleared %d timetable entries", count)
        return count
