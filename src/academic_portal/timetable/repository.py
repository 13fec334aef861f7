from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import DayOfWeek, Department, TimeSlot
from .model import AssignedSubject, TimetableSlotView


class TimetableRepository(Protocol):
    """Read side of the timetable, plus the slot upsert used for seeding."""

    def upsert(
        self,
        *,
        department: Department,
        join_year: str,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
        subject_name: str,
        faculty_id: Optional[str],
    ) -> None:
        raise NotImplementedError

    def list_assigned_subjects(self, faculty_id: str) -> Sequence[AssignedSubject]:
        """Distinct (department, join_year, subject) triples taught by one faculty."""

        raise NotImplementedError

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[TimetableSlotView]:
        """Weekly view ordered Monday..Saturday, then by hour."""

        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
