from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DayOfWeek, Department, TimeSlot


@dataclass(frozen=True)
class TimetableEntry:
    """One teaching hour of a cohort's week."""

    timetable_id: int
    department: Department
    join_year: str
    day_of_week: DayOfWeek
    time_slot: TimeSlot
    subject_name: str
    faculty_id: Optional[str] = None


@dataclass(frozen=True)
class AssignedSubject:
    department: Department
    join_year: str
    subject_name: str

    def to_json(self) -> dict:
        return {
            "department": self.department.value,
            "joinYear": self.join_year,
            "subjectName": self.subject_name,
        }


@dataclass(frozen=True)
class TimetableSlotView:
    """Read-model for the student weekly view (joined with the faculty name)."""

    day_of_week: DayOfWeek
    time_slot: TimeSlot
    subject_name: str
    faculty_id: Optional[str]
    faculty_name: Optional[str]

    def to_json(self) -> dict:
        return {
            "dayOfWeek": self.day_of_week.value,
            "timeSlot": self.time_slot.value,
            "subjectName": self.subject_name,
            "facultyId": self.faculty_id,
            "facultyName": self.faculty_name,
        }


def weekly_sort_key(day_of_week: DayOfWeek, time_slot: TimeSlot) -> tuple[int, int]:
    return list(DayOfWeek).index(day_of_week), list(TimeSlot).index(time_slot)
