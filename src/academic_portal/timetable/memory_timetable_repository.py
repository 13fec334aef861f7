from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import DayOfWeek, Department, TimeSlot
from ..database.memory_store import MemoryStore
from .model import AssignedSubject, TimetableEntry, TimetableSlotView, weekly_sort_key
from .repository import TimetableRepository


class MemoryTimetableRepository(TimetableRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

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
        key = (department, join_year, day_of_week, time_slot)
        with self._store.lock:
            timetable_id = next(
                (
                    e.timetable_id
                    for e in self._store.timetable.values()
                    if (e.department, e.join_year, e.day_of_week, e.time_slot) == key
                ),
                None,
            )
            if timetable_id is None:
                timetable_id = self._store.next_id("timetable")
            self._store.timetable[timetable_id] = TimetableEntry(
                timetable_id=timetable_id,
                department=department,
                join_year=join_year,
                day_of_week=day_of_week,
                time_slot=time_slot,
                subject_name=subject_name,
                faculty_id=faculty_id,
            )

    def list_assigned_subjects(self, faculty_id: str) -> Sequence[AssignedSubject]:
        with self._store.lock:
            found = {
                AssignedSubject(department=e.department, join_year=e.join_year, subject_name=e.subject_name)
                for e in self._store.timetable.values()
                if e.faculty_id == faculty_id
            }
        return sorted(found, key=lambda a: (a.department.value, a.join_year, a.subject_name))

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[TimetableSlotView]:
        with self._store.lock:
            out = []
            for e in self._store.timetable.values():
                if e.department is not department or e.join_year != join_year:
                    continue
                faculty = self._store.users.get(e.faculty_id) if e.faculty_id else None
                out.append(
                    TimetableSlotView(
                        day_of_week=e.day_of_week,
                        time_slot=e.time_slot,
                        subject_name=e.subject_name,
                        faculty_id=e.faculty_id,
                        faculty_name=faculty.name if faculty else None,
                    )
                )
        out.sort(key=lambda v: weekly_sort_key(v.day_of_week, v.time_slot))
        return out

    def delete_all(self) -> int:
        with self._store.lock:
            count = len(self._store.timetable)
            self._store.timetable.clear()
            return count
