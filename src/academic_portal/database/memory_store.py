from __future__ import annotations

import itertools
import threading
from typing import Iterator

from ..attendance.model import AttendanceRecord
from ..marks.model import MarksRecord
from ..subjects.model import Subject
from ..timetable.model import TimetableEntry
from ..users.model import User


class MemoryStore:
    """In-process tables used when MySQL is unavailable.

    One instance is built per process and shared by every memory repository.
    All reads and mutations go through ``lock`` so each upsert is a single
    exclusive step, like ``INSERT ... ON DUPLICATE KEY UPDATE`` on MySQL.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users: dict[str, User] = {}
        self.subjects: dict[int, Subject] = {}
        self.attendance: dict[int, AttendanceRecord] = {}
        self.marks: dict[int, MarksRecord] = {}
        self.timetable: dict[int, TimetableEntry] = {}
        # natural key -> id, kept in step with the tables above
        self.attendance_keys: dict[tuple, int] = {}
        self.marks_keys: dict[tuple, int] = {}
        self._sequences: dict[str, Iterator[int]] = {
            "subjects": itertools.count(1),
            "attendance": itertools.count(1),
            "marks": itertools.count(1),
            "timetable": itertools.count(1),
        }

    def next_id(self, table: str) -> int:
        with self.lock:
            return next(self._sequences[table])

    def cascade_user_delete(self, user_id: str) -> None:
        """Mirror the MySQL foreign keys: records cascade, timetable faculty is set NULL."""

        with self.lock:
            for table in (self.attendance, self.marks):
                doomed = [rid for rid, r in table.items() if user_id in (r.student_id, r.faculty_id)]
                for rid in doomed:
                    del table[rid]
            self.reindex()

            for tid, entry in list(self.timetable.items()):
                if entry.faculty_id == user_id:
                    self.timetable[tid] = TimetableEntry(
                        timetable_id=entry.timetable_id,
                        department=entry.department,
                        join_year=entry.join_year,
                        day_of_week=entry.day_of_week,
                        time_slot=entry.time_slot,
                        subject_name=entry.subject_name,
                        faculty_id=None,
                    )

    def reindex(self) -> None:
        with self.lock:
            self.attendance_keys = {r.key: rid for rid, r in self.attendance.items()}
            self.marks_keys = {r.key: rid for rid, r in self.marks.items()}
