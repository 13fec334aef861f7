from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from ..database.memory_store import MemoryStore
from .model import AttendanceListRow, AttendanceRecord
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def _find(self, key: tuple[str, str, date]) -> Optional[AttendanceRecord]:
        record_id = self._store.attendance_keys.get(key)
        return self._store.attendance.get(record_id) if record_id is not None else None

    def get_by_key(self, *, student_id: str, subject_name: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with self._store.lock:
            return self._find((student_id, subject_name, attendance_date))

    def upsert(
        self,
        *,
        student_id: str,
        subject_name: str,
        attendance_date: date,
        status: AttendanceStatus,
        faculty_id: str,
    ) -> None:
        with self._store.lock:
            existing = self._find((student_id, subject_name, attendance_date))
            if existing:
                self._store.attendance[existing.attendance_id] = replace(existing, status=status)
                return

            attendance_id = self._store.next_id("attendance")
            self._store.attendance[attendance_id] = AttendanceRecord(
                attendance_id=attendance_id,
                student_id=student_id,
                subject_name=subject_name,
                attendance_date=attendance_date,
                status=status,
                faculty_id=faculty_id,
                recorded_at=now_local(),
            )
            self._store.attendance_keys[(student_id, subject_name, attendance_date)] = attendance_id

    def delete_by_id(self, *, attendance_id: int, faculty_id: Optional[str] = None) -> bool:
        with self._store.lock:
            record = self._store.attendance.get(int(attendance_id))
            if not record:
                return False
            if faculty_id is not None and record.faculty_id != faculty_id:
                return False
            del self._store.attendance[record.attendance_id]
            self._store.attendance_keys.pop(record.key, None)
            return True

    def delete_all(self) -> int:
        with self._store.lock:
            count = len(self._store.attendance)
            self._store.attendance.clear()
            self._store.attendance_keys.clear()
            return count

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        with self._store.lock:
            rows = [r for r in self._store.attendance.values() if r.student_id == student_id]
        rows.sort(key=lambda r: (r.subject_name, r.attendance_date, r.attendance_id))
        return rows

    def list_rows(self, *, faculty_id: Optional[str] = None) -> Sequence[AttendanceListRow]:
        with self._store.lock:
            out = []
            for record in self._store.attendance.values():
                if faculty_id is not None and record.faculty_id != faculty_id:
                    continue
                student = self._store.users.get(record.student_id)
                # inner join: records without a student row are not listed
                if not student:
                    continue
                out.append(AttendanceListRow(record=record, student_name=student.name))

        # date DESC, then subject ASC
        out.sort(key=lambda row: row.record.subject_name)
        out.sort(key=lambda row: row.record.attendance_date, reverse=True)
        return out
