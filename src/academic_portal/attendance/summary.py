"""Attendance percentage aggregation.

Everything here is a pure function of the record set, so the result does not
depend on the order records are fetched in.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

_TWO_PLACES = Decimal("0.01")


def percentage(present: int, total: int) -> float:
    """present/total as a percentage rounded half-up to 2 places; 0 when total is 0.

    Serialized as a JSON number, so 75.00 reads as ``75.0``.
    """

    if total <= 0:
        return 0.0
    value = (Decimal(present) * 100 / Decimal(total)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return float(value)


@dataclass
class SubjectAttendance:
    total: int = 0
    present: int = 0
    percentage: float = 0.0
    records: list[AttendanceRecord] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "percentage": self.percentage,
            "records": [r.to_json() for r in self.records],
        }


@dataclass(frozen=True)
class AttendanceSummary:
    attendance: list[AttendanceRecord]
    subject_wise: dict[str, SubjectAttendance]
    total_classes: int
    present_classes: int
    percentage: float

    @classmethod
    def empty(cls) -> "AttendanceSummary":
        return cls(attendance=[], subject_wise={}, total_classes=0, present_classes=0, percentage=0.0)

    def to_json(self) -> dict:
        return {
            "attendance": [r.to_json() for r in self.attendance],
            "subjectWise": {name: s.to_json() for name, s in self.subject_wise.items()},
            "totalClasses": self.total_classes,
            "presentClasses": self.present_classes,
            "percentage": self.percentage,
        }


def summarize_attendance(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    ordered = sorted(records, key=lambda r: (r.subject_name, r.attendance_date, r.attendance_id))

    subject_wise: dict[str, SubjectAttendance] = {}
    present_classes = 0
    for record in ordered:
        group = subject_wise.setdefault(record.subject_name, SubjectAttendance())
        group.total += 1
        group.records.append(record)
        if record.status is AttendanceStatus.PRESENT:
            group.present += 1
            present_classes += 1

    for group in subject_wise.values():
        group.percentage = percentage(group.present, group.total)

    return AttendanceSummary(
        attendance=ordered,
        subject_wise=subject_wise,
        total_classes=len(ordered),
        present_classes=present_classes,
        percentage=percentage(present_classes, len(ordered)),
    )
