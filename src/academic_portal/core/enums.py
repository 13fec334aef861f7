from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class ExamType(str, Enum):
    """Exam kinds a mark can be recorded for; declaration order is report order."""

    INTERNAL1 = "internal1"
    INTERNAL2 = "internal2"
    SEMESTER = "semester"


class Department(str, Enum):
    TAMIL = "TAMIL"
    ENGLISH = "ENGLISH"
    MATHS = "MATHS"
    COMPUTER_SCIENCE = "COMPUTER SCIENCE"
    INFORMATION_TECHNOLOGY = "INFORMATION TECHNOLOGY"
    BCA = "BCA"
    CHEMISTRY = "CHEMISTRY"
    PHYSICAL_EDUCATION = "PHYSICAL EDUCATION"
    HISTORY = "HISTORY"
    BCOM = "BCOM"
    BECOM_CA = "BECOM CA"


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class TimeSlot(str, Enum):
    """Teaching hours of a day, in timetable order."""

    H9_10 = "9-10"
    H10_11 = "10-11"
    H11_12 = "11-12"
    H12_1 = "12-1"
    H2_3 = "2-3"
    H3_4 = "3-4"
    H4_5 = "4-5"


class StorageMode(str, Enum):
    """Backend selected once at startup."""

    MYSQL = "mysql"
    MEMORY = "memory"
