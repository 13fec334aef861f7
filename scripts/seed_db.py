"""Load demo faculty, students, subjects and a timetable into MySQL."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from academic_portal.config import get_settings_module
from academic_portal.container import build_container
from academic_portal.core.enums import StorageMode
from academic_portal.core.exceptions import DuplicateKeyConflict
from academic_portal.core.scoping import Actor

DEPARTMENT = "COMPUTER SCIENCE"
START_YEAR = 2024
JOIN_YEAR = f"{START_YEAR}-{START_YEAR + 3}"

FACULTY = [
    {"id": "FAC001", "password": "faculty123", "name": "Dr. Meena", "email": "meena@sbk.edu"},
    {"id": "FAC002", "password": "faculty123", "name": "Prof. Ravi", "email": "ravi@sbk.edu"},
]

STUDENTS = [
    {
        "id": f"CS{n:03d}",
        "password": "student123",
        "name": f"Student {n}",
        "email": f"cs{n:03d}@sbk.edu",
        "className": "I CS",
        "rollNo": str(n),
        "department": DEPARTMENT,
        "startYear": START_YEAR,
    }
    for n in range(1, 6)
]

# (day, slot, subject, faculty)
TIMETABLE = [
    ("Monday", "9-10", "Maths", "FAC001"),
    ("Monday", "10-11", "Physics", "FAC002"),
    ("Tuesday", "9-10", "Physics", "FAC002"),
    ("Tuesday", "11-12", "Maths", "FAC001"),
    ("Wednesday", "2-3", "Programming", "FAC001"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        use_database=True,
        auto_init_db=True,
        admin_password=settings.DEFAULT_ADMIN_PASSWORD,
    )
    if container.mode is not StorageMode.MYSQL:
        raise SystemExit("MySQL is not reachable; nothing seeded")

    admin = Actor.admin()
    for data in FACULTY:
        try:
            container.user_service.create_user(actor=admin, role="faculty", data=data)
        except DuplicateKeyConflict:
            pass

    result = container.user_service.bulk_create_students(actor=admin, entries=STUDENTS)

    for subject in sorted({row[2] for row in TIMETABLE}):
        try:
            container.subject_service.add_subject(actor=admin, department=DEPARTMENT, join_year=JOIN_YEAR, subject_name=subject)
        except DuplicateKeyConflict:
            pass

    for day, slot, subject, faculty_id in TIMETABLE:
        container.timetable_service.assign_slot(
            department=DEPARTMENT,
            join_year=JOIN_YEAR,
            day_of_week=day,
            time_slot=slot,
            subject_name=subject,
            faculty_id=faculty_id,
        )

    print(f"OK: Seeded {container.conn.config.describe()} (students created={result.created}, skipped={result.failed})")


if __name__ == "__main__":
    main()
