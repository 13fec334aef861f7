from __future__ import annotations

import pytest

from academic_portal.core.enums import DayOfWeek, Department, Role, TimeSlot
from academic_portal.core.exceptions import AuthorizationError, ValidationError
from academic_portal.core.scoping import Actor
from academic_portal.timetable.memory_timetable_repository import MemoryTimetableRepository
from academic_portal.timetable.service import TimetableService


@pytest.fixture
def timetable_service(store, users_repo):
    return TimetableService(MemoryTimetableRepository(store), users_repo)


def _assign(svc, day, slot, subject, faculty="F1", year="2024-2027"):
    svc.assign_slot(
        department="COMPUTER SCIENCE",
        join_year=year,
        day_of_week=day,
        time_slot=slot,
        subject_name=subject,
        faculty_id=faculty,
    )


def test_student_week_is_ordered_by_day_then_hour(timetable_service, cs_student, add_user):
    add_user("F1", Role.FACULTY, name="Ravi")
    _assign(timetable_service, "Tuesday", "9-10", "Physics")
    _assign(timetable_service, "Monday", "2-3", "English", faculty=None)
    _assign(timetable_service, "Monday", "10-11", "Maths")
    _assign(timetable_service, "Monday", "9-10", "Maths", year="2023-2026")

    week = timetable_service.student_timetable("S1")

    assert [(v.day_of_week, v.time_slot, v.subject_name) for v in week] == [
        (DayOfWeek.MONDAY, TimeSlot.H10_11, "Maths"),
        (DayOfWeek.MONDAY, TimeSlot.H2_3, "English"),
        (DayOfWeek.TUESDAY, TimeSlot.H9_10, "Physics"),
    ]
    assert week[0].faculty_name == "Ravi"
    assert week[1].to_json()["facultyName"] is None


def test_assigning_the_same_hour_replaces_it(timetable_service, cs_student):
    _assign(timetable_service, "Monday", "9-10", "Maths")
    _assign(timetable_service, "Monday", "9-10", "Physics")

    week = timetable_service.student_timetable("S1")

    assert [v.subject_name for v in week] == ["Physics"]


def test_non_student_or_unknown_gets_empty_week(timetable_service, add_user):
    add_user("F1", Role.FACULTY)
    _assign(timetable_service, "Monday", "9-10", "Maths")

    assert timetable_service.student_timetable("F1") == []
    assert timetable_service.student_timetable("ghost") == []


def test_assigned_subjects_are_distinct(timetable_service, add_user):
    add_user("F1", Role.FACULTY)
    _assign(timetable_service, "Monday", "9-10", "Maths")
    _assign(timetable_service, "Tuesday", "9-10", "Maths")
    _assign(timetable_service, "Tuesday", "10-11", "Physics", faculty="F2")

    subjects = timetable_service.assigned_subjects("F1")

    assert [s.to_json() for s in subjects] == [
        {"department": "COMPUTER SCIENCE", "joinYear": "2024-2027", "subjectName": "Maths"}
    ]


def test_assigned_subjects_fall_back_to_first_faculty(timetable_service, add_user):
    assert timetable_service.assigned_subjects(None) == []

    add_user("F1", Role.FACULTY)
    add_user("F2", Role.FACULTY)
    _assign(timetable_service, "Monday", "9-10", "Maths", faculty="F1")

    assert [s.subject_name for s in timetable_service.assigned_subjects("")] == ["Maths"]


def test_invalid_slot_is_rejected(timetable_service):
    with pytest.raises(ValidationError):
        _assign(timetable_service, "Sunday", "9-10", "Maths")
    with pytest.raises(ValidationError):
        _assign(timetable_service, "Monday", "1-2", "Maths")


def test_clear_all_is_admin_only(timetable_service):
    _assign(timetable_service, "Monday", "9-10", "Maths")

    with pytest.raises(AuthorizationError):
        timetable_service.clear_all(actor=Actor.faculty("F1"))
    assert timetable_service.clear_all(actor=Actor.admin()) == 1


def test_deleting_faculty_unassigns_their_hours(timetable_service, store, users_repo, add_user):
    add_user("F1", Role.FACULTY)
    _assign(timetable_service, "Monday", "9-10", "Maths")

    users_repo.delete_non_admin("F1")

    assert [e.faculty_id for e in store.timetable.values()] == [None]
    assert [e.department for e in store.timetable.values()] == [Department.COMPUTER_SCIENCE]
