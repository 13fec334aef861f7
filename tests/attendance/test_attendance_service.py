from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from academic_portal.core.enums import AttendanceStatus, Role
from academic_portal.core.exceptions import AuthorizationError, ValidationError
from academic_portal.core.scoping import Actor


def _record(svc, *, student="S1", subject="Maths", day="2024-01-10", status="present", faculty="F1"):
    svc.record_attendance(
        student_id=student,
        subject_name=subject,
        attendance_date=day,
        status=status,
        faculty_id=faculty,
    )


def test_resubmission_overwrites_status_and_keeps_owner(attendance_service, store):
    _record(attendance_service, status="present", faculty="F1")
    first = next(iter(store.attendance.values()))

    _record(attendance_service, status="absent", faculty="F2")

    assert len(store.attendance) == 1
    rec = next(iter(store.attendance.values()))
    assert rec.status is AttendanceStatus.ABSENT
    assert rec.faculty_id == "F1"
    assert rec.recorded_at == first.recorded_at
    assert rec.attendance_id == first.attendance_id


def test_different_dates_are_separate_records(attendance_service, store):
    _record(attendance_service, day="2024-01-10")
    _record(attendance_service, day="2024-01-11")
    _record(attendance_service, subject="Physics", day="2024-01-10")

    assert len(store.attendance) == 3


def test_attendance_exists_is_a_pure_lookup(attendance_service, store):
    assert attendance_service.attendance_exists(student_id="S1", subject_name="Maths", attendance_date="2024-01-10") is False
    assert len(store.attendance) == 0

    _record(attendance_service)

    assert attendance_service.attendance_exists(student_id="S1", subject_name="Maths", attendance_date=date(2024, 1, 10))
    assert not attendance_service.attendance_exists(student_id="S1", subject_name="Maths", attendance_date="2024-01-11")


@pytest.mark.parametrize("status", ["late", "", None, "PRESENT"])
def test_invalid_status_is_rejected(attendance_service, store, status):
    with pytest.raises(ValidationError):
        _record(attendance_service, status=status)
    assert len(store.attendance) == 0


def test_invalid_date_is_rejected(attendance_service):
    with pytest.raises(ValidationError):
        _record(attendance_service, day="10/01/2024")


def test_faculty_cannot_delete_another_faculty_record(attendance_service, store):
    _record(attendance_service, faculty="F1")
    record_id = next(iter(store.attendance))

    deleted = attendance_service.delete_record(actor=Actor.faculty("F2"), attendance_id=record_id)

    assert deleted is False
    assert len(store.attendance) == 1


def test_faculty_can_delete_own_record(attendance_service, store):
    _record(attendance_service, faculty="F1")
    record_id = next(iter(store.attendance))

    assert attendance_service.delete_record(actor=Actor.faculty("F1"), attendance_id=record_id) is True
    assert store.attendance == {}


def test_owner_after_resubmission_is_still_the_first_faculty(attendance_service, store):
    _record(attendance_service, faculty="F1")
    _record(attendance_service, status="absent", faculty="F2")
    record_id = next(iter(store.attendance))

    assert attendance_service.delete_record(actor=Actor.faculty("F2"), attendance_id=record_id) is False
    assert attendance_service.delete_record(actor=Actor.faculty("F1"), attendance_id=record_id) is True


def test_admin_deletes_any_record_and_missing_id_is_noop(attendance_service, store):
    _record(attendance_service, faculty="F1")
    record_id = next(iter(store.attendance))

    assert attendance_service.delete_record(actor=Actor.admin(), attendance_id=999) is False
    assert attendance_service.delete_record(actor=Actor.admin(), attendance_id=record_id) is True


def test_student_cannot_delete(attendance_service):
    with pytest.raises(AuthorizationError):
        attendance_service.delete_record(actor=Actor(role=Role.STUDENT, user_id="S1"), attendance_id=1)


def test_clear_all_requires_admin(attendance_service, store):
    _record(attendance_service)
    _record(attendance_service, day="2024-01-11")

    with pytest.raises(AuthorizationError):
        attendance_service.clear_all(actor=Actor.faculty("F1"))

    assert attendance_service.clear_all(actor=Actor.admin()) == 2
    assert store.attendance == {}


def test_faculty_listing_is_scoped(attendance_service, add_user):
    add_user("S1", name="Asha")
    add_user("S2", name="Bala")
    _record(attendance_service, student="S1", faculty="F1")
    _record(attendance_service, student="S2", faculty="F2")

    rows = attendance_service.list_records(actor=Actor.faculty("F1"))

    assert [(r.record.student_id, r.student_name) for r in rows] == [("S1", "Asha")]
    assert len(attendance_service.list_records(actor=Actor.admin())) == 2


def test_concurrent_duplicate_submissions_leave_one_record(attendance_service, store):
    statuses = ["present", "absent"] * 20

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda s: _record(attendance_service, status=s), statuses))

    assert len(store.attendance) == 1
