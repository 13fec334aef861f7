from __future__ import annotations

from datetime import date

from academic_portal.core.enums import Role
from academic_portal.core.scoping import Actor


def _attend(svc, student="S1", status="present"):
    svc.record_attendance(
        student_id=student, subject_name="Maths", attendance_date=date(2024, 1, 10), status=status, faculty_id="F1"
    )


def test_deleted_key_can_be_recorded_again(attendance_service, store):
    _attend(attendance_service)
    first_id = next(iter(store.attendance))

    attendance_service.delete_record(actor=Actor.admin(), attendance_id=first_id)
    _attend(attendance_service, status="absent")

    assert list(store.attendance) == [first_id + 1]
    assert store.attendance_keys == {("S1", "Maths", date(2024, 1, 10)): first_id + 1}


def test_clear_all_resets_key_index(marks_service, store):
    marks_service.record_marks(student_id="S1", subject_name="Maths", exam_type="internal1", marks=40, faculty_id="F1")
    marks_service.clear_all(actor=Actor.admin())

    marks_service.record_marks(student_id="S1", subject_name="Maths", exam_type="internal1", marks=60, faculty_id="F2")

    assert [r.marks for r in store.marks.values()] == [60]
    assert [r.faculty_id for r in store.marks.values()] == ["F2"]
    assert len(store.marks_keys) == 1


def test_cascade_drops_keys_of_removed_records(attendance_service, users_repo, add_user, store):
    add_user("S1")
    add_user("S2")
    _attend(attendance_service, "S1")
    _attend(attendance_service, "S2")

    users_repo.delete_non_admin("S1")

    assert set(store.attendance_keys) == {("S2", "Maths", date(2024, 1, 10))}
    assert users_repo.get_by_id("S2").role is Role.STUDENT
