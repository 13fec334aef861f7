from __future__ import annotations

import pytest

from academic_portal.core.enums import ExamType
from academic_portal.core.exceptions import AuthorizationError, ValidationError
from academic_portal.core.scoping import Actor


def _record(svc, *, student="S1", subject="Maths", exam="internal1", marks=40, faculty="F1"):
    svc.record_marks(
        student_id=student,
        subject_name=subject,
        exam_type=exam,
        marks=marks,
        faculty_id=faculty,
    )


def test_resubmitted_marks_replace_the_value(marks_service, store):
    _record(marks_service, marks=40, faculty="F1")
    _record(marks_service, marks=55, faculty="F2")

    records = marks_service.student_marks("S1")

    assert len(records) == 1
    assert records[0].marks == 55
    assert records[0].faculty_id == "F1"
    assert len(store.marks) == 1


def test_each_exam_type_is_its_own_record(marks_service):
    for exam in ("semester", "internal2", "internal1"):
        _record(marks_service, exam=exam)
    _record(marks_service, subject="Chemistry", exam="internal2", marks=70)

    records = marks_service.student_marks("S1")

    assert [(r.subject_name, r.exam_type) for r in records] == [
        ("Chemistry", ExamType.INTERNAL2),
        ("Maths", ExamType.INTERNAL1),
        ("Maths", ExamType.INTERNAL2),
        ("Maths", ExamType.SEMESTER),
    ]


@pytest.mark.parametrize("exam", ["final", "", None])
def test_unknown_exam_type_is_rejected(marks_service, exam):
    with pytest.raises(ValidationError):
        _record(marks_service, exam=exam)


@pytest.mark.parametrize("marks", [-1, 101, "abc", None, True, 45.5])
def test_marks_must_be_an_integer_in_range(marks_service, store, marks):
    with pytest.raises(ValidationError):
        _record(marks_service, marks=marks)
    assert store.marks == {}


@pytest.mark.parametrize("marks", [0, 100, "75", 60.0])
def test_marks_bounds_and_numeric_strings_accepted(marks_service, marks):
    _record(marks_service, marks=marks)

    assert marks_service.student_marks("S1")[0].marks == int(float(marks))


def test_subjects_for_faculty_are_distinct_and_sorted(marks_service):
    _record(marks_service, subject="Physics", faculty="F1")
    _record(marks_service, subject="Maths", faculty="F1")
    _record(marks_service, subject="Maths", exam="semester", faculty="F1")
    _record(marks_service, subject="English", faculty="F2")

    assert list(marks_service.subjects_for_faculty("F1")) == ["Maths", "Physics"]
    assert list(marks_service.subjects_for_faculty(None)) == []


def test_scoped_delete_and_clear(marks_service, store):
    _record(marks_service, faculty="F1")
    marks_id = next(iter(store.marks))

    assert marks_service.delete_record(actor=Actor.faculty("F2"), marks_id=marks_id) is False
    assert len(store.marks) == 1
    assert marks_service.delete_record(actor=Actor.faculty("F1"), marks_id=marks_id) is True

    _record(marks_service)
    with pytest.raises(AuthorizationError):
        marks_service.clear_all(actor=Actor.faculty("F1"))
    assert marks_service.clear_all(actor=Actor.admin()) == 1


def test_student_json_hides_ownership(marks_service):
    _record(marks_service, marks=88)

    data = marks_service.student_marks("S1")[0].to_student_json()

    assert data["marks"] == 88
    assert data["examType"] == "internal1"
    assert "facultyId" not in data
