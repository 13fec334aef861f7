from __future__ import annotations

import pytest

from academic_portal.core.exceptions import AuthorizationError, DuplicateKeyConflict, ValidationError
from academic_portal.core.scoping import Actor
from academic_portal.subjects.memory_subject_repository import MemorySubjectRepository
from academic_portal.subjects.service import SubjectService


@pytest.fixture
def subject_service(store):
    return SubjectService(MemorySubjectRepository(store))


def _add(svc, name, year="2024-2027", department="COMPUTER SCIENCE"):
    return svc.add_subject(actor=Actor.admin(), department=department, join_year=year, subject_name=name)


def test_subjects_listed_per_cohort_by_name(subject_service):
    _add(subject_service, "Physics")
    _add(subject_service, "Maths")
    _add(subject_service, "English", year="2023-2026")

    subjects = subject_service.list_for_cohort(department="COMPUTER SCIENCE", join_year="2024-2027")

    assert [s.subject_name for s in subjects] == ["Maths", "Physics"]
    assert subjects[0].to_json()["department"] == "COMPUTER SCIENCE"


def test_duplicate_subject_in_cohort(subject_service):
    _add(subject_service, "Maths")

    with pytest.raises(DuplicateKeyConflict):
        _add(subject_service, "Maths")
    _add(subject_service, "Maths", department="MATHS")


def test_validation_and_admin_only(subject_service):
    with pytest.raises(ValidationError):
        _add(subject_service, "")
    with pytest.raises(ValidationError):
        _add(subject_service, "Maths", department="ART")
    with pytest.raises(AuthorizationError):
        subject_service.add_subject(
            actor=Actor.faculty("F1"), department="MATHS", join_year="2024-2027", subject_name="Algebra"
        )


def test_delete_subject(subject_service):
    subject_id = _add(subject_service, "Maths")

    assert subject_service.delete_subject(actor=Actor.admin(), subject_id=subject_id) is True
    assert subject_service.delete_subject(actor=Actor.admin(), subject_id=subject_id) is False
