from __future__ import annotations

from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.students import service as service_module
from src.attendance_tracker.attendance_tracker.students.memory_student_repository import InMemoryStudentRepository
from src.attendance_tracker.attendance_tracker.students.service import RosterService


@pytest.fixture
def roster():
    return RosterService(InMemoryStudentRepository())


def test_enroll_assigns_fresh_unique_ids(roster, monkeypatch):
    monkeypatch.setattr(service_module, "today_local", lambda: date(2024, 2, 1))

    a = roster.enroll(name="  John Doe ", email="john@example.com", grade="Grade 10")
    b = roster.enroll(name="Jane Smith", email="jane@example.com", grade="Grade 10")

    assert a.student_id != b.student_id
    assert len(a.student_id) == service_module.STUDENT_ID_LENGTH
    assert a.name == "John Doe"
    assert a.admission_date == date(2024, 2, 1)
    assert [s.student_id for s in roster.list_students()] == [a.student_id, b.student_id]


def test_enroll_keeps_caller_supplied_id(roster):
    s = roster.enroll(name="John", email="john@example.com", grade="10", student_id="1", admission_date=date(2023, 9, 1))

    assert roster.get_student("1") == s


def test_enroll_rejects_duplicate_id(roster):
    roster.enroll(name="John", email="john@example.com", grade="10", student_id="1")

    with pytest.raises(ValidationError):
        roster.enroll(name="Jane", email="jane@example.com", grade="10", student_id="1")


@pytest.mark.parametrize(
    "name,email,grade",
    [("", "a@b.co", "10"), ("A", "not-an-email", "10"), ("A", "a@b.co", "   ")],
)
def test_enroll_validates_fields(roster, name, email, grade):
    with pytest.raises(ValidationError):
        roster.enroll(name=name, email=email, grade=grade)


def test_get_student_unknown_raises(roster):
    with pytest.raises(ValidationError):
        roster.get_student("nope")


def test_search_delegates_to_filter(roster):
    roster.enroll(name="John Doe", email="john@example.com", grade="Grade 10")
    roster.enroll(name="Sarah Wilson", email="sarah@example.com", grade="Grade 12")

    assert [s.name for s in roster.search("grade 12")] == ["Sarah Wilson"]
    assert len(roster.search("")) == 2


def test_snapshot_handed_out_does_not_change():
    repo = InMemoryStudentRepository()
    roster = RosterService(repo)
    before = repo.list_all()

    roster.enroll(name="John", email="john@example.com", grade="10")

    assert before == ()
    assert repo.version == 1
