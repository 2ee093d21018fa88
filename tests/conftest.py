from __future__ import annotations

from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus

from tests.helpers import make_student, rec


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 7)


@pytest.fixture
def john_and_jane():
    students = [make_student("1", "John Doe"), make_student("2", "Jane Smith")]
    records = [
        rec("1", "2024-01-01", AttendanceStatus.ABSENT),
        rec("2", "2024-01-01", AttendanceStatus.PRESENT),
        rec("1", "2024-01-02", AttendanceStatus.PRESENT),
    ]
    return students, records
