"""Demo bootstrap data.

Seedable so tests and screenshots can reproduce the same history.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_HISTORY_DAYS, DEFAULT_PRESENT_PROBABILITY
from ..core.enums import AttendanceStatus
from ..students.model import Student

DEFAULT_ROSTER = (
    Student("1", "John Doe", "john@example.com", "Grade 10", date(2023, 9, 1)),
    Student("2", "Jane Smith", "jane@example.com", "Grade 10", date(2023, 9, 1)),
    Student("3", "Mike Johnson", "mike@example.com", "Grade 11", date(2022, 9, 1)),
    Student("4", "Sarah Wilson", "sarah@example.com", "Grade 12", date(2021, 9, 1)),
)


class DemoDataGenerator:
    def __init__(self, seed: Optional[int] = None, *, present_probability: float = DEFAULT_PRESENT_PROBABILITY):
        self._rng = random.Random(seed)
        self._present_probability = present_probability

    def roster(self) -> list[Student]:
        return list(DEFAULT_ROSTER)

    def _pick_status(self) -> AttendanceStatus:
        if self._rng.random() < self._present_probability:
            return AttendanceStatus.PRESENT
        return AttendanceStatus.ABSENT if self._rng.random() < 0.5 else AttendanceStatus.LATE

    def history(
        self,
        students: Sequence[Student],
        *,
        days: int = DEFAULT_HISTORY_DAYS,
        end: date,
    ) -> list[AttendanceRecord]:
        """One record per student per day for `days` days ending at `end`."""
        records = []
        for i in range(days):
            day = end - timedelta(days=i)
            for s in students:
                records.append(AttendanceRecord(student_id=s.student_id, date=day, status=self._pick_status()))
        return records
