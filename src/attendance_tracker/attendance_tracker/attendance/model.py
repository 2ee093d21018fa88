from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status on one day.

    At most one record exists per (student_id, date) in a log.
    """

    student_id: str
    date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class DailyStats:
    total: int
    present: int
    absent: int
    rate: int


@dataclass(frozen=True)
class TrendPoint:
    date: date
    present_count: int


@dataclass(frozen=True)
class IrregularStudent:
    student: Student
    absences: int


@dataclass(frozen=True)
class StatusDistribution:
    present: int
    absent: int
    late: int


@dataclass(frozen=True)
class StudentSummary:
    """Compact per-student view handed to the text generator."""

    name: str
    grade: str
    absences: int


@dataclass(frozen=True)
class DaySheetEntry:
    student: Student
    status: Optional[AttendanceStatus]
