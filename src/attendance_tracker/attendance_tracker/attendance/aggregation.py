"""Derived attendance views.

Every function here is pure: it reads the roster and the attendance log and
returns newly built values. Nothing is mutated and nothing raises on empty
input; records pointing at unknown students simply never match.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..core.constants import EXPORT_COLUMNS
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import (
    AttendanceRecord,
    DailyStats,
    DaySheetEntry,
    IrregularStudent,
    StatusDistribution,
    StudentSummary,
    TrendPoint,
)


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half away from zero; 0 when whole is 0."""
    if whole <= 0:
        return 0
    # exact integer form of floor(part / whole * 100 + 0.5) for part >= 0
    return (200 * part + whole) // (2 * whole)


def daily_stats(students: Sequence[Student], records: Iterable[AttendanceRecord], day: date) -> DailyStats:
    enrolled = {s.student_id for s in students}
    counts = Counter(r.status for r in records if r.date == day and r.student_id in enrolled)
    total = len(students)
    present = counts[AttendanceStatus.PRESENT]
    return DailyStats(
        total=total,
        present=present,
        absent=counts[AttendanceStatus.ABSENT],
        rate=percent(present, total),
    )


def absence_count(records: Iterable[AttendanceRecord], student_id: str) -> int:
    return sum(1 for r in records if r.student_id == student_id and r.status == AttendanceStatus.ABSENT)


def most_irregular(students: Sequence[Student], records: Iterable[AttendanceRecord]) -> Optional[IrregularStudent]:
    absences = Counter(r.student_id for r in records if r.status == AttendanceStatus.ABSENT)

    best: Optional[IrregularStudent] = None
    for s in students:
        n = absences.get(s.student_id, 0)
        # strict comparison keeps the first roster entry on ties
        if best is None or n > best.absences:
            best = IrregularStudent(student=s, absences=n)
    return best


def weekly_series(records: Iterable[AttendanceRecord], window_days: int, reference_date: date) -> list[TrendPoint]:
    """Present count per day for the window ending at reference_date, oldest first."""
    if window_days <= 0:
        return []

    start = reference_date - timedelta(days=window_days - 1)
    present = Counter(
        r.date for r in records if r.status == AttendanceStatus.PRESENT and start <= r.date <= reference_date
    )
    return [
        TrendPoint(date=d, present_count=present.get(d, 0))
        for d in (start + timedelta(days=i) for i in range(window_days))
    ]


def upsert_attendance(
    records: Iterable[AttendanceRecord],
    student_id: str,
    day: date,
    status: AttendanceStatus,
) -> tuple[AttendanceRecord, ...]:
    kept = [r for r in records if not (r.student_id == student_id and r.date == day)]
    kept.append(AttendanceRecord(student_id=student_id, date=day, status=status))
    return tuple(kept)


def filter_roster(students: Sequence[Student], query: Optional[str]) -> list[Student]:
    q = (query or "").strip().lower()
    if not q:
        return list(students)
    return [s for s in students if q in s.name.lower() or q in s.grade.lower()]


def status_distribution(records: Iterable[AttendanceRecord]) -> StatusDistribution:
    counts = Counter(r.status for r in records)
    return StatusDistribution(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
    )


def student_summaries(students: Sequence[Student], records: Iterable[AttendanceRecord]) -> list[StudentSummary]:
    absences = Counter(r.student_id for r in records if r.status == AttendanceStatus.ABSENT)
    return [StudentSummary(name=s.name, grade=s.grade, absences=absences.get(s.student_id, 0)) for s in students]


def day_sheet(students: Sequence[Student], records: Iterable[AttendanceRecord], day: date) -> list[DaySheetEntry]:
    by_student = {r.student_id: r.status for r in records if r.date == day}
    return [DaySheetEntry(student=s, status=by_student.get(s.student_id)) for s in students]


def shape_export_rows(
    students: Sequence[Student],
    records: Iterable[AttendanceRecord],
    selected_columns: Iterable[str],
) -> list[dict]:
    """Flat report rows keyed by column label.

    Columns follow the canonical EXPORT_COLUMNS order regardless of the
    order of selected_columns. The rate is present days over all records of
    that student.
    """
    selected = set(selected_columns)
    columns = [(cid, label) for cid, label in EXPORT_COLUMNS if cid in selected]

    per_student: dict[str, Counter] = {}
    for r in records:
        per_student.setdefault(r.student_id, Counter())[r.status] += 1

    rows: list[dict] = []
    for s in students:
        counts = per_student.get(s.student_id, Counter())
        present = counts[AttendanceStatus.PRESENT]
        values = {
            "id": s.student_id,
            "name": s.name,
            "email": s.email,
            "grade": s.grade,
            "admissionDate": s.admission_date.strftime("%Y-%m-%d"),
            "presentCount": present,
            "absentCount": counts[AttendanceStatus.ABSENT],
            "lateCount": counts[AttendanceStatus.LATE],
            "rate": f"{percent(present, sum(counts.values()))}%",
        }
        rows.append({label: values[cid] for cid, label in columns})
    return rows
