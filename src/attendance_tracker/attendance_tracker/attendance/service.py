from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import parse_status
from ..core.constants import DEFAULT_TREND_DAYS
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from . import aggregation
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _as_date(value) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


class AttendanceService:
    """Use case: mark attendance and read the derived views.

    Inputs are validated here (status, date, student) so the aggregation
    functions only ever see well-formed values.
    """

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students
        self._write_lock = threading.Lock()

    def mark(self, student_id: str, day, status) -> AttendanceRecord:
        day = _as_date(day)
        status = parse_status(status)
        if not self._students.get_by_id(student_id):
            raise ValidationError(f"Student does not exist: {student_id}")

        with self._write_lock:
            records = aggregation.upsert_attendance(self._attendance.list_all(), student_id, day, status)
            version = self._attendance.replace_all(records)

        logger.info("Marked %s as %s on %s (log v%d)", student_id, status.value, day.isoformat(), version)
        return records[-1]

    def undo_last_mark(self) -> bool:
        with self._write_lock:
            undone = self._attendance.revert()
        if undone:
            logger.info("Reverted attendance log to v%d", self._attendance.version)
        return undone

    def records_for(self, day=None):
        records = self._attendance.list_all()
        if day is None:
            return list(records)
        day = _as_date(day)
        return [r for r in records if r.date == day]

    def daily_stats(self, day=None):
        day = _as_date(day) if day is not None else today_local()
        return aggregation.daily_stats(self._students.list_all(), self._attendance.list_all(), day)

    def weekly_trend(self, reference_date=None, *, window_days: int = DEFAULT_TREND_DAYS):
        reference_date = _as_date(reference_date) if reference_date is not None else today_local()
        return aggregation.weekly_series(self._attendance.list_all(), int(window_days), reference_date)

    def absence_count(self, student_id: str) -> int:
        return aggregation.absence_count(self._attendance.list_all(), student_id)

    def most_irregular(self):
        return aggregation.most_irregular(self._students.list_all(), self._attendance.list_all())

    def status_distribution(self):
        return aggregation.status_distribution(self._attendance.list_all())

    def student_summaries(self):
        return aggregation.student_summaries(self._students.list_all(), self._attendance.list_all())

    def day_sheet(self, day=None, *, query: Optional[str] = None):
        day = _as_date(day) if day is not None else today_local()
        students = aggregation.filter_roster(self._students.list_all(), query)
        return aggregation.day_sheet(students, self._attendance.list_all(), day)
