from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.aggregation import shape_export_rows
from ..attendance.repository import AttendanceRepository
from ..core.constants import EXPORT_COLUMNS
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository

_LABELS = dict(EXPORT_COLUMNS)


@dataclass(frozen=True)
class ReportData:
    labels: list[str]
    rows: list[dict]


class ReportService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    @staticmethod
    def resolve_columns(selected: Optional[Iterable[str]]) -> list[str]:
        """Validate column ids and return them in canonical order."""
        if selected is None:
            return [cid for cid, _ in EXPORT_COLUMNS]

        chosen = {c.strip() for c in selected if c and c.strip()}
        unknown = sorted(chosen - _LABELS.keys())
        if unknown:
            raise ValidationError(f"Unknown export column(s): {', '.join(unknown)}")
        if not chosen:
            raise ValidationError("Select at least one export column")
        return [cid for cid, _ in EXPORT_COLUMNS if cid in chosen]

    def build_report(self, selected_columns: Optional[Iterable[str]] = None) -> ReportData:
        columns = self.resolve_columns(selected_columns)
        rows = shape_export_rows(self._students.list_all(), self._attendance.list_all(), columns)
        return ReportData(labels=[_LABELS[c] for c in columns], rows=rows)
