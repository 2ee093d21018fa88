from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from .model import AttendanceRecord

DEFAULT_UNDO_DEPTH = 50


class InMemoryAttendanceRepository:
    """Attendance log as versioned tuple snapshots with a bounded undo stack."""

    def __init__(self, records: Iterable[AttendanceRecord] = (), *, undo_depth: int = DEFAULT_UNDO_DEPTH):
        self._records: tuple[AttendanceRecord, ...] = tuple(records)
        self._history: deque[tuple[AttendanceRecord, ...]] = deque(maxlen=undo_depth)
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def list_all(self) -> tuple[AttendanceRecord, ...]:
        return self._records

    def replace_all(self, records: Sequence[AttendanceRecord]) -> int:
        self._history.append(self._records)
        self._records = tuple(records)
        self._version += 1
        return self._version

    def revert(self) -> bool:
        if not self._history:
            return False
        self._records = self._history.pop()
        self._version += 1
        return True
