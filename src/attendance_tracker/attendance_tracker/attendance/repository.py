from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    @property
    def version(self) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def replace_all(self, records: Sequence[AttendanceRecord]) -> int:
        """Swap in a new log snapshot.

        Returns the new version.
        """

        raise NotImplementedError

    def revert(self) -> bool:
        """Restore the previous snapshot, if any.

        Returns False when there is nothing to undo.
        """

        raise NotImplementedError
