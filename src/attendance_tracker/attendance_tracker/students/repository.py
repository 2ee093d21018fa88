from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    @property
    def version(self) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError
