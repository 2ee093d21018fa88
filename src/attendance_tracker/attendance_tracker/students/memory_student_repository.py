from __future__ import annotations

import threading
from typing import Iterable, Optional

from ..core.exceptions import ValidationError
from .model import Student


class InMemoryStudentRepository:
    """Roster held as an immutable tuple snapshot.

    Every add builds a new tuple and bumps the version, so a snapshot handed
    out earlier never changes under its holder.
    """

    def __init__(self, students: Iterable[Student] = ()):
        self._lock = threading.Lock()
        self._students: tuple[Student, ...] = ()
        self._version = 0
        for s in students:
            self.add(s)

    @property
    def version(self) -> int:
        return self._version

    def list_all(self) -> tuple[Student, ...]:
        return self._students

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for s in self._students:
            if s.student_id == student_id:
                return s
        return None

    def add(self, student: Student) -> None:
        with self._lock:
            if any(s.student_id == student.student_id for s in self._students):
                raise ValidationError(f"Student id already exists: {student.student_id}")
            self._students = self._students + (student,)
            self._version += 1
