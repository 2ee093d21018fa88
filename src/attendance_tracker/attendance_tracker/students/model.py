from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Student:
    """Domain entity: an enrolled student.

    Note: Plain data object, never mutated in place.
    """

    student_id: str
    name: str
    email: str
    grade: str
    admission_date: date

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "email": self.email,
            "grade": self.grade,
            "admissionDate": self.admission_date.strftime("%Y-%m-%d"),
        }
