from __future__ import annotations

import threading
from datetime import date
from typing import Optional

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.students.model import Student


class FakeGenerator:
    """Deterministic stand-in for the hosted text model."""

    def __init__(self, text: str = "Generated text", *, error: Optional[Exception] = None, gate: Optional[threading.Event] = None):
        self.text = text
        self.error = error
        self.gate = gate
        self.calls: list[dict] = []

    def generate(self, prompt: str, *, temperature: float, top_p: Optional[float] = None) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature, "top_p": top_p})
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return self.text


def make_student(student_id: str, name: str, *, grade: str = "Grade 10", email: Optional[str] = None) -> Student:
    return Student(
        student_id=student_id,
        name=name,
        email=email or f"{name.split()[0].lower()}@example.com",
        grade=grade,
        admission_date=date(2023, 9, 1),
    )


def rec(student_id: str, day: str, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(student_id=student_id, date=date.fromisoformat(day), status=status)
