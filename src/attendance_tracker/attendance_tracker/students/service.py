from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional

from ..attendance.aggregation import filter_roster
from ..common.datetime_utils import today_local
from ..common.validators import require_email, require_non_empty
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

STUDENT_ID_LENGTH = 9


class RosterService:
    """Use case: enroll and look up students."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def _new_id(self) -> str:
        while True:
            candidate = uuid.uuid4().hex[:STUDENT_ID_LENGTH]
            if self._students.get_by_id(candidate) is None:
                return candidate

    def enroll(
        self,
        *,
        name: str,
        email: str,
        grade: str,
        student_id: Optional[str] = None,
        admission_date: Optional[date] = None,
    ) -> Student:
        name = require_non_empty(name, "Name")
        grade = require_non_empty(grade, "Grade")
        email = require_email(email)

        if student_id is not None:
            student_id = require_non_empty(str(student_id), "Student ID")
            if self._students.get_by_id(student_id):
                raise ValidationError(f"Student id already exists: {student_id}")
        else:
            student_id = self._new_id()

        student = Student(
            student_id=student_id,
            name=name,
            email=email,
            grade=grade,
            admission_date=admission_date or today_local(),
        )
        self._students.add(student)
        logger.info("Enrolled student %s (%s, %s)", student.student_id, student.name, student.grade)
        return student

    def list_students(self):
        return list(self._students.list_all())

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError(f"Student does not exist: {student_id}")
        return student

    def search(self, query: Optional[str]):
        return filter_roster(self._students.list_all(), query)
