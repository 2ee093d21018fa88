from __future__ import annotations

import json
from dataclasses import asdict
from typing import Sequence

from ..attendance.model import StudentSummary


def insights_prompt(summaries: Sequence[StudentSummary]) -> str:
    payload = json.dumps([asdict(s) for s in summaries], ensure_ascii=False)
    return (
        "Analyze this attendance data for the current month:\n"
        f"{payload}\n\n"
        "Identify:\n"
        "1. The most irregular student (highest absences).\n"
        "2. Any attendance trends.\n"
        "3. A brief recommendation for the admin.\n\n"
        "Format the response as clear, professional advice."
    )


def notification_prompt(student_name: str, absences: int) -> str:
    return (
        f"Write a professional and supportive email to a student named {student_name} "
        f"who has missed {absences} days of school this month.\n"
        "The tone should be encouraging but firm about the importance of attendance.\n"
        "Include a placeholder for the school name and principal's signature.\n"
        "Return only the subject line and the body of the email."
    )


def notification_fallback(student_name: str, absences: int) -> str:
    return (
        f"Subject: Attendance Concern - {student_name}\n\n"
        f"Dear {student_name},\n\n"
        f"We noticed you have missed {absences} days this month. "
        "Please contact the office to discuss this."
    )
