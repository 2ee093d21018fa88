from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_GEMINI_MODEL, DEFAULT_HISTORY_DAYS, DEFAULT_TREND_DAYS
from .demo.seed import DemoDataGenerator
from .insights.generator import GeminiInsightGenerator, InsightGenerator
from .insights.service import InsightService
from .reports.exporter import ReportExporter
from .reports.service import ReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    attendance_repo: InMemoryAttendanceRepository

    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: ReportService
    report_exporter: ReportExporter
    insight_service: InsightService

    trend_window_days: int = DEFAULT_TREND_DAYS


def build_container(
    *,
    settings,
    insight_generator: Optional[InsightGenerator] = None,
    today: Optional[date] = None,
) -> Container:
    """Wire stores and services from a settings module (or any object with the same attributes)."""

    students_repo = InMemoryStudentRepository()
    attendance_repo = InMemoryAttendanceRepository()

    if getattr(settings, "SEED_DEMO_DATA", False):
        demo = DemoDataGenerator(getattr(settings, "DEMO_SEED", None))
        roster = demo.roster()
        students_repo = InMemoryStudentRepository(roster)
        attendance_repo = InMemoryAttendanceRepository(
            demo.history(
                roster,
                days=int(getattr(settings, "DEMO_HISTORY_DAYS", DEFAULT_HISTORY_DAYS)),
                end=today or today_local(),
            )
        )

    generator = insight_generator or GeminiInsightGenerator(
        api_key=getattr(settings, "GEMINI_API_KEY", ""),
        model=getattr(settings, "GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        timeout_seconds=float(getattr(settings, "INSIGHT_TIMEOUT_SECONDS", 30.0)),
    )

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        roster_service=RosterService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        report_service=ReportService(attendance_repo, students_repo),
        report_exporter=ReportExporter(),
        insight_service=InsightService(generator, max_workers=int(getattr(settings, "INSIGHT_WORKERS", 2))),
        trend_window_days=int(getattr(settings, "TREND_WINDOW_DAYS", DEFAULT_TREND_DAYS)),
    )
