"""Example: use the service layer without Flask.

Seeds the demo roster, marks one student, and prints today's numbers plus
the AI insight text (or its fallback when no API key is configured).
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.datetime_utils import today_local
from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    svc = container.attendance_service

    students = container.roster_service.list_students()
    if students:
        svc.mark(students[0].student_id, today_local(), "Absent")

    print(svc.daily_stats())
    print(svc.most_irregular())
    for point in svc.weekly_trend():
        print(point.date, point.present_count)

    print(container.insight_service.generate_insights(students, svc.records_for()))
    container.insight_service.shutdown()


if __name__ == "__main__":
    main()
