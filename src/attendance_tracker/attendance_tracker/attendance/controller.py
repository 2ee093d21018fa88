from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..common.validators import require_json_object
from ..container import Container


def _requested_day():
    value = request.args.get("date")
    return parse_iso_date(value) if value else today_local()


def _trend_dict(points) -> list[dict]:
    return [{"date": format_iso_date(p.date), "attendance": p.present_count} for p in points]


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = require_json_object(request.get_json(silent=True))
        record = svc.mark(
            str(data.get("student_id", "")),
            data.get("date") or today_local(),
            data.get("status"),
        )
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/undo", methods=["POST"], endpoint="undo_attendance")
    def undo_attendance():
        undone = svc.undo_last_mark()
        return jsonify({"success": undone})

    @app.route("/api/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        day = _requested_day()
        entries = svc.day_sheet(day, query=request.args.get("q"))
        stats = svc.daily_stats(day)
        return jsonify(
            {
                "date": format_iso_date(day),
                "present": stats.present,
                "absent": stats.absent,
                "entries": [
                    {**e.student.to_dict(), "status": e.status.value if e.status else None} for e in entries
                ],
            }
        )

    @app.route("/api/students/<student_id>/absences", methods=["GET"], endpoint="student_absences")
    def student_absences(student_id: str):
        container.roster_service.get_student(student_id)
        return jsonify({"student_id": student_id, "absences": svc.absence_count(student_id)})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        day = _requested_day()
        irregular = svc.most_irregular()

        return jsonify(
            {
                "stats": asdict(svc.daily_stats(day)),
                "trend": _trend_dict(svc.weekly_trend(day, window_days=container.trend_window_days)),
                "distribution": asdict(svc.status_distribution()),
                "most_irregular": (
                    {**irregular.student.to_dict(), "absences": irregular.absences} if irregular else None
                ),
            }
        )
