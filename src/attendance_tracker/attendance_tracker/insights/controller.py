from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    insights = container.insight_service

    @app.route("/api/insights", methods=["POST"], endpoint="request_insights")
    def request_insights():
        job = insights.request_insights(
            container.roster_service.list_students(),
            container.attendance_service.records_for(),
        )
        return jsonify(job.to_dict()), 202

    @app.route("/api/notifications/most-irregular", methods=["POST"], endpoint="notify_most_irregular")
    def notify_most_irregular():
        irregular = container.attendance_service.most_irregular()
        if irregular is None:
            raise NotFoundError("No students enrolled")

        job = insights.request_notification(irregular.student, irregular.absences)
        return jsonify({**job.to_dict(), "student_id": irregular.student.student_id, "absences": irregular.absences}), 202

    @app.route("/api/jobs/<job_id>", methods=["GET"], endpoint="get_job")
    def get_job(job_id: str):
        return jsonify(insights.get_job(job_id).to_dict())

    @app.route("/api/jobs/<job_id>", methods=["DELETE"], endpoint="cancel_job")
    def cancel_job(job_id: str):
        return jsonify(insights.cancel(job_id).to_dict())
