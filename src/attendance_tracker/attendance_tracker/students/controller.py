from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        students = container.roster_service.search(request.args.get("q"))
        return jsonify({"students": [s.to_dict() for s in students]})

    @app.route("/api/students", methods=["POST"], endpoint="enroll_student")
    def enroll_student():
        data = require_json_object(request.get_json(silent=True))
        admission = data.get("admissionDate")

        student = container.roster_service.enroll(
            name=data.get("name", ""),
            email=data.get("email", ""),
            grade=data.get("grade", ""),
            student_id=data.get("id"),
            admission_date=parse_iso_date(admission) if admission else None,
        )
        return jsonify({"success": True, "student": student.to_dict()}), 201
