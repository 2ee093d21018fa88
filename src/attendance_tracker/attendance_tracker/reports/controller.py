from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..container import Container
from .exporter import CSV_MIMETYPE, XLSX_MIMETYPE


def _requested_columns():
    """Column ids from ?columns=a,b or repeated ?columns=; None means all."""
    values = request.args.getlist("columns")
    if not values:
        return None
    return [c for v in values for c in v.split(",")]


def register(app: Flask, container: Container) -> None:
    def _attachment(payload: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/preview", methods=["GET"], endpoint="report_preview")
    def report_preview():
        data = container.report_service.build_report(_requested_columns())
        return jsonify({"labels": data.labels, "rows": data.rows})

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="report_csv")
    def report_csv():
        data = container.report_service.build_report(_requested_columns())
        payload = container.report_exporter.to_csv(data.rows, data.labels)
        filename = container.report_exporter.filename("csv", today=today_local())
        return _attachment(payload, mimetype=CSV_MIMETYPE, filename=filename)

    @app.route("/api/reports/export.xlsx", methods=["GET"], endpoint="report_xlsx")
    def report_xlsx():
        data = container.report_service.build_report(_requested_columns())
        payload = container.report_exporter.to_xlsx(data.rows, data.labels)
        filename = container.report_exporter.filename("xlsx", today=today_local())
        return _attachment(payload, mimetype=XLSX_MIMETYPE, filename=filename)
