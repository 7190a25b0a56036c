from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import current_actor, login_required, privileged_required
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/checkin", methods=["POST"], endpoint="attendance_checkin")
    @login_required
    def checkin():
        record = container.attendance_service.check_in(current_actor().user_id)
        return jsonify(record.to_dict()), 201

    @app.route("/attendance/checkout", methods=["POST"], endpoint="attendance_checkout")
    @login_required
    def checkout():
        record = container.attendance_service.check_out(current_actor().user_id)
        return jsonify(record.to_dict())

    @app.route("/attendance/daily/<int:user_id>", methods=["GET"], endpoint="attendance_daily")
    @login_required
    def daily(user_id: int):
        record = container.report_service.get_daily(user_id, actor=current_actor())
        return jsonify(record.to_dict() if record else None)

    @app.route("/attendance/monthly/<int:user_id>", methods=["GET"], endpoint="attendance_monthly")
    @login_required
    def monthly(user_id: int):
        month = request.args.get("month")
        year = request.args.get("year")
        if not month or not year:
            raise ValidationError("Please provide month and year")

        actor = current_actor()
        records = container.report_service.get_monthly(user_id, month, year, actor=actor)
        if request.args.get("totals"):
            totals = container.report_service.monthly_totals(user_id, month, year, actor=actor)
            return jsonify({"records": [r.to_dict() for r in records], "totals": totals.to_dict()})
        return jsonify([r.to_dict() for r in records])

    @app.route("/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @privileged_required
    def summary():
        return jsonify(container.report_service.summary().to_dict())

    @app.route("/attendance/logs", methods=["GET"], endpoint="attendance_logs")
    @privileged_required
    def logs():
        start = request.args.get("startDate")
        end = request.args.get("endDate")
        rows = container.report_service.list_logs(
            start=parse_iso_date(start) if start else None,
            end=parse_iso_date(end) if end else None,
            status=request.args.get("status"),
        )
        return jsonify([r.to_dict() for r in rows])
