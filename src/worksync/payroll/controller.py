from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..common.web import admin_required, current_actor, login_required
from ..core.exceptions import ValidationError
from ..container import Container
from .model import SalaryAdjustment


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/salary", methods=["GET"], endpoint="salary_list")
    @admin_required
    def list_salaries():
        return jsonify([row.to_dict() for row in container.payroll_service.list_all()])

    @app.route("/salary/<int:salary_id>", methods=["PUT"], endpoint="salary_update")
    @admin_required
    def update_salary(salary_id: int):
        adjustment = SalaryAdjustment.from_payload(_json_body())
        return jsonify(container.payroll_service.adjust_salary(salary_id, adjustment).to_dict())

    @app.route("/salary/generate", methods=["POST"], endpoint="salary_generate")
    @admin_required
    def generate():
        data = _json_body()
        outcome = container.payroll_service.generate_salary(
            require_int(data.get("userId"), "userId"), data.get("month"), data.get("year")
        )
        if not outcome.created:
            return jsonify({"message": "Salary already generated for this month", "salary": outcome.record.to_dict()}), 200
        return jsonify(outcome.record.to_dict()), 201

    @app.route("/salary/generate-batch", methods=["POST"], endpoint="salary_generate_batch")
    @admin_required
    def generate_batch():
        data = _json_body()
        result = container.payroll_service.generate_batch(data.get("month"), data.get("year"))
        return jsonify(
            {
                "message": f"Successfully generated {result.count} salary records",
                "count": result.count,
                "skipped": len(result.skipped),
                "failures": [{"user": user_id, "error": error} for user_id, error in result.failures],
            }
        ), 201

    @app.route("/salary/user/<int:user_id>", methods=["GET"], endpoint="salary_for_user")
    @login_required
    def user_salaries(user_id: int):
        records = container.payroll_service.list_for_user(user_id, actor=current_actor())
        return jsonify([r.to_dict() for r in records])

    @app.route("/salary/pay/<int:salary_id>", methods=["POST"], endpoint="salary_pay")
    @admin_required
    def pay(salary_id: int):
        return jsonify(container.payroll_service.mark_paid(salary_id).to_dict())
