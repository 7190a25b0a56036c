from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_actor, login_required, privileged_required
from ..core.exceptions import ValidationError
from ..container import Container
from .model import SettingsUpdate


def register(app: Flask, container: Container) -> None:
    @app.route("/settings", methods=["GET"], endpoint="settings_get")
    @login_required
    def get_settings():
        return jsonify(container.settings_provider.get_settings().to_dict())

    @app.route("/settings", methods=["PUT"], endpoint="settings_update")
    @privileged_required
    def update_settings():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        updated = container.settings_provider.update_settings(SettingsUpdate.from_payload(data), actor=current_actor())
        return jsonify(updated.to_dict())
