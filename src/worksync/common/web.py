from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, StorageError, ValidationError
from ..users.model import Actor

logger = logging.getLogger(__name__)


def current_actor() -> Actor:
    """Identity placed in the session by the authentication layer."""

    return Actor(user_id=int(session["user_id"]), role=Role(session["role"]))


def _has_identity() -> bool:
    if "user_id" not in session or "role" not in session:
        return False
    try:
        Role(session["role"])
    except ValueError:
        return False
    return True


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not _has_identity():
            return jsonify({"message": "Not authorized, no session"}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not _has_identity():
                return jsonify({"message": "Not authorized, no session"}), 401
            if session.get("role") not in allowed:
                return jsonify({"message": "Not authorized for this action"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


privileged_required = roles_required(Role.ADMIN, Role.SUB_ADMIN)
admin_required = roles_required(Role.ADMIN)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return jsonify({"message": str(e)}), 403

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(StorageError)
    def _storage(e: StorageError):
        logger.error("storage failure: %s", e)
        return jsonify({"message": "Storage failure"}), 500
