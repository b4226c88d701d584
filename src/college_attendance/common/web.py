"""Shared helpers for the JSON controllers."""
from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, g, jsonify

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..users.session_store import FlaskSessionStore

logger = logging.getLogger(__name__)

EXTENSION_KEY = "college_attendance"


def get_container():
    return current_app.extensions[EXTENSION_KEY]


def current_session():
    return get_container().session_service.current(FlaskSessionStore())


def fail(message: str, status: int = 400, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        s = current_session()
        if s is None:
            return fail("Please log in to continue.", 401)
        g.current_session = s
        return view(*args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            s = current_session()
            if s is None:
                return fail("Please log in to continue.", 401)
            if s.role not in roles:
                return fail("You do not have permission to view this page.", 403)
            g.current_session = s
            return view(*args, **kwargs)

        return wrapper

    return decorator


def api_errors(view):
    """Translate domain errors into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(str(e), 401)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except Exception:
            logger.exception("unhandled error in %s", view.__name__)
            if bool(current_app.config.get("DEBUG", False)):
                raise
            return fail("System error, please try again.", 500)

    return wrapper
