"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Optional

from flask import current_app, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, NotFound
from ..core.scoping import Actor

logger = logging.getLogger(__name__)

EXTENSION_KEY = "academic_portal"


def get_container():
    return current_app.extensions[EXTENSION_KEY]


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def ok(**payload):
    return jsonify({"success": True, **payload})


def fail(message: str, status: int = 400, **payload):
    return jsonify({"success": False, "message": message, **payload}), status


def _status_for(error: DomainError) -> int:
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, NotFound):
        return 404
    return 400


def current_session_user():
    return get_container().auth_service.resolve(session.get("token"))


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_session_user()
        if user is None:
            return fail("Login required", 401)
        if user.role is not Role.ADMIN:
            return fail("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper


def requesting_faculty_id(body: Optional[dict] = None) -> Optional[str]:
    """Faculty named by the request: body, query string, header, then a faculty session."""

    candidates = (
        (body or {}).get("facultyId"),
        request.args.get("facultyId"),
        request.headers.get("faculty-id"),
    )
    for value in candidates:
        if value is not None and str(value).strip():
            return str(value).strip()

    user = current_session_user()
    if user is not None and user.role is Role.FACULTY:
        return user.user_id
    return None


def resolve_faculty_id(body: Optional[dict] = None) -> str:
    """Faculty credited with a submitted record; the configured default when none is named."""

    return requesting_faculty_id(body) or str(current_app.config["DEFAULT_FACULTY_ID"])


def faculty_actor() -> Optional[Actor]:
    """Actor for scoped listings and deletes, or None when no faculty is named."""

    faculty_id = requesting_faculty_id()
    return Actor.faculty(faculty_id) if faculty_id else None


def json_mutation(error_message: str):
    """Turn domain errors into ``{success: false, message}`` and log anything unexpected."""

    def decorator(view: Callable[..., Any]):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return fail(str(e), _status_for(e))
            except Exception:
                logger.exception("%s failed", view.__name__)
                return fail(error_message, 500)

        return wrapper

    return decorator


def json_read(default_factory: Callable[[], Any]):
    """Read endpoints never fail the client: errors degrade to an empty result."""

    def decorator(view: Callable[..., Any]):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                logger.info("%s rejected: %s", view.__name__, e)
            except Exception:
                logger.exception("%s failed", view.__name__)
            return jsonify(default_factory())

        return wrapper

    return decorator
