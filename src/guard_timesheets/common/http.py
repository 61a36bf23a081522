from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ROLE_HEADER = "X-Role"


def current_role() -> Role:
    """Caller role as asserted by the authenticating proxy in front of the API."""
    try:
        return Role((request.headers.get(ROLE_HEADER) or "").strip().lower())
    except ValueError:
        raise AuthorizationError("Missing or unknown role")


def json_api(view):
    """Translate domain errors into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e), "errors": e.field_errors}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except Exception:
            logger.exception("unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper
