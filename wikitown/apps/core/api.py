"""Shared plumbing for the JSON API views."""

from __future__ import annotations

import json
import logging
from functools import wraps
from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import Http404, HttpRequest, JsonResponse
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)

EDITOR_KEY_HEADER = "X-Editor-Key"


class AuthenticationError(Exception):
    """Raised when API authentication fails."""

    def __init__(self, message: str, status: int = 401):
        self.message = message
        self.status = status
        super().__init__(message)


def json_error(message: str, status: int) -> JsonResponse:
    return JsonResponse({"success": False, "error": message}, status=status)


def json_api_view(view_method):
    """
    Decorator that converts exceptions to JSON error responses.

    Handles:
    - AuthenticationError → 401/403/500 with error message
    - ValidationError → 400 with error message
    - Http404 → 404 with error message
    - Other exceptions → 500 with generic message (logged)
    """

    @wraps(view_method)
    def wrapper(self, request, *args, **kwargs):
        try:
            return view_method(self, request, *args, **kwargs)
        except AuthenticationError as e:
            return json_error(e.message, e.status)
        except ValidationError as e:
            return json_error("; ".join(e.messages), 400)
        except Http404 as e:
            return json_error(str(e) or "Not found", 404)
        except Exception:
            logger.exception("Unexpected error in %s", view_method.__name__)
            return json_error("Internal server error", 500)

    return wrapper


def require_editor_key(request: HttpRequest) -> None:
    """
    Validate the shared editor key sent in the ``X-Editor-Key`` header.

    Raises:
        AuthenticationError: If the key is missing, wrong, or not configured.
    """
    key = request.headers.get(EDITOR_KEY_HEADER, "")
    if not key:
        raise AuthenticationError("Missing editor key", status=401)

    if not settings.EDITOR_KEY:
        raise AuthenticationError("Server not configured for editing", status=500)

    if not constant_time_compare(key, settings.EDITOR_KEY):
        logger.warning("Rejected write with invalid editor key")
        raise AuthenticationError("Invalid editor key", status=403)


def parse_json_body(request: HttpRequest) -> dict[str, Any]:
    """
    Decode a JSON object request body.

    Raises:
        ValidationError: If the body is not a JSON object.
    """
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("Invalid JSON body") from e
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    return data
