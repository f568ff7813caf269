"""Custom middleware."""

from __future__ import annotations

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from wikitown.apps.core.ip import get_real_ip
from wikitown.logging import log_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware:
    """Attach a request ID and path metadata to log records for the request."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.request_id = request_id  # type: ignore[attr-defined]

        with log_context(
            request_id=request_id,
            path=request.path,
            method=request.method,
            remote_ip=get_real_ip(request),
        ):
            response = self.get_response(request)

        response.setdefault(REQUEST_ID_HEADER, request_id)
        return response
