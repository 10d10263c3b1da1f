"""Project-wide DRF exception handler.

DRF's own ``APIException`` subclasses (parse errors, 405, ...) keep the
default rendering.  Anything else that escapes a view is logged with its
traceback and answered with a generic plain-text 500 body; internal
detail never reaches the client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.http import HttpResponse
from rest_framework import status
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

PLAIN_TEXT = "text/plain; charset=utf-8"


def plain_text_response(message: str, status_code: int) -> HttpResponse:
    """Error body sent as the bare message, not a JSON-encoded string."""
    return HttpResponse(message, content_type=PLAIN_TEXT, status=status_code)


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[HttpResponse]:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "request.unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    set_rollback()
    return plain_text_response(
        UNEXPECTED_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
