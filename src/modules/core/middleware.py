import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from modules.core.metrics import metrics

REQUEST_ID_HEADER = "X-Request-ID"
HTTP_REQUESTS_METRIC = "http.requests"

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Tags every request with a correlation id and logs its outcome.

    The id comes from the ``X-Request-ID`` header, or a fresh UUID4 when
    the client sends none.  It is bound into structlog's contextvars so
    every log line emitted while handling the request carries it, and it
    is echoed back on the response.  Finished requests are counted under
    ``http.requests``.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        path = request.get_full_path()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=request_id)
        logger.info("request.started", method=request.method, path=path)

        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = round((time.monotonic() - started) * 1000, 2)

        metrics.increment(HTTP_REQUESTS_METRIC)
        logger.info(
            "request.finished",
            method=request.method,
            path=path,
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )

        response[REQUEST_ID_HEADER] = request_id
        return response
