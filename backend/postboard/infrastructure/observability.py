"""Request Observability: JSON log lines carrying request, user and post context.

Invariants:
    - Every HTTP request emits one "request completed" line with request_id,
      method, path, status_code and duration_ms
    - X-Request-ID is echoed back (taken from the caller when present)
    - Log lines emitted while a request is in flight carry its request_id, so
      repository lines (post_id, user_id, operation) correlate with the request
    - setup_logging is idempotent: repeated lifespans do not stack handlers
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"

CONTEXT_FIELDS: tuple[str, ...] = (
    "request_id", "method", "path", "status_code", "duration_ms",
    "operation", "user_id", "post_id", "error_code",
)

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

logger = logging.getLogger("postboard.requests")


def current_request_id() -> str | None:
    return _request_id.get()


class RequestContextFilter(logging.Filter):
    """Stamp the in-flight request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = _request_id.get()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record, context fields only when set."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            {
                key: record.__dict__[key]
                for key in CONTEXT_FIELDS
                if record.__dict__.get(key) is not None
            },
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the postboard handler on the root logger, replacing a previous one."""
    handler = logging.StreamHandler()
    handler.set_name("postboard")
    handler.addFilter(RequestContextFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s]: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "postboard":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def register_request_logging(app: FastAPI) -> None:
    """Attach request-id propagation and per-request completion logging."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = _request_id.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(
                        (time.perf_counter() - started) * 1000, 2,
                    ),
                },
            )
            return response
        finally:
            _request_id.reset(token)
