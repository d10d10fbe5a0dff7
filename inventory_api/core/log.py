from __future__ import annotations

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from uvicorn.logging import ColourizedFormatter

from inventory_api.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"

# set by the access middleware, read by every log record emitted during the request
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# LogRecord attributes that are not business context
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}


class _RequestIdLogFilter(logging.Filter):
    """Stamps each record with the id of the request being served ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get()
        return True


class _JsonLogFormatter(logging.Formatter):
    """One JSON object per line; `extra=` fields (order_id, stock, ...) become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "service": settings.APP_NAME,
            "request_id": getattr(record, "request_id", "-"),
        }
        entry.update(
            (k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS and k not in entry
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging():
    """Installs a single stdout handler on the root logger (JSON or colourized text)."""
    if settings.LOG_FORMAT.lower() == "json":
        formatter = _JsonLogFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z")
    else:
        formatter = ColourizedFormatter(
            "%(levelprefix)s [%(request_id)s] %(name)s - %(message)s", use_colors=True
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(_RequestIdLogFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL.upper())
    root_logger.addHandler(handler)

    # the access middleware replaces uvicorn's own access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


async def access_log_middleware(request: Request, call_next) -> Response:
    """
    Logs one line per request (route template, status, latency). The request id
    comes from the X-Request-ID header when the caller sends one, and is echoed back.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id
    token = request_id_var.set(request_id)

    start = time.perf_counter()
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    latency_ms = round((time.perf_counter() - start) * 1000, 2)

    route = request.scope.get("route")
    logging.getLogger("inventory_api.access").info(
        "%s %s -> %d",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "route": getattr(route, "path", None),
            "status": response.status_code,
            "latency_ms": latency_ms,
            "client_ip": request.client.host if request.client else "-",
        },
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
