"""
Structured Logging with Request Correlation - v1.2
==================================================

Every log line carries the request id of the HTTP call that produced it, so
one /sync-six/games range request can be followed through its per-day
upstream calls.

- JSONFormatter: one JSON object per line (LOG_FORMAT=json, the default)
- TextFormatter: readable single line for local runs (LOG_FORMAT=text)
- RequestCorrelationMiddleware: reads or mints X-Request-ID, echoes it back,
  and writes one access line per request
- log_info / log_error: attach extra fields without building dicts by hand

Extra fields pass through core.log_sanitizer, so an x-apisports-key that
ends up in a log call is written as [REDACTED].

Usage:
    configure_structured_logging()
    app.add_middleware(RequestCorrelationMiddleware)

    log_info(logger, "Roster fetched", team="1", results=53)
    # {"timestamp": "...", "level": "INFO", "message": "Roster fetched",
    #  "request_id": "req-xxx", "team": "1", "results": 53, ...}
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.log_sanitizer import REDACTED, _is_sensitive_key, sanitize_dict
from env_config import Config

REQUEST_ID_HEADER = "X-Request-ID"

# Third-party loggers that are too chatty below WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

access_logger = logging.getLogger("syncsix.access")


def get_request_id() -> Optional[str]:
    """Request id of the current HTTP call, or None outside a request."""
    return _request_id_ctx.get()


def set_request_id(request_id: str) -> None:
    _request_id_ctx.set(request_id)


def clear_request_id() -> None:
    _request_id_ctx.set(None)


def generate_request_id() -> str:
    """e.g. "req-3f9a1c0b7d2e" """
    return f"req-{uuid.uuid4().hex[:12]}"


# Attributes every LogRecord has; anything else came in via extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


def _record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """
    JSON formatter.

    Output:
        {"timestamp": "2025-10-26T17:00:00.123456+00:00", "level": "INFO",
         "logger": "syncsix.engine", "message": "SYNC SIX run: ...",
         "request_id": "req-abc123def456", "module": "engine",
         "function": "run_sync_six_engine", "line": 87, ...extras}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        entry.update(
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        )

        for key, value in _record_extras(record).items():
            if _is_sensitive_key(key):
                entry[key] = REDACTED
            elif isinstance(value, dict):
                entry[key] = sanitize_dict(value)
            else:
                entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """
    Text formatter.

    Output:
        2025-10-26 17:00:00.123 [INFO] [req-abc123def456] syncsix.engine:run_sync_six_engine:87 - SYNC SIX run: ...
    """

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        where = f"{record.name}:{record.funcName}:{record.lineno}"
        line = f"{stamp} [{record.levelname}] [{get_request_id() or '-'}] {where} - {record.getMessage()}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class RequestCorrelationMiddleware(BaseHTTPMiddleware):
    """
    Bind a request id for the lifetime of each HTTP request.

    The client's X-Request-ID is reused when sent; otherwise one is
    generated. The id is echoed on the response.
    """

    HEADER_NAME = REQUEST_ID_HEADER

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(self.HEADER_NAME) or generate_request_id()
        set_request_id(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[self.HEADER_NAME] = request_id
            access_logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                },
            )
            return response
        finally:
            clear_request_id()


def configure_structured_logging(level: str = None, format_type: str = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: DEBUG / INFO / WARNING / ERROR (default Config.LOG_LEVEL)
        format_type: "json" or "text" (default Config.LOG_FORMAT)

    Safe to call again; existing root handlers are replaced, not stacked.
    """
    level = (level or Config.LOG_LEVEL).upper()
    format_type = (format_type or Config.LOG_FORMAT).lower()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if format_type == "json" else TextFormatter())

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_with_context(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """
    Log with extra fields, e.g.

        log_with_context(logger, logging.INFO, "Games fetched",
                         league="1", season="2025", results=16)
    """
    logger.log(level, message, extra=extra)


def log_info(logger: logging.Logger, message: str, **extra: Any) -> None:
    log_with_context(logger, logging.INFO, message, **extra)


def log_error(logger: logging.Logger, message: str, **extra: Any) -> None:
    log_with_context(logger, logging.ERROR, message, **extra)
