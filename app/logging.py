import logging
import json
import os
from typing import Any, Dict
from flask import g, has_app_context
from opentelemetry.trace import get_current_span


# Guest and vendor contact data plus payment secrets never reach the log in clear
SENSITIVE_KEYS = {
    "guest_email",
    "guest_name",
    "guest_address",
    "owner_email",
    "email",
    "client_secret",
}


def current_request_id() -> str:
    if not has_app_context():
        return "n/a"
    return getattr(g, "request_id", None) or "n/a"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id()
        return True


def current_trace_ids():
    ctx = get_current_span().get_span_context()
    if not ctx.is_valid:
        return "n/a", "n/a"
    return format(ctx.trace_id, "032x"), format(ctx.span_id, "016x")


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        trace_id, span_id = current_trace_ids()
        record.trace_id = trace_id
        record.span_id = span_id
        return True


def _mask_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: ("[REDACTED]" if key in SENSITIVE_KEYS else value)
        for key, value in data.items()
    }


class MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        env = os.getenv("APP_ENV", "development").lower()
        # DEBUG records keep raw values outside production
        if record.levelno == logging.DEBUG and env != "production":
            return True
        if isinstance(record.msg, dict):
            record.msg = _mask_dict(record.msg)
        if isinstance(record.args, dict):
            record.args = _mask_dict(record.args)
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        base = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "request_id": getattr(record, "request_id", "n/a"),
            "trace_id": getattr(record, "trace_id", "n/a"),
            "span_id": getattr(record, "span_id", "n/a"),
        }
        if isinstance(record.msg, dict):
            base.update(record.msg)
        else:
            base["message"] = record.getMessage()
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, default=str)


def build_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z"))
    handler.addFilter(RequestIdFilter())
    handler.addFilter(TraceIdFilter())
    handler.addFilter(MaskingFilter())
    return handler


def configure_logging(app) -> None:
    handler = build_handler()

    app.logger.handlers.clear()
    app.logger.addHandler(handler)

    level_name = os.getenv("LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), logging.INFO)
    else:
        level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    app.logger.setLevel(level)

    root = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)
    root.setLevel(level)

    wl = logging.getLogger("werkzeug")
    wl.setLevel(level)
    wl.handlers.clear()
    wl.addHandler(handler)
