from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


_RESERVED_RECORD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
# Printed first, in this order, when present on a record.
OBJECT_FIELDS = ("bucket", "key", "size", "content_type", "path")
SDK_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def object_context(record: logging.LogRecord) -> dict[str, Any]:
    """Fields passed through `extra=` or bound with `with_context`, object fields first."""
    fields = {
        name: value
        for name, value in record.__dict__.items()
        if name not in _RESERVED_RECORD_FIELDS and not name.startswith("_")
    }
    ordered = {name: fields.pop(name) for name in OBJECT_FIELDS if name in fields}
    ordered.update(sorted(fields.items()))
    return ordered


class ServiceFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def timestamp(self, record: logging.LogRecord) -> datetime:
        return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(ServiceFormatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        context = object_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(ServiceFormatter):
    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.timestamp(record).strftime("%Y-%m-%dT%H:%M:%S%z"),
            record.levelname,
            record.name,
            f"service={self.service}",
            f"message={record.getMessage()}",
        ]
        parts.extend(f"{name}={value!r}" for name, value in object_context(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ContextAdapter(logging.LoggerAdapter):
    """LoggerAdapter whose bound fields are merged with each call's `extra`."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def configure_logging(level: str | None = None, service: str = "r2_operator") -> None:
    """
    Install a single stdout handler on the root logger.

    LOG_LEVEL picks the level when `level` is not given, R2_LOG_JSON switches
    between the JSON and key=value text formats. SDK loggers stay at WARNING
    unless the level is DEBUG.
    """
    resolved_level = getattr(logging, (level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    use_json = os.getenv("R2_LOG_JSON", "").strip().lower() in {"1", "true", "yes", "on"}

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter(service) if use_json else TextFormatter(service))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved_level)

    sdk_level = logging.DEBUG if resolved_level <= logging.DEBUG else max(resolved_level, logging.WARNING)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def with_context(logger: logging.Logger, **context: Any) -> ContextAdapter:
    return ContextAdapter(logger, context)
