import json
import logging
from datetime import UTC, datetime

from etherscan_async.config import settings

logger = logging.getLogger("etherscan_async")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _request_context(record: logging.LogRecord) -> dict:
    """The ``props`` the dispatcher attaches to request/response/failure records."""
    return getattr(record, "props", None) or {}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the call's module/action as top-level keys."""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_request_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class RequestFormatter(logging.Formatter):
    """Plain-text formatter that appends the request context as ``key=value`` pairs."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record):
        line = super().format(record)
        context = _request_context(record)
        if context:
            line += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"
        return line


def configure_logging():
    """Attach a single stream handler to the package logger, JSON or text per settings."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if settings.log_json else RequestFormatter())

    # Called once per CLI command; never stack handlers
    logger.handlers = []
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
