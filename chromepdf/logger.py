"""
Logging configuration for chromepdf.

setup_logging() installs a single stdout handler, either human-readable or
one JSON object per line. get_logger() returns a render-scoped logger that
tags each message with the id of its conversion, so interleaved renders in
the service can be told apart.
"""

import json
import logging
import sys
from typing import Optional

SIMPLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line for log aggregators."""

    def __init__(self):
        super().__init__(datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class RenderLogger:
    """Logger wrapper that prefixes messages with a render id."""

    def __init__(self, name: str, render_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.render_id = render_id[:8] if render_id else None

    def _tag(self, message: str) -> str:
        if self.render_id:
            return f"[render:{self.render_id}] {message}"
        return message

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._tag(message), **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(self._tag(message), **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(self._tag(message), **kwargs)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: "simple" or "json"
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, render_id: Optional[str] = None) -> RenderLogger:
    return RenderLogger(name, render_id)
