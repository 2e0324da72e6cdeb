"""Logging configuration for the adoption engine."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

_handler: Optional[logging.Handler] = None


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object on one line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_text"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure logging for the CLI and HTTP surfaces.

    Calling it again replaces the handler installed by the previous call.
    Records go to stderr so stdout carries only the CLI's JSON results.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Emit one JSON object per record instead of plain text
    """
    global _handler

    handler = logging.StreamHandler(sys.stderr)
    if format_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )

    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (usually ``__name__``)."""
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "get_logger", "setup_logging"]
