"""Logging setup for the TradieStop command line.

Log lines go to stderr so command output on stdout stays readable. ``--debug``
forces DEBUG; otherwise ``LOG_LEVEL`` applies. ``LOG_FORMAT=json`` switches to
one JSON object per line with the active LogContext fields (``user_id``,
``correlation_id``) as top-level keys, and ``LOG_FILE`` sends a copy of the
same lines to a file.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tradiestop.utils.logging_utils import ContextFilter, get_log_context

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FORMATS = ("standard", "json")

STANDARD_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, request context included."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(get_log_context())
        for key in ("user_id", "correlation_id", "booking_id", "invoice_id"):
            if key in record.__dict__:
                entry[key] = record.__dict__[key]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


@dataclass
class LoggingConfig:
    """
    Where and how the client logs.

    Attributes:
        level: Root log level
        log_format: ``standard`` text or ``json`` lines
        log_file: Optional file receiving a copy of the output
    """

    level: str = "WARNING"
    log_format: str = "standard"
    log_file: Optional[Path] = None

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. Must be one of {', '.join(LEVELS)}"
            )
        self.log_format = self.log_format.lower()
        if self.log_format not in FORMATS:
            raise ValueError(
                f"Invalid log format: {self.log_format}. "
                f"Must be one of {', '.join(FORMATS)}"
            )
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    @classmethod
    def from_env(cls, debug: bool = False) -> "LoggingConfig":
        """Read LOG_LEVEL, LOG_FORMAT and LOG_FILE; ``debug`` overrides the level."""
        return cls(
            level="DEBUG" if debug else os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def formatter(self) -> logging.Formatter:
        if self.log_format == "json":
            return JSONFormatter()
        return logging.Formatter(STANDARD_FORMAT, datefmt="%H:%M:%S")


def configure_logging(config: LoggingConfig) -> None:
    """Install the handlers described by ``config`` on the root logger.

    Handlers from an earlier call are replaced, so running several commands
    in one process does not duplicate lines.
    """
    reset_logging()
    root = logging.getLogger()
    level = getattr(logging, config.level)
    root.setLevel(level)

    handlers = [logging.StreamHandler(sys.stderr)]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    formatter = config.formatter()
    context_filter = ContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)

    # Connection chatter from requests' transport stays out of --debug output
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))


def reset_logging() -> None:
    """Drop every root handler and go back to WARNING."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)
