"""Structured JSON-line logging for the spin engine.

Records go to stderr by default so that CLI output on stdout stays
machine-readable.
"""

from __future__ import annotations

import json
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}

# Initial level for new loggers; SPINWHEEL_LOG_LEVEL overrides it
_default_level = os.environ.get("SPINWHEEL_LOG_LEVEL", "INFO").upper()


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


class StructuredLogger:
    """Structured logger emitting one JSON object per line."""

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "INFO",
    ) -> None:
        self.name = name
        self._output = output
        self._min_level = LEVELS.get(min_level.upper(), 1)

    @property
    def output(self) -> TextIO:
        # Resolved per call so redirected stderr (tests, CLI wrappers) is honored
        return self._output if self._output is not None else sys.stderr

    def set_level(self, level: str) -> None:
        self._min_level = LEVELS.get(level.upper(), 1)

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS.get(level, 0) >= self._min_level

    def _log(self, level: str, message: str, **data: Any) -> None:
        if not self.is_enabled_for(level):
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output)

    def debug(self, message: str, **data: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", message, **data)

    def warn(self, message: str, **data: Any) -> None:
        """Log at WARN level."""
        self._log("WARN", message, **data)

    def error(self, message: str, **data: Any) -> None:
        """Log at ERROR level."""
        self._log("ERROR", message, **data)

    @contextmanager
    def timer(self, operation: str, **data: Any):
        """Context manager for timing operations.

        Usage:
            with logger.timer("simulate_spin", sectors=8):
                driver.run_until_stopped()
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.debug(f"{operation} completed", elapsed_ms=elapsed * 1000, **data)


_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_default_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for all current and future loggers.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.

    Raises:
        ValueError: If the level name is unknown.
    """
    global _default_level

    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {sorted(LEVELS)}")

    _default_level = level
    for logger in _loggers.values():
        logger.set_level(level)
