"""Central logging configuration using Loguru JSON sinks."""

from __future__ import annotations

import logging
import sys
from typing import Any

from loguru import logger as loguru_logger


def get_logger(name: str) -> logging.Logger:
    """Create a namespaced logger for a suite component."""
    return logging.getLogger(f"storefront-qa.{name}")


class InterceptHandler(logging.Handler):
    """Forward stdlib records to Loguru, keeping the originating logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        loguru_logger.bind(logger_name=record.name).log(level, record.getMessage())


def configure_json_logging(level: str = "INFO", sink: Any = None) -> None:
    """Route stdlib logging through a serialized Loguru sink (stderr by default)."""
    loguru_logger.remove()
    loguru_logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        serialize=True,
        enqueue=False,
        backtrace=False,
        diagnose=False,
    )
    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
