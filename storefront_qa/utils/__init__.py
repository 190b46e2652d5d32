"""Utility helpers for configuration, logging, and test data."""

from .config import SuiteSettings
from .helpers import (
    format_date,
    format_egp,
    generate_random_email,
    generate_random_string,
    get_timestamp,
)
from .logging_utils import configure_json_logging, get_logger

__all__ = [
    "SuiteSettings",
    "configure_json_logging",
    "format_date",
    "format_egp",
    "generate_random_email",
    "generate_random_string",
    "get_logger",
    "get_timestamp",
]
