"""Small data helpers for scenarios (random inputs, price and date formatting)."""

from __future__ import annotations

import random
import string
from datetime import date, datetime, timezone

_ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


def generate_random_string(length: int = 10) -> str:
    return "".join(random.choice(_ALPHANUMERIC) for _ in range(length))


def generate_random_email() -> str:
    return f"test.{generate_random_string(8)}@example.com"


def format_egp(amount: float) -> str:
    """Format an amount the way the storefront prints Egyptian Pound prices."""
    return f"LE {amount:.2f} EGP"


def get_timestamp() -> str:
    """Current UTC time in ISO-8601."""
    return datetime.now(timezone.utc).isoformat()


def format_date(value: date) -> str:
    """Render a date as e.g. ``January 5, 2025``."""
    return f"{value:%B} {value.day}, {value.year}"
