"""Scenario-level retry and timeout policy.

Retries live above the page objects: a failing scenario body is run again
from the top, up to the configured retry count.  Each attempt is timed
against the scenario budget; an attempt that outlived it counts as a
``ScenarioTimeoutError`` even if its last step happened to succeed.
"""

from __future__ import annotations

import functools
import time
from typing import Callable, TypeVar

from storefront_qa.errors import AssertionFailure, ScenarioTimeoutError
from storefront_qa.utils.config import SuiteSettings
from storefront_qa.utils.logging_utils import get_logger

logger = get_logger("scenario")

F = TypeVar("F", bound=Callable[..., object])


def scenario(
    retries: int | None = None,
    timeout_ms: float | None = None,
    *,
    settings: SuiteSettings | None = None,
) -> Callable[[F], F]:
    """Decorator that retries a failing scenario and enforces its time budget.

    ``retries`` and ``timeout_ms`` default to ``settings.retries`` and
    ``settings.test_timeout_ms``; settings are read from the environment
    when the decorated scenario first runs.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            resolved = settings or SuiteSettings.from_env()
            max_retries = resolved.retries if retries is None else retries
            budget_ms = resolved.test_timeout_ms if timeout_ms is None else timeout_ms
            attempts = max_retries + 1
            last_exc: BaseException | None = None

            for attempt in range(1, attempts + 1):
                started = time.monotonic()
                try:
                    result = func(*args, **kwargs)
                except Exception as exc:
                    last_exc = exc
                else:
                    elapsed_ms = (time.monotonic() - started) * 1000
                    if not budget_ms or elapsed_ms <= budget_ms:
                        return result
                    last_exc = ScenarioTimeoutError(func.__name__, elapsed_ms, budget_ms)

                if attempt < attempts:
                    logger.warning(
                        "Retry %d/%d for %s: %s",
                        attempt,
                        max_retries,
                        func.__name__,
                        last_exc,
                    )

            if isinstance(last_exc, AssertionError) and not isinstance(last_exc, AssertionFailure):
                raise AssertionFailure(
                    f"{func.__name__} failed after {attempts} attempt(s): {last_exc}"
                ) from last_exc
            raise last_exc  # type: ignore[misc]

        return wrapper  # type: ignore[return-value]

    return decorator
