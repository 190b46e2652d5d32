"""Failure taxonomy for page objects and scenarios."""

from __future__ import annotations


class StorefrontTestError(Exception):
    """Base exception for all suite failures."""


class NavigationError(StorefrontTestError):
    """A page load failed or exceeded the navigation timeout."""

    def __init__(self, url: str, timeout_ms: float | None = None, reason: str = "") -> None:
        self.url = url
        self.timeout_ms = timeout_ms
        detail = f" within {timeout_ms:g}ms" if timeout_ms is not None else ""
        message = f"Navigation to {url} did not complete{detail}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ActionTimeoutError(StorefrontTestError):
    """An element never became actionable within the action timeout."""

    def __init__(self, action: str, target: str, timeout_ms: float) -> None:
        self.action = action
        self.target = target
        self.timeout_ms = timeout_ms
        super().__init__(f"{action} on {target} timed out after {timeout_ms:g}ms")


class WaitTimeoutError(StorefrontTestError):
    """An explicit state wait exceeded its timeout."""

    def __init__(self, target: str, state: str, timeout_ms: float) -> None:
        self.target = target
        self.state = state
        self.timeout_ms = timeout_ms
        super().__init__(f"{target} did not become {state} within {timeout_ms:g}ms")


class AssertionFailure(StorefrontTestError, AssertionError):
    """An observed value did not match the scenario's expectation."""


class ScenarioTimeoutError(StorefrontTestError):
    """A whole scenario attempt outlived the scenario timeout."""

    def __init__(self, name: str, elapsed_ms: float, timeout_ms: float) -> None:
        self.name = name
        self.elapsed_ms = elapsed_ms
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Scenario {name} took {elapsed_ms:.0f}ms, over its {timeout_ms:g}ms budget"
        )


class ConfigurationError(StorefrontTestError, ValueError):
    """An environment setting could not be parsed."""
