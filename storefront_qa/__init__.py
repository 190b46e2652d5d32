"""Support code for the storefront end-to-end suite."""

from .errors import (
    ActionTimeoutError,
    AssertionFailure,
    ConfigurationError,
    NavigationError,
    ScenarioTimeoutError,
    StorefrontTestError,
    WaitTimeoutError,
)
from .locators import ByCss, ByRole, ByText, Filtered, Nth, Query, Within, by_role, by_text, css
from .results import Visibility
from .scenario import scenario

__all__ = [
    "ActionTimeoutError",
    "AssertionFailure",
    "ByCss",
    "ByRole",
    "ByText",
    "ConfigurationError",
    "Filtered",
    "NavigationError",
    "Nth",
    "Query",
    "ScenarioTimeoutError",
    "StorefrontTestError",
    "Visibility",
    "WaitTimeoutError",
    "Within",
    "by_role",
    "by_text",
    "css",
    "scenario",
]
