"""Page Object Model classes for the storefront E2E suite."""

from .base_page import BasePage
from .home_page import HomePage

__all__ = ["BasePage", "HomePage"]
