"""Test-layer conftest: markers and Playwright stand-ins for unit tests."""

from __future__ import annotations

import re
from unittest.mock import MagicMock

import pytest


class RoleRegistry:
    """``get_by_role`` side effect handing out one mock locator per (role, name).

    MagicMock would otherwise return the same child for every role, making
    the Men button indistinguishable from the brand link.
    """

    def __init__(self) -> None:
        self.locators: dict[tuple[str, str | None], MagicMock] = {}

    @staticmethod
    def _key(role, name):
        if isinstance(name, re.Pattern):
            name = name.pattern
        return role, name

    def __call__(self, role, **kwargs):
        key = self._key(role, kwargs.get("name"))
        if key not in self.locators:
            self.locators[key] = MagicMock(name=f"role={role}:{key[1]}")
        return self.locators[key]

    def get(self, role, name=None) -> MagicMock:
        return self.locators[self._key(role, name)]


@pytest.fixture()
def fake_page():
    """A MagicMock Playwright page whose role locators are distinct per role/name."""
    page = MagicMock(name="page")
    page.url = "https://shop.example/"
    page.get_by_role.side_effect = RoleRegistry()
    return page


def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no browser)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright tests against the live storefront")
    config.addinivalue_line("markers", "slow: Slow-running tests")
