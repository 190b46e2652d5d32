"""Pytest configuration for E2E tests with Playwright.

One browser per engine is launched for the session; every test gets a
fresh context and page, so no state leaks between scenarios.  Traces,
videos and failure screenshots follow the configured recording policy and
land under ``E2E_OUTPUT_DIR``.
"""

from __future__ import annotations

import pytest
from playwright.sync_api import sync_playwright

from storefront_qa.errors import ConfigurationError
from storefront_qa.recording import RecordingPolicy, finish_session
from storefront_qa.utils.config import BROWSER_ENGINES, SuiteSettings, browsers_from_env
from storefront_qa.utils.logging_utils import get_logger

from .pages.home_page import HomePage

logger = get_logger("fixtures")


def pytest_generate_tests(metafunc):
    """Run every browser-backed test once per configured engine."""
    if "browser_name" not in metafunc.fixturenames:
        return
    try:
        engines = browsers_from_env()
    except ConfigurationError:
        # Reported by the suite_settings fixture instead of failing collection.
        engines = BROWSER_ENGINES
    metafunc.parametrize("browser_name", list(engines), scope="session")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def suite_settings() -> SuiteSettings:
    return SuiteSettings.from_env()


@pytest.fixture(scope="session")
def recording_policy(suite_settings) -> RecordingPolicy:
    return RecordingPolicy.from_settings(suite_settings)


@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(browser_name, playwright_instance, suite_settings):
    """Launch one browser per configured engine."""
    engine = getattr(playwright_instance, browser_name)
    logger.info("Launching %s (headless=%s)", browser_name, suite_settings.headless)
    browser = engine.launch(headless=suite_settings.headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def page(request, browser, suite_settings, recording_policy):
    """Create a new context and page for each test."""
    artifacts = recording_policy.artifact_dir(request.node.nodeid)
    context_args = {
        "viewport": suite_settings.viewport_size,
        "base_url": suite_settings.base_url,
    }
    if recording_policy.records_video:
        context_args["record_video_dir"] = str(artifacts / "video")
    context = browser.new_context(**context_args)
    context.set_default_timeout(suite_settings.action_timeout_ms)
    context.set_default_navigation_timeout(suite_settings.navigation_timeout_ms)
    if recording_policy.records_trace:
        context.tracing.start(screenshots=True, snapshots=True, sources=True)

    page = context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    failed = report is None or report.failed
    finish_session(page, context, recording_policy, artifacts, failed)
    if failed:
        logger.info("Diagnostics for %s kept under %s", request.node.nodeid, artifacts)


@pytest.fixture
def base_url(suite_settings) -> str:
    """Base URL for the storefront."""
    return suite_settings.base_url


@pytest.fixture
def home_page(page, suite_settings) -> HomePage:
    return HomePage(page, settings=suite_settings)
