"""Suite configuration read from the environment.

Every knob has a default matching the deployed storefront; CI runs get one
extra retry.  Values are parsed once into a frozen ``SuiteSettings``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from storefront_qa.errors import ConfigurationError

BROWSER_ENGINES = ("chromium", "firefox", "webkit")
TRACE_MODES = ("on", "off", "retain-on-failure")
VIDEO_MODES = ("on", "off", "retain-on-failure")
SCREENSHOT_MODES = ("on", "off", "only-on-failure")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _get(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name, default).strip()


def _parse_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _get(environ, name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def _parse_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get(environ, name, "true" if default else "false").lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_choice(environ: Mapping[str, str], name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = _get(environ, name, default).lower()
    if raw not in choices:
        raise ConfigurationError(f"{name} must be one of {', '.join(choices)}; got {raw!r}")
    return raw


def _parse_browsers(environ: Mapping[str, str]) -> tuple[str, ...]:
    raw = _get(environ, "E2E_BROWSERS", ",".join(BROWSER_ENGINES))
    names = tuple(dict.fromkeys(part.strip().lower() for part in raw.split(",") if part.strip()))
    if not names:
        raise ConfigurationError("E2E_BROWSERS must name at least one browser engine")
    unknown = [name for name in names if name not in BROWSER_ENGINES]
    if unknown:
        raise ConfigurationError(f"Unknown browser engine(s) in E2E_BROWSERS: {', '.join(unknown)}")
    return names


def _parse_viewport(environ: Mapping[str, str]) -> tuple[int, int]:
    raw = _get(environ, "E2E_VIEWPORT", "1920x1080").lower()
    width, sep, height = raw.partition("x")
    if not sep or not width.isdigit() or not height.isdigit():
        raise ConfigurationError(f"E2E_VIEWPORT must look like 1920x1080, got {raw!r}")
    return int(width), int(height)


@dataclass(frozen=True)
class SuiteSettings:
    """Externally supplied options for one suite run. Timeouts are milliseconds."""

    base_url: str = "https://reverseoutfit.com"
    action_timeout_ms: int = 15_000
    navigation_timeout_ms: int = 30_000
    wait_timeout_ms: int = 30_000
    visibility_probe_timeout_ms: int = 5_000
    test_timeout_ms: int = 30_000
    retries: int = 1
    browsers: tuple[str, ...] = BROWSER_ENGINES
    headless: bool = True
    viewport: tuple[int, int] = (1920, 1080)
    trace: str = "retain-on-failure"
    video: str = "retain-on-failure"
    screenshot: str = "only-on-failure"
    output_dir: Path = Path("test-results")
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def viewport_size(self) -> dict[str, int]:
        width, height = self.viewport
        return {"width": width, "height": height}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SuiteSettings":
        env = os.environ if environ is None else environ
        on_ci = bool(env.get("CI", "").strip())
        base_url = _get(env, "E2E_BASE_URL", cls.base_url).rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"E2E_BASE_URL must be an http(s) URL, got {base_url!r}")
        return cls(
            base_url=base_url,
            action_timeout_ms=_parse_int(env, "E2E_ACTION_TIMEOUT", cls.action_timeout_ms),
            navigation_timeout_ms=_parse_int(env, "E2E_NAVIGATION_TIMEOUT", cls.navigation_timeout_ms),
            wait_timeout_ms=_parse_int(env, "E2E_WAIT_TIMEOUT", cls.wait_timeout_ms),
            visibility_probe_timeout_ms=_parse_int(env, "E2E_PROBE_TIMEOUT", cls.visibility_probe_timeout_ms),
            test_timeout_ms=_parse_int(env, "E2E_TEST_TIMEOUT", cls.test_timeout_ms),
            retries=_parse_int(env, "E2E_RETRIES", 2 if on_ci else cls.retries),
            browsers=_parse_browsers(env),
            headless=_parse_bool(env, "E2E_HEADLESS", cls.headless),
            viewport=_parse_viewport(env),
            trace=_parse_choice(env, "E2E_TRACE", cls.trace, TRACE_MODES),
            video=_parse_choice(env, "E2E_VIDEO", cls.video, VIDEO_MODES),
            screenshot=_parse_choice(env, "E2E_SCREENSHOT", cls.screenshot, SCREENSHOT_MODES),
            output_dir=Path(_get(env, "E2E_OUTPUT_DIR", str(cls.output_dir))),
            log_level=_get(env, "E2E_LOG_LEVEL", cls.log_level).upper(),
            log_json=_parse_bool(env, "E2E_LOG_JSON", cls.log_json),
        )


def browsers_from_env(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Engines named by ``E2E_BROWSERS``; used at collection time, before fixtures run."""
    return _parse_browsers(os.environ if environ is None else environ)


def log_options_from_env(environ: Mapping[str, str] | None = None) -> tuple[bool, str]:
    """``(log_json, log_level)`` without validating the rest of the suite settings."""
    env = os.environ if environ is None else environ
    return (
        _parse_bool(env, "E2E_LOG_JSON", SuiteSettings.log_json),
        _get(env, "E2E_LOG_LEVEL", SuiteSettings.log_level).upper(),
    )
