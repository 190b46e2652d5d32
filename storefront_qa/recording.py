"""Which diagnostics (trace, video, screenshot) to keep for a test."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from storefront_qa.utils.config import SuiteSettings

_UNSAFE = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass(frozen=True)
class RecordingPolicy:
    trace: str = "retain-on-failure"
    video: str = "retain-on-failure"
    screenshot: str = "only-on-failure"
    output_dir: Path = Path("test-results")

    @classmethod
    def from_settings(cls, settings: SuiteSettings) -> "RecordingPolicy":
        return cls(
            trace=settings.trace,
            video=settings.video,
            screenshot=settings.screenshot,
            output_dir=settings.output_dir,
        )

    @property
    def records_trace(self) -> bool:
        return self.trace != "off"

    @property
    def records_video(self) -> bool:
        return self.video != "off"

    def keep_trace(self, failed: bool) -> bool:
        return self.trace == "on" or (self.trace == "retain-on-failure" and failed)

    def keep_video(self, failed: bool) -> bool:
        return self.video == "on" or (self.video == "retain-on-failure" and failed)

    def take_screenshot(self, failed: bool) -> bool:
        return self.screenshot == "on" or (self.screenshot == "only-on-failure" and failed)

    def artifact_dir(self, nodeid: str) -> Path:
        """Per-test directory under the output dir, named after the pytest node id."""
        slug = _UNSAFE.sub("-", nodeid).strip("-.") or "test"
        return self.output_dir / slug


def finish_session(page, context, policy: RecordingPolicy, artifacts: Path, failed: bool) -> None:
    """Save the diagnostics the policy keeps, then close the page and context.

    The page and context are closed even when capturing fails (a crashed
    page cannot be screenshotted); the capture error still propagates.
    """
    video = page.video
    try:
        if policy.take_screenshot(failed):
            artifacts.mkdir(parents=True, exist_ok=True)
            page.screenshot(path=str(artifacts / "test-failed-1.png"), full_page=True)
    finally:
        try:
            if policy.records_trace:
                if policy.keep_trace(failed):
                    context.tracing.stop(path=str(artifacts / "trace.zip"))
                else:
                    context.tracing.stop()
        finally:
            page.close()
            context.close()
    if video is not None and not policy.keep_video(failed):
        video.delete()
