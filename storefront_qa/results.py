"""Result values returned by non-throwing probes."""

from __future__ import annotations

import enum


class Visibility(enum.Enum):
    """Outcome of a visibility probe.

    Truthy when visible so callers can write ``if page.is_visible(x):``.
    """

    VISIBLE = "visible"
    NOT_VISIBLE = "not_visible"

    def __bool__(self) -> bool:
        return self is Visibility.VISIBLE

    @classmethod
    def of(cls, flag: bool) -> "Visibility":
        return cls.VISIBLE if flag else cls.NOT_VISIBLE
