"""Declarative element queries resolved into Playwright locators.

Page objects describe their elements as ``Query`` values: a role with an
accessible name, a text match, a structural CSS match, or a combination of
those (filtered, nested, indexed).  A query carries no page state.  Calling
``resolve(scope)`` turns it into a Playwright ``Locator`` against a page or
another locator; Playwright re-evaluates that locator on every use, so the
same query keeps working after the document changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Pattern, Union

from playwright.sync_api import Locator, Page

TextMatch = Union[str, Pattern[str]]
Scope = Union[Page, Locator]


def _render(value: TextMatch) -> str:
    if isinstance(value, str):
        return repr(value)
    return f"/{value.pattern}/"


class Query(ABC):
    """Base of every query variant."""

    @abstractmethod
    def resolve(self, scope: Scope) -> Locator:
        """Build the Playwright locator for this query inside *scope*."""

    @abstractmethod
    def describe(self) -> str:
        """Readable form used in logs and error messages."""

    def __str__(self) -> str:
        return self.describe()

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def filter(self, *, has: "Query | None" = None, has_text: TextMatch | None = None) -> "Filtered":
        if has is None and has_text is None:
            raise ValueError("filter() needs has= or has_text=")
        return Filtered(self, has=has, has_text=has_text)

    def locate(self, child: "Query") -> "Within":
        """Match *child* inside every element this query matches."""
        return Within(self, child)

    def nth(self, index: int) -> "Nth":
        return Nth(self, index)

    def first(self) -> "Nth":
        return Nth(self, 0)


@dataclass(frozen=True)
class ByRole(Query):
    role: str
    name: TextMatch | None = None
    exact: bool = False

    def resolve(self, scope: Scope) -> Locator:
        kwargs: dict[str, Any] = {}
        if self.name is not None:
            kwargs["name"] = self.name
            if self.exact:
                kwargs["exact"] = True
        return scope.get_by_role(self.role, **kwargs)

    def describe(self) -> str:
        if self.name is None:
            return f"role={self.role}"
        suffix = " exact" if self.exact else ""
        return f"role={self.role}[name={_render(self.name)}{suffix}]"


@dataclass(frozen=True)
class ByText(Query):
    text: TextMatch
    exact: bool = False

    def resolve(self, scope: Scope) -> Locator:
        if self.exact:
            return scope.get_by_text(self.text, exact=True)
        return scope.get_by_text(self.text)

    def describe(self) -> str:
        return f"text={_render(self.text)}"


@dataclass(frozen=True)
class ByCss(Query):
    """Structural match; use only where no role or text identifies the element."""

    selector: str

    def resolve(self, scope: Scope) -> Locator:
        return scope.locator(self.selector)

    def describe(self) -> str:
        return f"css={self.selector!r}"


@dataclass(frozen=True)
class Filtered(Query):
    base: Query
    has: Query | None = None
    has_text: TextMatch | None = None

    def resolve(self, scope: Scope) -> Locator:
        kwargs: dict[str, Any] = {}
        if self.has is not None:
            kwargs["has"] = self.has.resolve(_page_of(scope))
        if self.has_text is not None:
            kwargs["has_text"] = self.has_text
        return self.base.resolve(scope).filter(**kwargs)

    def describe(self) -> str:
        parts = []
        if self.has is not None:
            parts.append(f"has {self.has.describe()}")
        if self.has_text is not None:
            parts.append(f"has text {_render(self.has_text)}")
        return f"{self.base.describe()} ({', '.join(parts)})"


@dataclass(frozen=True)
class Within(Query):
    parent: Query
    child: Query

    def resolve(self, scope: Scope) -> Locator:
        return self.child.resolve(self.parent.resolve(scope))

    def describe(self) -> str:
        return f"{self.parent.describe()} >> {self.child.describe()}"


@dataclass(frozen=True)
class Nth(Query):
    base: Query
    index: int

    def resolve(self, scope: Scope) -> Locator:
        locator = self.base.resolve(scope)
        if self.index == 0:
            return locator.first
        if self.index == -1:
            return locator.last
        return locator.nth(self.index)

    def describe(self) -> str:
        return f"{self.base.describe()} >> nth={self.index}"


def _page_of(scope: Scope) -> Scope:
    # Inner locators for has= must come from the frame, not from the outer locator.
    page = getattr(scope, "page", None)
    return page if isinstance(page, Page) else scope


def by_role(role: str, name: TextMatch | None = None, *, exact: bool = False) -> ByRole:
    return ByRole(role, name, exact)


def by_text(text: TextMatch, *, exact: bool = False) -> ByText:
    return ByText(text, exact)


def css(selector: str) -> ByCss:
    return ByCss(selector)
