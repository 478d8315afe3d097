"""Browsing-context capability protocols.

These protocols describe the slice of Playwright's async ``Page``/``Frame``
surface the interaction engine relies on.  A Playwright ``Page`` (main
document) and ``Frame`` (nested document) both satisfy ``BrowsingContext``,
which is what lets the resolver and visibility gate treat them identically.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BrowsingContext(Protocol):
    """A queryable, scriptable document: the main page or one of its frames."""

    async def query_selector(self, selector: str) -> Any: ...

    async def wait_for_selector(self, selector: str, **kwargs: Any) -> Any: ...

    async def wait_for_function(self, expression: str, **kwargs: Any) -> Any: ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any: ...

    async def click(self, selector: str, **kwargs: Any) -> None: ...

    async def type(self, selector: str, text: str, **kwargs: Any) -> None: ...


@runtime_checkable
class Keyboard(Protocol):
    """Page-level keyboard; not scoped to any single frame."""

    async def press(self, key: str, **kwargs: Any) -> None: ...


@runtime_checkable
class InteractivePage(BrowsingContext, Protocol):
    """The top-level page: a browsing context that also owns frames and the keyboard."""

    @property
    def frames(self) -> list[Any]: ...

    @property
    def main_frame(self) -> Any: ...

    @property
    def keyboard(self) -> Keyboard: ...
