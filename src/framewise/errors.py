"""Interaction failures raised by the framewise engine."""

from __future__ import annotations

from collections.abc import Sequence


class InteractionError(Exception):
    """Base class for element interaction failures."""


class ResolutionTimeout(InteractionError, TimeoutError):
    """No candidate selector matched in any browsing context within the budget."""

    def __init__(self, candidates: Sequence[str], timeout: float) -> None:
        self.candidates = list(candidates)
        self.timeout = timeout
        super().__init__(
            f"Selector not found in page or frames after {timeout:g}ms: {' | '.join(self.candidates)}"
        )


# Resolution is the only place "not found" can happen before an action starts.
NotFoundError = ResolutionTimeout


class VisibilityTimeout(InteractionError, TimeoutError):
    """Element matched but never became visible within the budget."""

    def __init__(self, selector: str, timeout: float) -> None:
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Element never became visible after {timeout:g}ms: {selector}")


class ActionFailed(InteractionError):
    """The low-level click/type primitive raised after the element was resolved and visible."""

    def __init__(self, action: str, selector: str, reason: str) -> None:
        self.action = action
        self.selector = selector
        super().__init__(f"{action} failed on {selector}: {reason}")


class ItemNotFoundError(InteractionError, LookupError):
    """No dropdown item matched the requested text by any matching tier."""

    def __init__(self, item_text: str, selector: str | None = None) -> None:
        self.item_text = item_text
        self.selector = selector
        super().__init__(f'Dropdown item not found: "{item_text}"')
