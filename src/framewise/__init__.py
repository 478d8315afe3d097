"""framewise -- resilient element interaction for Playwright pages with frames."""

from framewise.config import FramewiseConfig, FramewiseConfigError
from framewise.engine import ActionExecutor, ActionOptions, BrowserSession
from framewise.errors import (
    ActionFailed,
    InteractionError,
    ItemNotFoundError,
    NotFoundError,
    ResolutionTimeout,
    VisibilityTimeout,
)

__version__ = "0.1.0"

__all__ = [
    "ActionExecutor",
    "ActionFailed",
    "ActionOptions",
    "BrowserSession",
    "FramewiseConfig",
    "FramewiseConfigError",
    "InteractionError",
    "ItemNotFoundError",
    "NotFoundError",
    "ResolutionTimeout",
    "VisibilityTimeout",
    "__version__",
]
