"""framewise engine -- resilient element interaction.

Provides:
- resolve / ResolvedTarget: find the first matching selector in the page or any frame
- await_visible: wait until a matched element is rendered and not hidden
- ensure_in_view: best-effort scroll to center
- ActionExecutor: retryable click, type and dropdown selection
- BrowserSession: Playwright launch, navigation and teardown
- debug_snapshot: screenshot + visible text capture
"""

from framewise.engine.action_executor import ActionExecutor, ActionOptions
from framewise.engine.browser_runner import BrowserSession, navigate_to_url
from framewise.engine.context_resolver import ResolvedTarget, resolve
from framewise.engine.diagnostics import DebugSnapshot, debug_snapshot
from framewise.engine.scroll_stabilizer import ensure_in_view
from framewise.engine.visibility_gate import await_visible

__all__ = [
    "ActionExecutor",
    "ActionOptions",
    "BrowserSession",
    "DebugSnapshot",
    "ResolvedTarget",
    "await_visible",
    "debug_snapshot",
    "ensure_in_view",
    "navigate_to_url",
    "resolve",
]
