"""Centralized interaction defaults."""

# Timeouts (milliseconds)
DEFAULT_NAVIGATION_TIMEOUT_MS = 60_000
DEFAULT_SELECTOR_TIMEOUT_MS = 15_000

# Input pacing (milliseconds)
DEFAULT_TYPING_DELAY_MS = 50
DEFAULT_CLICK_DELAY_MS = 80
CLEAR_CLICK_DELAY_MS = 50

# Retry shell
DEFAULT_RETRIES = 2
RETRY_DELAY_MS = 400
POLL_INTERVAL_MS = 250

# Default viewport
DEFAULT_VIEWPORT = (1280, 720)

# Fallback list-item selectors for dropdown popups, in preference order
DROPDOWN_ITEM_SELECTORS = (
    ".lv-select-popup li",
    '[role="option"]',
    'li[role="option"]',
    "[data-value]",
)

# Characters of visible page text kept by debug snapshots
SNAPSHOT_TEXT_LIMIT = 800
