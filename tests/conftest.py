"""Shared fixtures for framewise unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from framewise.config import FramewiseConfig


# ---------------------------------------------------------------------------
# Fixture: shrink poll / retry sleeps so timing tests stay fast
# ---------------------------------------------------------------------------

@pytest.fixture
def fast_timings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Poll every 10ms and wait 10ms between attempts."""
    monkeypatch.setattr("framewise.engine.context_resolver.POLL_INTERVAL_MS", 10)
    monkeypatch.setattr("framewise.engine.action_executor.ActionExecutor.RETRY_DELAY_MS", 10)


# ---------------------------------------------------------------------------
# Fixture: keep FRAMEWISE_* variables from the developer's shell out of tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "HEADLESS",
        "NAVIGATION_TIMEOUT",
        "SELECTOR_TIMEOUT",
        "TYPING_DELAY",
        "DROPDOWN_ITEM_SELECTOR",
        "USER_AGENT",
    ):
        monkeypatch.delenv(f"FRAMEWISE_{name}", raising=False)


@pytest.fixture
def config() -> FramewiseConfig:
    """A config with a short selector budget for unit tests."""
    return FramewiseConfig(selector_timeout=200, typing_delay=5)


# ---------------------------------------------------------------------------
# Fixture: sample config YAML string
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_config_yaml() -> str:
    """Return a valid framewise.yaml as a string."""
    return """\
headless: false
navigation_timeout: 45000
selector_timeout: 8000
typing_delay: 30
dropdown_item_selector: ".my-popup li"
user_agent: "framewise-tests/1.0"
viewport:
  width: 1920
  height: 1080
snapshot_dir: debug
"""


@pytest.fixture
def config_file(tmp_path: Path, sample_config_yaml: str) -> Path:
    path = tmp_path / "framewise.yaml"
    path.write_text(sample_config_yaml, encoding="utf-8")
    return path
