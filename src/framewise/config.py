"""framewise configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from framewise.models import (
    DEFAULT_NAVIGATION_TIMEOUT_MS,
    DEFAULT_SELECTOR_TIMEOUT_MS,
    DEFAULT_TYPING_DELAY_MS,
    DEFAULT_VIEWPORT,
)

CONFIG_FILENAME = "framewise.yaml"
ENV_PREFIX = "FRAMEWISE_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class FramewiseConfigError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


@dataclass
class FramewiseConfig:
    """Configuration for a framewise browser session."""

    # Browser
    headless: bool = True
    user_agent: str | None = None
    viewport: tuple[int, int] = DEFAULT_VIEWPORT

    # Timing (milliseconds)
    navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    selector_timeout: int = DEFAULT_SELECTOR_TIMEOUT_MS
    typing_delay: int = DEFAULT_TYPING_DELAY_MS

    # Selectors
    dropdown_item_selector: str | None = None

    # Paths
    project_dir: Path = field(default_factory=Path.cwd)
    snapshot_dir: Path = field(default_factory=lambda: Path("snapshots"))

    @classmethod
    def load(cls, config_path: Path | None = None) -> FramewiseConfig:
        """Resolve the effective config.

        Resolution order (highest priority first):
        1. FRAMEWISE_* environment variables
        2. The explicit ``config_path``, or framewise.yaml found upward from cwd
        3. Built-in defaults
        """
        if config_path is not None:
            config = cls.from_file(config_path)
        else:
            found = find_config_file()
            if found is not None:
                config = cls.from_file(found)
            else:
                config = cls()
                config.snapshot_dir = config.project_dir / "snapshots"
        return config.apply_env()

    @classmethod
    def from_file(cls, config_path: Path) -> FramewiseConfig:
        """Load config from a YAML file."""
        if not config_path.exists():
            raise FramewiseConfigError(
                f"Config file not found: {config_path}\n\n"
                f"To fix: create {CONFIG_FILENAME} or drop the --config option"
            )
        with open(config_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise FramewiseConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise FramewiseConfigError(f"Config file must contain a mapping: {config_path}")
        return cls._from_dict(data, config_path.parent)

    @classmethod
    def _from_dict(cls, data: dict[str, Any], project_dir: Path) -> FramewiseConfig:
        """Create config from a dictionary."""
        config = cls()
        config.project_dir = project_dir

        if "snapshot_dir" in data:
            config.snapshot_dir = project_dir / data["snapshot_dir"]
        else:
            config.snapshot_dir = project_dir / "snapshots"

        if "headless" in data:
            config.headless = _parse_bool("headless", data["headless"])
        if "navigation_timeout" in data:
            config.navigation_timeout = _parse_ms("navigation_timeout", data["navigation_timeout"], minimum=1)
        if "selector_timeout" in data:
            config.selector_timeout = _parse_ms("selector_timeout", data["selector_timeout"], minimum=1)
        if "typing_delay" in data:
            config.typing_delay = _parse_ms("typing_delay", data["typing_delay"])
        if data.get("dropdown_item_selector"):
            config.dropdown_item_selector = str(data["dropdown_item_selector"])
        if data.get("user_agent"):
            config.user_agent = str(data["user_agent"])
        if "viewport" in data:
            vp = data["viewport"]
            if not isinstance(vp, dict):
                raise FramewiseConfigError("viewport must be a mapping with width and height")
            config.viewport = (
                _parse_ms("viewport.width", vp.get("width", DEFAULT_VIEWPORT[0])),
                _parse_ms("viewport.height", vp.get("height", DEFAULT_VIEWPORT[1])),
            )

        return config

    def apply_env(self, environ: dict[str, str] | None = None) -> FramewiseConfig:
        """Override fields from FRAMEWISE_* environment variables. Returns self."""
        env = os.environ if environ is None else environ

        if (value := env.get(f"{ENV_PREFIX}HEADLESS")) is not None:
            self.headless = _parse_bool(f"{ENV_PREFIX}HEADLESS", value)
        if (value := env.get(f"{ENV_PREFIX}NAVIGATION_TIMEOUT")) is not None:
            self.navigation_timeout = _parse_ms(f"{ENV_PREFIX}NAVIGATION_TIMEOUT", value, minimum=1)
        if (value := env.get(f"{ENV_PREFIX}SELECTOR_TIMEOUT")) is not None:
            self.selector_timeout = _parse_ms(f"{ENV_PREFIX}SELECTOR_TIMEOUT", value, minimum=1)
        if (value := env.get(f"{ENV_PREFIX}TYPING_DELAY")) is not None:
            self.typing_delay = _parse_ms(f"{ENV_PREFIX}TYPING_DELAY", value)
        if value := env.get(f"{ENV_PREFIX}DROPDOWN_ITEM_SELECTOR"):
            self.dropdown_item_selector = value
        if value := env.get(f"{ENV_PREFIX}USER_AGENT"):
            self.user_agent = value

        return self


def find_config_file(start: Path | None = None) -> Path | None:
    """Locate framewise.yaml by searching upward from ``start`` (default: cwd)."""
    current = start or Path.cwd()
    for base in [current, *current.parents]:
        candidate = base / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise FramewiseConfigError(f"{name} must be a boolean, got {value!r}")


def _parse_ms(name: str, value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise FramewiseConfigError(f"{name} must be a number, got {value!r}")
    try:
        number = int(float(value))
    except (TypeError, ValueError):
        raise FramewiseConfigError(f"{name} must be a number, got {value!r}") from None
    if number < minimum:
        if minimum == 0:
            raise FramewiseConfigError(f"{name} must not be negative, got {number}")
        raise FramewiseConfigError(f"{name} must be at least {minimum}, got {number}")
    return number
