"""Unit tests for framewise.config -- FramewiseConfig and related functions."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from framewise.config import CONFIG_FILENAME, FramewiseConfig, FramewiseConfigError, find_config_file
from framewise.models import (
    DEFAULT_NAVIGATION_TIMEOUT_MS,
    DEFAULT_SELECTOR_TIMEOUT_MS,
    DEFAULT_TYPING_DELAY_MS,
    DEFAULT_VIEWPORT,
)


# ---------------------------------------------------------------------------
# 1. Default values
# ---------------------------------------------------------------------------

class TestFramewiseConfigDefaults:

    def test_timing_defaults_match_models(self):
        cfg = FramewiseConfig()
        assert cfg.navigation_timeout == DEFAULT_NAVIGATION_TIMEOUT_MS
        assert cfg.selector_timeout == DEFAULT_SELECTOR_TIMEOUT_MS
        assert cfg.typing_delay == DEFAULT_TYPING_DELAY_MS

    def test_browser_defaults(self):
        cfg = FramewiseConfig()
        assert cfg.headless is True
        assert cfg.user_agent is None
        assert cfg.viewport == DEFAULT_VIEWPORT

    def test_no_dropdown_override_by_default(self):
        assert FramewiseConfig().dropdown_item_selector is None


# ---------------------------------------------------------------------------
# 2. from_file()
# ---------------------------------------------------------------------------

class TestFromFile:

    def test_loads_every_field(self, config_file: Path):
        cfg = FramewiseConfig.from_file(config_file)

        assert cfg.headless is False
        assert cfg.navigation_timeout == 45000
        assert cfg.selector_timeout == 8000
        assert cfg.typing_delay == 30
        assert cfg.dropdown_item_selector == ".my-popup li"
        assert cfg.user_agent == "framewise-tests/1.0"
        assert cfg.viewport == (1920, 1080)
        assert cfg.project_dir == config_file.parent
        assert cfg.snapshot_dir == config_file.parent / "debug"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "framewise.yaml"
        path.write_text("", encoding="utf-8")

        cfg = FramewiseConfig.from_file(path)

        assert cfg.selector_timeout == DEFAULT_SELECTOR_TIMEOUT_MS
        assert cfg.snapshot_dir == tmp_path / "snapshots"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FramewiseConfigError, match="Config file not found"):
            FramewiseConfig.from_file(tmp_path / "nope.yaml")

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "framewise.yaml"
        path.write_text(yaml.dump(["a", "b"]), encoding="utf-8")

        with pytest.raises(FramewiseConfigError, match="mapping"):
            FramewiseConfig.from_file(path)

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "framewise.yaml"
        path.write_text("headless: [unclosed", encoding="utf-8")

        with pytest.raises(FramewiseConfigError, match="Invalid YAML"):
            FramewiseConfig.from_file(path)

    @pytest.mark.parametrize(
        "content",
        [
            "selector_timeout: soon\n",
            "typing_delay: -5\n",
            "headless: maybe\n",
            "viewport: 1280x720\n",
            "navigation_timeout: true\n",
        ],
    )
    def test_invalid_values_raise(self, tmp_path: Path, content: str):
        path = tmp_path / "framewise.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(FramewiseConfigError):
            FramewiseConfig.from_file(path)

    @pytest.mark.parametrize("key", ["selector_timeout", "navigation_timeout"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_timeouts_must_be_positive(self, tmp_path: Path, key: str, value: int):
        path = tmp_path / "framewise.yaml"
        path.write_text(f"{key}: {value}\n", encoding="utf-8")

        with pytest.raises(FramewiseConfigError, match=key):
            FramewiseConfig.from_file(path)

    def test_zero_typing_delay_accepted(self, tmp_path: Path):
        path = tmp_path / "framewise.yaml"
        path.write_text("typing_delay: 0\n", encoding="utf-8")

        assert FramewiseConfig.from_file(path).typing_delay == 0

    def test_string_booleans_accepted(self, tmp_path: Path):
        path = tmp_path / "framewise.yaml"
        path.write_text('headless: "off"\n', encoding="utf-8")

        assert FramewiseConfig.from_file(path).headless is False


# ---------------------------------------------------------------------------
# 3. Environment overrides
# ---------------------------------------------------------------------------

class TestApplyEnv:

    def test_env_overrides_file_values(self, config_file: Path):
        cfg = FramewiseConfig.from_file(config_file).apply_env(
            {
                "FRAMEWISE_HEADLESS": "1",
                "FRAMEWISE_SELECTOR_TIMEOUT": "2500",
                "FRAMEWISE_NAVIGATION_TIMEOUT": "9000",
                "FRAMEWISE_TYPING_DELAY": "0",
                "FRAMEWISE_DROPDOWN_ITEM_SELECTOR": "ul.menu > li",
                "FRAMEWISE_USER_AGENT": "Bot/2",
            }
        )

        assert cfg.headless is True
        assert cfg.selector_timeout == 2500
        assert cfg.navigation_timeout == 9000
        assert cfg.typing_delay == 0
        assert cfg.dropdown_item_selector == "ul.menu > li"
        assert cfg.user_agent == "Bot/2"

    def test_unset_env_leaves_values(self):
        cfg = FramewiseConfig(selector_timeout=123).apply_env({})
        assert cfg.selector_timeout == 123

    def test_bad_env_value_raises(self):
        with pytest.raises(FramewiseConfigError, match="FRAMEWISE_SELECTOR_TIMEOUT"):
            FramewiseConfig().apply_env({"FRAMEWISE_SELECTOR_TIMEOUT": "fast"})

    @pytest.mark.parametrize("name", ["FRAMEWISE_SELECTOR_TIMEOUT", "FRAMEWISE_NAVIGATION_TIMEOUT"])
    def test_zero_env_timeout_raises(self, name: str):
        with pytest.raises(FramewiseConfigError, match=f"{name} must be at least 1"):
            FramewiseConfig().apply_env({name: "0"})

    def test_load_reads_process_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("FRAMEWISE_TYPING_DELAY", "12")

        assert FramewiseConfig.load().typing_delay == 12


# ---------------------------------------------------------------------------
# 4. Discovery
# ---------------------------------------------------------------------------

class TestLoadDiscovery:

    def test_finds_file_in_parent(self, tmp_path: Path, config_file: Path, monkeypatch: pytest.MonkeyPatch):
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_config_file() == config_file
        assert FramewiseConfig.load().selector_timeout == 8000

    def test_no_file_gives_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)

        cfg = FramewiseConfig.load()

        assert cfg.selector_timeout == DEFAULT_SELECTOR_TIMEOUT_MS
        assert cfg.snapshot_dir == cfg.project_dir / "snapshots"

    def test_explicit_path_must_exist(self, tmp_path: Path):
        with pytest.raises(FramewiseConfigError):
            FramewiseConfig.load(tmp_path / CONFIG_FILENAME)
