"""Tests for theme loading."""

from pathlib import Path

import pytest

from mofi.theme import load_color_config
from mofi.types import ColorConfig, MofiConfig

LEGACY_COLORS = """
background = "#101010"
border = "#202020"
text = "#303030"
selected_bg = "#404040"
selected_text = "#505050"
"""


class TestLoadColorConfig:
    """Test suite for load_color_config."""

    def test_defaults_when_nothing_configured(self) -> None:
        """Test that the built-in theme is returned with no config."""
        assert load_color_config(lambda: MofiConfig()) == ColorConfig(
            background="#1e1e2e",
            border="#fab387",
            text="#fab387",
            selected_bg="#fab387",
            selected_text="#1e1e2e",
        )

    def test_configured_colors_returned(self) -> None:
        colors = ColorConfig(background="#ffffff")
        assert load_color_config(lambda: MofiConfig(colors=colors)) is colors

    def test_reads_home_config(
        self, monkeypatch: pytest.MonkeyPatch, home: Path, mofi_dir: Path
    ) -> None:
        """Test the default loader against a real HOME."""
        monkeypatch.setenv("HOME", str(home))
        (mofi_dir / "colors.toml").write_text(LEGACY_COLORS)

        assert load_color_config().selected_bg == "#404040"

    def test_defaults_with_empty_home(
        self, monkeypatch: pytest.MonkeyPatch, home: Path
    ) -> None:
        monkeypatch.setenv("HOME", str(home))

        assert load_color_config() == ColorConfig()

    def test_defaults_without_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOME", raising=False)

        assert load_color_config() == ColorConfig()
