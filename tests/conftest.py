"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from mofi.types import MofiConfig


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Provide a fake home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def mofi_dir(home: Path) -> Path:
    """Provide the ~/.config/mofi directory inside the fake home."""
    config_dir = home / ".config" / "mofi"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def env(home: Path) -> dict[str, str]:
    """Environment mapping pointing HOME at the fake home."""
    return {"HOME": str(home)}


class FakeRunner:
    """Records argv instead of spawning processes."""

    def __init__(self, status: int = 0, error: Exception | None = None) -> None:
        self.status = status
        self.error = error
        self.calls: list[list[str]] = []

    def __call__(self, argv: list[str]) -> int:
        self.calls.append(argv)
        if self.error is not None:
            raise self.error
        return self.status


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


def config_with(aliases: dict[str, str] | None = None):
    """Config loader returning a fixed MofiConfig."""
    return lambda: MofiConfig(aliases=aliases)


def make_bundle(parent: Path, name: str) -> Path:
    bundle = parent / f"{name}.app"
    (bundle / "Contents").mkdir(parents=True)
    return bundle
