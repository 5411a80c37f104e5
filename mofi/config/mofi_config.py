import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping

from mofi.types import ColorConfig, MofiConfig
from mofi.utils import home_dir, read_file_as_text, toml_to_dict

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(".config") / "mofi"
CONFIG_FILE_NAME = "mofi.toml"
COLORS_FILE_NAME = "colors.toml"

ReadText = Callable[[Path], str]


def config_path(home: Path) -> Path:
    return home / CONFIG_DIR / CONFIG_FILE_NAME


def colors_path(home: Path) -> Path:
    return home / CONFIG_DIR / COLORS_FILE_NAME


def _read_toml(path: Path, read_text: ReadText) -> dict[str, Any] | None:
    """
    Read and decode a TOML file, or None if it is missing or unreadable.
    """
    try:
        contents = read_text(path)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None

    try:
        return toml_to_dict(contents)
    except tomllib.TOMLDecodeError as e:
        logger.debug("Could not parse %s: %s", path, e)
        return None


def _warn_on_alias_collisions(aliases: dict[str, str]) -> None:
    seen: dict[str, str] = {}
    for name in aliases:
        key = name.lower()
        if key in seen:
            logger.warning(
                "Alias %r is unreachable, %r matches the same name first", name, seen[key]
            )
            continue
        seen[key] = name


def load_primary_config(path: Path, read_text: ReadText = read_file_as_text) -> MofiConfig:
    data = _read_toml(path, read_text)
    if data is None:
        return MofiConfig()

    try:
        config = MofiConfig.from_dict(data)
    except ValueError as e:
        logger.debug("Ignoring invalid config %s: %s", path, e)
        return MofiConfig()

    if config.aliases:
        _warn_on_alias_collisions(config.aliases)

    return config


def load_legacy_colors(path: Path, read_text: ReadText = read_file_as_text) -> ColorConfig | None:
    data = _read_toml(path, read_text)
    if data is None:
        return None

    try:
        return ColorConfig.from_dict(data)
    except ValueError as e:
        logger.debug("Ignoring invalid colors file %s: %s", path, e)
        return None


def load_mofi_config(
    env: Mapping[str, str] | None = None,
    read_text: ReadText = read_file_as_text,
) -> MofiConfig:
    """
    Load ~/.config/mofi/mofi.toml, falling back to ~/.config/mofi/colors.toml
    for colors. Never raises: anything unreadable degrades to defaults.
    """
    home = home_dir(env)
    if home is None:
        logger.debug("HOME is not set, using default config")
        return MofiConfig()

    config = load_primary_config(config_path(home), read_text)

    if config.colors is None:
        config.colors = load_legacy_colors(colors_path(home), read_text)

    return config
