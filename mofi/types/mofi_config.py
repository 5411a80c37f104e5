from dataclasses import dataclass, fields
from typing import Any


# -------------------------
# Colors
# -------------------------

@dataclass
class ColorConfig:
    background: str = "#1e1e2e"
    border: str = "#fab387"
    text: str = "#fab387"
    selected_bg: str = "#fab387"
    selected_text: str = "#1e1e2e"

    @classmethod
    def from_dict(cls, data: Any) -> "ColorConfig":
        """
        Build a ColorConfig from a decoded TOML table.
        All five fields are required strings; unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise ValueError("colors must be a table")

        values: dict[str, str] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if not isinstance(value, str):
                raise ValueError(f"colors.{f.name} must be a string")
            values[f.name] = value

        return cls(**values)


# -------------------------
# User configuration
# -------------------------

@dataclass
class MofiConfig:
    colors: ColorConfig | None = None
    aliases: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "MofiConfig":
        if not isinstance(data, dict):
            raise ValueError("config must be a table")

        colors = None
        if "colors" in data:
            colors = ColorConfig.from_dict(data["colors"])

        aliases = None
        if "aliases" in data:
            raw = data["aliases"]
            if not isinstance(raw, dict):
                raise ValueError("aliases must be a table")
            for name, command in raw.items():
                if not isinstance(command, str):
                    raise ValueError(f"aliases.{name} must be a string")
            aliases = dict(raw)

        return cls(colors=colors, aliases=aliases)
