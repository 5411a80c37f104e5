from typing import Callable

from mofi.config import load_mofi_config
from mofi.types import ColorConfig, MofiConfig


def load_color_config(config_loader: Callable[[], MofiConfig] = load_mofi_config) -> ColorConfig:
    config = config_loader()
    return config.colors or ColorConfig()
