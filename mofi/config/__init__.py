from .mofi_config import (
    config_path,
    colors_path,
    load_primary_config,
    load_legacy_colors,
    load_mofi_config,
)
