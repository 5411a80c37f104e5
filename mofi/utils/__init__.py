from .mofi_io import toml_to_dict, read_file_as_text
from .os import (
    OSType,
    get_os,
    opener_command,
    shell_command,
    get_env,
    home_dir,
)
