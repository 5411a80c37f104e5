from .appinfo import AppInfo
from .mofi_config import ColorConfig, MofiConfig
from .launch_result import LaunchResult
