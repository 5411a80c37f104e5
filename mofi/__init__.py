from .types import AppInfo, ColorConfig, MofiConfig, LaunchResult
from .discovery import list_apps
from .launcher import launch_app
from .theme import load_color_config
