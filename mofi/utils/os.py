import os
import platform
from enum import Enum
from pathlib import Path
from typing import Mapping


class OSType(Enum):
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    UNKNOWN = "unknown"


def get_os() -> OSType:
    system = platform.system().lower()

    if system == "darwin":
        return OSType.MACOS
    elif system == "windows":
        return OSType.WINDOWS
    elif system == "linux":
        return OSType.LINUX
    else:
        return OSType.UNKNOWN


def opener_command(path: str, os_type: OSType | None = None) -> list[str]:
    """
    Argv that hands a path to the platform's default "open" handler.
    Unknown platforms get the macOS opener.
    """
    os_type = os_type or get_os()

    if os_type == OSType.WINDOWS:
        return ["cmd", "/c", "start", "", path]

    if os_type == OSType.LINUX:
        return ["xdg-open", path]

    return ["open", path]


def shell_command(command: str, os_type: OSType | None = None) -> list[str]:
    """
    Argv that runs a command string through the system shell.
    """
    os_type = os_type or get_os()

    if os_type == OSType.WINDOWS:
        return ["cmd", "/c", command]

    return ["sh", "-c", command]


def get_env(env: str) -> str | None:
    return os.environ.get(env)


def home_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """
    Home directory taken from HOME, or None when it is not set.
    """
    home = get_env("HOME") if env is None else env.get("HOME")
    if home is None:
        return None
    return Path(home)
