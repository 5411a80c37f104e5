import logging
import os
import subprocess
from typing import Callable

from mofi.config import load_mofi_config
from mofi.types import LaunchResult, MofiConfig
from mofi.utils import opener_command, shell_command

logger = logging.getLogger(__name__)

# argv -> exit status. Raises OSError, or ValueError for an unusable argv,
# when the process cannot be spawned.
ProcessRunner = Callable[[list[str]], int]
ConfigLoader = Callable[[], MofiConfig]


def run_process(argv: list[str]) -> int:
    """
    Run argv and wait for it to exit. Only the launcher process is waited
    on, not whatever application it starts.
    """
    return subprocess.run(argv, check=False).returncode


# -------------------------
# Alias resolution
# -------------------------

def find_alias(aliases: dict[str, str] | None, app_name: str) -> str | None:
    """
    Command of the first alias whose name matches app_name ignoring case.
    """
    if not aliases:
        return None

    wanted = app_name.lower()
    for name, command in aliases.items():
        if name.lower() == wanted:
            return command
    return None


def run_alias_command(command: str, runner: ProcessRunner = run_process) -> LaunchResult:
    logger.debug("Running alias command: %s", command)
    try:
        status = runner(shell_command(command))
    except (OSError, ValueError) as e:
        return LaunchResult.failure(f"Failed to run alias command: {e}")

    if status == 0:
        return LaunchResult.success("Command executed successfully")
    return LaunchResult.failure("Alias command failed: exited with non-zero code")


# -------------------------
# Launch entrypoint
# -------------------------

def open_app(app_path: str, runner: ProcessRunner = run_process) -> LaunchResult:
    if not os.path.exists(app_path):
        return LaunchResult.failure(f"App not found at '{app_path}'")

    logger.debug("Opening %s", app_path)
    try:
        status = runner(opener_command(app_path))
    except (OSError, ValueError) as e:
        return LaunchResult.failure(f"Failed to launch app: {e}")

    if status == 0:
        return LaunchResult.success("App opened successfully")
    return LaunchResult.failure("Failed to open app: exited with non-zero code")


def launch_app(
    app_path: str,
    app_name: str,
    runner: ProcessRunner = run_process,
    config_loader: ConfigLoader = load_mofi_config,
) -> LaunchResult:
    """
    Launch app_name: a matching alias wins, otherwise app_path is opened
    with the platform opener. Failures come back as a LaunchResult.
    """
    config = config_loader()

    command = find_alias(config.aliases, app_name)
    if command is not None:
        return run_alias_command(command, runner)

    return open_app(app_path, runner)
