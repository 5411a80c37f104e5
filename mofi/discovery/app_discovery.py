import logging
import os
from pathlib import Path
from typing import Iterable

from mofi.types import AppInfo

logger = logging.getLogger(__name__)


# -------------------------
# Bundle discovery
# -------------------------

BUNDLE_SUFFIX = ".app"

APP_DIRS = [
    Path("/Applications"),
    Path("/System/Applications"),
    Path("/System/Library/CoreServices"),
]


def is_bundle(name: str) -> bool:
    return name.endswith(BUNDLE_SUFFIX)


def bundle_to_app(entry: os.DirEntry) -> AppInfo:
    return AppInfo(
        name=entry.name.removesuffix(BUNDLE_SUFFIX),
        path=os.path.abspath(entry.path),
    )


def _list_dir(path: Path) -> list[os.DirEntry] | None:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", path, e)
        return None


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _has_usable_name(entry: os.DirEntry) -> bool:
    # Undecodable names come back surrogate-escaped and are not reported.
    try:
        entry.name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def find_apps_recursive(
    directory: Path,
    apps: list[AppInfo],
    _ancestors: frozenset[str] = frozenset(),
) -> None:
    """
    Collect .app bundles under directory into apps.

    Bundles are never descended into. A plain subdirectory is checked one
    level deep; it is searched further only when none of its immediate
    children is a bundle.
    """
    entries = _list_dir(directory)
    if entries is None:
        return

    ancestors = _ancestors | {os.path.realpath(directory)}

    for entry in entries:
        if not _has_usable_name(entry):
            continue

        if is_bundle(entry.name):
            apps.append(bundle_to_app(entry))
            continue

        if entry.name.startswith(".") or not _is_dir(entry):
            continue

        subpath = Path(entry.path)
        subentries = _list_dir(subpath)
        if subentries is None:
            continue

        has_app = False
        for subentry in subentries:
            if _has_usable_name(subentry) and is_bundle(subentry.name):
                has_app = True
                apps.append(bundle_to_app(subentry))

        # Only search deeper when this directory held no bundles itself
        if has_app:
            continue

        if os.path.realpath(subpath) in ancestors:
            logger.debug("Skipping directory cycle at %s", subpath)
            continue

        find_apps_recursive(subpath, apps, ancestors)


def list_apps(roots: Iterable[Path] | None = None) -> list[AppInfo]:
    """
    Discover application bundles under the standard roots, sorted by name.
    Never fails; unreadable roots just contribute nothing.
    """
    apps: list[AppInfo] = []

    for root in (APP_DIRS if roots is None else roots):
        find_apps_recursive(Path(root), apps)

    apps.sort(key=lambda app: app.name)
    return apps


def find_app_by_name(name: str, apps: list[AppInfo]) -> AppInfo | None:
    for app in apps:
        if app.name == name:
            return app
    return None
