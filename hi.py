#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from mofi.config import colors_path, config_path, load_mofi_config
from mofi.discovery import find_app_by_name, list_apps
from mofi.launcher import find_alias, launch_app
from mofi.theme import load_color_config
from mofi.types import AppInfo
from mofi.utils import home_dir


def apps_to_json(apps: list[AppInfo]) -> str:
    def encode(a: AppInfo) -> dict[str, Any]:
        return {"name": a.name, "path": a.path}
    return json.dumps([encode(a) for a in apps], indent=2)


def print_apps(apps: list[AppInfo]) -> None:
    for a in apps:
        print(f"- {a.name} @ {a.path}")


def _roots(args: argparse.Namespace) -> list[Path] | None:
    if not args.root:
        return None
    return [Path(r).expanduser() for r in args.root]


# -----------------------------
# CLI commands
#------------------------------
def cmd_apps(args: argparse.Namespace) -> int:
    apps = list_apps(_roots(args))

    if args.json:
        print(apps_to_json(apps))
        return 0

    if not apps:
        print("(no apps found)")
        return 0

    print_apps(apps)
    return 0


def cmd_launch(args: argparse.Namespace) -> int:
    path = args.path
    if path is None:
        # An alias never needs the bundle path, so skip the scan
        if find_alias(load_mofi_config().aliases, args.name) is not None:
            path = ""
        else:
            app = find_app_by_name(args.name, list_apps(_roots(args)))
            path = app.path if app else ""

    result = launch_app(path, args.name)
    print(result.message)
    return 0 if result.ok else 1


def cmd_theme(args: argparse.Namespace) -> int:
    colors = load_color_config()

    if args.json:
        print(json.dumps(asdict(colors), indent=2))
        return 0

    for key, value in asdict(colors).items():
        print(f"{key:<14}{value}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    home = home_dir()
    if home is None:
        print("HOME is not set; using built-in defaults.")
        return 0

    for p in (config_path(home), colors_path(home)):
        status = "found  " if p.exists() else "missing"
        print(f"[{status}] {p}")

    aliases = load_mofi_config().aliases or {}
    if not aliases:
        print("(no aliases configured)")
        return 0

    print("Aliases:")
    for name, command in aliases.items():
        print(f"- {name}: {command}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mofi-hi", description="Mofi launcher backend (CLI-first).")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    pa = sub.add_parser("apps", help="List discovered application bundles.")
    pa.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable output.")
    pa.add_argument("--root", action="append", default=[], help="Scan this directory instead of the defaults.")
    pa.set_defaults(func=cmd_apps)

    pl = sub.add_parser("launch", help="Launch an app by name, honoring configured aliases.")
    pl.add_argument("name")
    pl.add_argument("path", nargs="?", default=None, help="Bundle path; looked up by name when omitted.")
    pl.add_argument("--root", action="append", default=[], help="Scan this directory when looking up the path.")
    pl.set_defaults(func=cmd_launch)

    pt = sub.add_parser("theme", help="Show the resolved color theme.")
    pt.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable output.")
    pt.set_defaults(func=cmd_theme)

    sub.add_parser("config", help="Show config file locations and aliases.").set_defaults(func=cmd_config)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
