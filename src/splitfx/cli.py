"""Command line interface for creating a SplitFXM++ app from the template."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence

from .config import ScaffoldSettings
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder

PROMPT = "Your app name (PascalCase, e.g. MyCoolApp): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-splitfxmpp-app",
        description="Create a new SplitFXM++ app from the AppFXMpp template",
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Name of the new app; prompted for when omitted",
    )
    return parser


def _ask_name() -> str:
    try:
        return input(PROMPT)
    except EOFError:
        return ""


def _print_progress(message: str) -> None:
    print(message, flush=True)


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    environment: Mapping[str, str] = env if env is not None else os.environ
    try:
        settings = ScaffoldSettings.from_env(environment)
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    name = args.name if args.name is not None else _ask_name()
    scaffolder = ProjectScaffolder.from_settings(settings, progress=_print_progress)
    try:
        project_path = scaffolder.create(name, Path.cwd())
    except (ScaffoldError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("\nYour app scaffold is ready!")
    print(f"\n  cd {project_path.name}")
    print("Initialize git, install deps, and start building!")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
