# -*- coding: utf-8 -*-
"""Entry point of the ``bcr`` command line tool.

Subcommands are looked up in the ``bcr_lib.actions`` entry point group, so
``bcr info -i surface.bcr`` calls ``bcr_lib.commands.info:info`` with the
remaining arguments. The subcommand's return value becomes the exit code.
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import entry_points

import bcr_lib


def run(argv: list[str] | None = None) -> int:
    """Dispatch ``argv`` to a registered subcommand and return its exit code."""
    actions = entry_points(group="bcr_lib.actions")

    parser = argparse.ArgumentParser(
        prog="bcr",
        description="Inspect and convert BCR surface topography files",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {bcr_lib.__version__}",
    )
    parser.add_argument("command", choices=sorted(actions.names))
    parser.add_argument("args", help=argparse.SUPPRESS, nargs=argparse.REMAINDER)

    args = parser.parse_args(argv)

    action = actions[args.command].load()
    return action(args.args)


def main() -> None:
    sys.exit(run())
