from __future__ import annotations

import sys
from pathlib import Path

from namekit.cli.errors.error_handler import cli_namekit_error_handler
from namekit.cli.goals import perform_desired_toolchain_goal
from namekit.cli.parser.builder import build_cli_parser
from namekit.cli.parser.parser import parse_cli_arguments

DEFAULT_PROGRAM_NAME = "namekit"


def cli_entry_point(prog: str | None = None) -> None:
    """CLI main entry, never returns as every goal exits with its own status."""
    parser = build_cli_parser(prog or cli_program_name(sys.argv[0]))
    args = parse_cli_arguments(parser.parse_args())

    with cli_namekit_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    ):
        perform_desired_toolchain_goal(args)


def cli_program_name(argv0: str) -> str:
    """Name to show in usage, `python -m namekit` shows as installed script would."""
    name = Path(argv0).name
    if not name or name == "__main__.py":
        return DEFAULT_PROGRAM_NAME
    return name


if __name__ == "__main__":
    cli_entry_point(prog=None)
