from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from libnamekit.pipeline import LinkInputPolicy, PipelineGoal
from libnamekit.tools import source_path_problem
from namekit.cli.output import cli_fatal_abort
from namekit.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Mapping

BINARY_DIRECTORY_ENVIRONMENT_VARIABLE = "NAMEKIT_BIN_DIRECTORY"
DEFAULT_BINARY_DIRECTORY = Path("bin")


def parse_cli_arguments(
    args: Namespace,
    environ: Mapping[str, str] = os.environ,
) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    version = bool(args.version)
    source_filepaths = _process_source_filepaths(args, required=not version)

    return CLIArguments(
        version=version,
        source_filepaths=source_filepaths,
        goal=PipelineGoal(args.goal),
        link_input_policy=LinkInputPolicy(args.link_input_policy),
        binary_directory=_process_binary_directory(args, environ),
        tool_timeout=_process_tool_timeout(args),
        verbose=bool(args.verbose) or bool(args.show_commands),
        show_commands=bool(args.show_commands),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_source_filepaths(args: Namespace, *, required: bool) -> list[Path]:
    """Validate and process source filepaths, they must exist as files."""
    source_filepaths = [Path(f) for f in args.source_files]
    if required and not source_filepaths:
        return cli_fatal_abort(
            "No input files specified! Pass at least one `.asm` file, see --help for usage",
        )
    for path in source_filepaths:
        if not path.is_file():
            return cli_fatal_abort(f"Input file `{path}` does not exist or not a file!")
        if problem := source_path_problem(path):
            return cli_fatal_abort(f"Input file `{path}` cannot be used: {problem}")
    return [p.absolute() for p in source_filepaths]


def _process_binary_directory(args: Namespace, environ: Mapping[str, str]) -> Path:
    """Infer toolchain binaries directory from CLI argument or environment.

    Resolved against current directory, as tools are spawned inside source directories.
    """
    if args.binary_directory:
        return Path(args.binary_directory).absolute()
    if environ.get(BINARY_DIRECTORY_ENVIRONMENT_VARIABLE):
        return Path(environ[BINARY_DIRECTORY_ENVIRONMENT_VARIABLE]).absolute()
    return DEFAULT_BINARY_DIRECTORY.absolute()


def _process_tool_timeout(args: Namespace) -> float | None:
    if args.tool_timeout is None:
        return None
    if args.tool_timeout <= 0:
        return cli_fatal_abort("Tool timeout must be positive number of seconds!")
    return float(args.tool_timeout)
