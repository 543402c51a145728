"""Goals for CLI (e.g run pipeline, show version) as different goals that output different result."""

from typing import NoReturn

from namekit.cli.goals.pipeline import cli_perform_pipeline_goal
from namekit.cli.goals.version import cli_perform_version_goal
from namekit.cli.parser.arguments import CLIArguments


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into pipeline goal."""
    if args.version:
        return cli_perform_version_goal(args)
    return cli_perform_pipeline_goal(args)
