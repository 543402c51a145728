import argparse
from argparse import ArgumentParser

from libnamekit.pipeline import LinkInputPolicy, PipelineGoal


def add_pipeline_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with pipeline options into given parser."""
    group = parser.add_argument_group("Pipeline", "Which toolchain stages to run")
    group.add_argument(
        "--goal",
        "-G",
        type=str,
        required=False,
        default=PipelineGoal.ASSEMBLE_RUN.value,
        choices=[goal.value for goal in PipelineGoal],
        help="Stage(s) to perform on each file, by default assembles, links and runs file in one go",
    )
    group.add_argument(
        "--link-inputs",
        type=str,
        required=False,
        dest="link_input_policy",
        default=LinkInputPolicy.DIRECTORY_GLOB.value,
        choices=[policy.value for policy in LinkInputPolicy],
        help="Which object files to link: every `.o` file in source directory (default) or only object file of given source",
    )


def add_toolchain_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with toolchain binaries options into given parser."""
    group = parser.add_argument_group("Toolchain", "Location and limits of NAME binaries")
    group.add_argument(
        "--bin-directory",
        "-B",
        type=str,
        required=False,
        dest="binary_directory",
        help="Directory with `name-as`, `name-ld`, `name-emu` binaries. Defaults to `NAMEKIT_BIN_DIRECTORY` environment variable or `./bin`",
    )
    group.add_argument(
        "--timeout",
        type=float,
        required=False,
        default=None,
        dest="tool_timeout",
        help="Seconds to wait for each tool before killing it, by default waits forever",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Logging and diagnostics")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from toolchain.",
    )
    group.add_argument(
        "-vv",
        "-###",
        required=False,
        dest="show_commands",
        action="store_true",
        help="If passed will display commands that toolchain performed.",
    )
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
