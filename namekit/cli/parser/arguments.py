from dataclasses import dataclass
from pathlib import Path

from libnamekit.pipeline import LinkInputPolicy, PipelineGoal


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole NameKit toolchain process."""

    source_filepaths: list[Path]
    goal: PipelineGoal

    binary_directory: Path
    link_input_policy: LinkInputPolicy

    # Seconds to wait for each tool, None waits forever
    tool_timeout: float | None

    version: bool
    verbose: bool
    show_commands: bool
    cli_debug_user_friendly_errors: bool
