from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

ArgumentsComposer: TypeAlias = "Callable[[Sequence[Path], Path], list[str]]"


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Descriptor of an external toolchain tool (e.g assembler)."""

    # Logical name for messages (e.g `assembler`)
    name: str

    # Base name of an binary, platform specific naming is applied by resolver
    binary_name: str

    # Display channel where tool output is published to
    channel: str

    # Maps (input paths, output path) into argv (without binary itself)
    compose_arguments: ArgumentsComposer

    # Published on success, unless tool stdout is treated as result
    success_message: str

    # Short summary returned to caller on success / failure
    success_summary: str
    failure_summary: str

    # Runtime (emulator) output is the program output itself
    stdout_is_result: bool = False

    # Inherit standard input of the caller (programs may read from it)
    interactive_stdin: bool = False
