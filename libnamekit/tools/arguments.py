"""Argument composers for toolchain binaries.

Binaries are called with literal argv (no shell), so no quoting is performed here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def compose_assembler_arguments(inputs: Sequence[Path], output: Path) -> list[str]:
    """`name-as <input.asm> <output.o>`."""
    assert len(inputs) == 1, "Assembler accepts exactly one input file"
    return [str(inputs[0]), str(output)]


def compose_linker_arguments(inputs: Sequence[Path], output: Path) -> list[str]:
    """`name-ld --output-filename <output> <input.o>...`."""
    return ["--output-filename", str(output), *map(str, inputs)]


def compose_runtime_arguments(inputs: Sequence[Path], output: Path) -> list[str]:
    """`name-emu <executable>`, emulator has no output file."""
    _ = output
    assert len(inputs) == 1, "Emulator runs exactly one executable"
    return [str(inputs[0])]
