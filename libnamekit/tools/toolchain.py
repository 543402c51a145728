from typing import Final

from .arguments import (
    compose_assembler_arguments,
    compose_linker_arguments,
    compose_runtime_arguments,
)
from .spec import ToolSpec

ASSEMBLER: Final[ToolSpec] = ToolSpec(
    name="assembler",
    binary_name="name-as",
    channel="NAME-AS",
    compose_arguments=compose_assembler_arguments,
    success_message="File assembled successfully.",
    success_summary="Assembly was successful.",
    failure_summary="Assembly failed. Check output for details.",
)

LINKER: Final[ToolSpec] = ToolSpec(
    name="linker",
    binary_name="name-ld",
    channel="NAME-LD",
    compose_arguments=compose_linker_arguments,
    success_message="Files linked successfully.",
    success_summary="Linking was successful.",
    failure_summary="Linking failed. Check output for details.",
)

RUNTIME: Final[ToolSpec] = ToolSpec(
    name="emulator",
    binary_name="name-emu",
    channel="NAME-EMU",
    compose_arguments=compose_runtime_arguments,
    success_message="Program finished.",
    success_summary="Program finished successfully.",
    failure_summary="Program failed. Check output for details.",
    stdout_is_result=True,
    interactive_stdin=True,
)

TOOLCHAIN: Final[tuple[ToolSpec, ...]] = (ASSEMBLER, LINKER, RUNTIME)
