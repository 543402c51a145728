"""Toolchain tools (assembler, linker, emulator) descriptors."""

from .paths import (
    OBJECT_FILE_SUFFIX,
    SOURCE_FILE_SUFFIX,
    executable_path_for,
    object_path_for,
    source_path_problem,
)
from .spec import ToolSpec
from .toolchain import ASSEMBLER, LINKER, RUNTIME, TOOLCHAIN

__all__ = [
    "ASSEMBLER",
    "LINKER",
    "OBJECT_FILE_SUFFIX",
    "RUNTIME",
    "SOURCE_FILE_SUFFIX",
    "TOOLCHAIN",
    "ToolSpec",
    "executable_path_for",
    "object_path_for",
    "source_path_problem",
]
