"""NameKit core library.

Drives the NAME toolchain (assembler, linker, emulator) as external processes:
resolves tool binaries per host, spawns and classifies them, and chains them
into a single assemble -> link -> run pipeline.
"""

from .invoker import Failure, NotFound, Success, ToolInvoker
from .pipeline import PipelineCoordinator

__all__ = [
    "Failure",
    "NotFound",
    "PipelineCoordinator",
    "Success",
    "ToolInvoker",
]
