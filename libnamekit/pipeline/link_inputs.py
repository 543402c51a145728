"""Selection of object files passed to linker.

Historically, linker receives every object file found near source file,
which silently includes stale or unrelated objects. Both strategies are kept
and chosen explicitly by caller.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from libnamekit.tools import OBJECT_FILE_SUFFIX

if TYPE_CHECKING:
    from pathlib import Path

    from libnamekit.host import HostCollaborator

    from .context import PipelineContext


class LinkInputPolicy(Enum):
    # Every object file in source directory
    DIRECTORY_GLOB = "directory"

    # Only object file produced for that source
    EXPLICIT_SET = "explicit"


def select_link_inputs(
    policy: LinkInputPolicy,
    context: PipelineContext,
    host: HostCollaborator,
) -> list[Path]:
    """Get object files to link for given pipeline context.

    Result is sorted by name so linker command is deterministic.
    Returns empty list if nothing suitable is found, validation is on caller.
    """
    match policy:
        case LinkInputPolicy.DIRECTORY_GLOB:
            return sorted(
                context.directory / filename
                for filename in host.list_directory(context.directory)
                if filename.endswith(OBJECT_FILE_SUFFIX)
            )
        case LinkInputPolicy.EXPLICIT_SET:
            if context.object_path.name not in host.list_directory(context.directory):
                return []
            return [context.object_path]
