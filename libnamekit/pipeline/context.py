from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from libnamekit.tools import executable_path_for, object_path_for

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class PipelineContext:
    """Paths of an single pipeline run, threaded through every stage.

    Never shared between concurrent runs.
    """

    source_path: Path
    object_path: Path
    executable_path: Path

    # Filled after object files discovery
    link_inputs: tuple[Path, ...] = field(default=())

    # Stage is part of an larger operation (e.g assemble-run)
    chained: bool = False

    @classmethod
    def from_source(cls, source_path: Path, *, chained: bool) -> PipelineContext:
        return cls(
            source_path=source_path,
            object_path=object_path_for(source_path),
            executable_path=executable_path_for(source_path),
            chained=chained,
        )

    @property
    def directory(self) -> Path:
        return self.source_path.parent

    def with_link_inputs(self, link_inputs: Iterable[Path]) -> PipelineContext:
        return replace(self, link_inputs=tuple(link_inputs))
