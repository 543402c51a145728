from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """Single tool call, constructed per invocation and consumed once."""

    binary_directory: Path
    binary_path: Path
    arguments: tuple[str, ...]
    working_directory: Path | None = None

    @property
    def command(self) -> list[str]:
        return [str(self.binary_path), *self.arguments]
