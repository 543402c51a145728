from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path


class FailureKind(Enum):
    """Why an invocation (or whole pipeline) failed."""

    # Tool ran and wrote something into its error stream
    TOOL_FAILURE = auto()

    # Operating system refused to start an process
    SPAWN_ERROR = auto()

    # Tool did not finish in time and was killed
    TIMEOUT = auto()

    # No binary naming known for current host
    UNSUPPORTED_PLATFORM = auto()

    # Pipeline preconditions
    NO_ACTIVE_FILE = auto()
    INVALID_SOURCE = auto()
    DISCOVERY_EMPTY = auto()


@dataclass(frozen=True, slots=True)
class Success:
    message: str

    # Captured standard output of an tool (e.g program output for emulator)
    output: str = ""
    exit_code: int = 0


@dataclass(frozen=True, slots=True)
class Failure:
    reason: str
    captured_stderr: str = ""
    kind: FailureKind = FailureKind.TOOL_FAILURE

    # Short text for notifications, falls back to reason
    summary: str | None = None

    @property
    def notification(self) -> str:
        return self.summary or self.reason


@dataclass(frozen=True, slots=True)
class NotFound:
    expected_path: Path


Outcome: TypeAlias = Success | Failure | NotFound


def outcome_summary(outcome: Outcome) -> str:
    """Human-readable one-liner suitable for an notification."""
    match outcome:
        case Success(message=message):
            return message
        case Failure():
            return outcome.notification
        case NotFound(expected_path=expected_path):
            return f"Tool binary not found at path: {expected_path}"
