"""Tool invoker and outcomes of an single tool invocation."""

from .invoker import ToolInvoker
from .outcome import (
    Failure,
    FailureKind,
    NotFound,
    Outcome,
    Success,
    outcome_summary,
)
from .request import InvocationRequest

__all__ = [
    "Failure",
    "FailureKind",
    "InvocationRequest",
    "NotFound",
    "Outcome",
    "Success",
    "ToolInvoker",
    "outcome_summary",
]
