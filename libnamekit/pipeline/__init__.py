"""Pipeline (assemble -> link -> run) orchestration."""

from .context import PipelineContext
from .coordinator import PipelineCoordinator, PipelineGoal
from .link_inputs import LinkInputPolicy, select_link_inputs

__all__ = [
    "LinkInputPolicy",
    "PipelineContext",
    "PipelineCoordinator",
    "PipelineGoal",
    "select_link_inputs",
]
