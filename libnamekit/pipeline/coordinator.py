"""Pipeline coordinator, chains assembler -> linker -> emulator for an single source file."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, assert_never

from libnamekit.invoker import Failure, FailureKind, Success, outcome_summary
from libnamekit.tools import ASSEMBLER, LINKER, RUNTIME, source_path_problem

from .context import PipelineContext
from .link_inputs import LinkInputPolicy, select_link_inputs

if TYPE_CHECKING:
    from pathlib import Path

    from libnamekit.host import HostCollaborator
    from libnamekit.invoker import Outcome, ToolInvoker


class PipelineGoal(Enum):
    ASSEMBLE = "assemble"
    LINK = "link"
    RUN = "run"
    ASSEMBLE_RUN = "assemble-run"


class PipelineCoordinator:
    """Runs toolchain stages either standalone or chained as one operation.

    Stages are strictly sequential and first non-successful outcome stops the chain.
    In chained mode only final stage (emulator) reveals its channel.
    """

    def __init__(
        self,
        invoker: ToolInvoker,
        host: HostCollaborator,
        binary_directory: Path,
        *,
        link_input_policy: LinkInputPolicy = LinkInputPolicy.DIRECTORY_GLOB,
    ) -> None:
        self.invoker = invoker
        self.host = host
        self.binary_directory = binary_directory
        self.link_input_policy = link_input_policy

    async def run_pipeline(self, source: Path) -> Outcome:
        """Assemble, link and run given source file as one operation."""
        context = self._context_for(source, chained=True)
        if isinstance(context, Failure):
            return context

        outcome = await self._assemble(context)
        if not isinstance(outcome, Success):
            return outcome

        context, outcome = self._discover_link_inputs(context)
        if not isinstance(outcome, Success):
            return outcome

        outcome = await self._link(context)
        if not isinstance(outcome, Success):
            return outcome

        # Final stage always surfaces its own result
        return await self._run(context)

    async def assemble_only(self, source: Path) -> Outcome:
        context = self._context_for(source, chained=False)
        if isinstance(context, Failure):
            return context
        return await self._assemble(context)

    async def link_only(self, source: Path) -> Outcome:
        context = self._context_for(source, chained=False)
        if isinstance(context, Failure):
            return context
        context, outcome = self._discover_link_inputs(context)
        if not isinstance(outcome, Success):
            return outcome
        return await self._link(context)

    async def run_only(self, source: Path) -> Outcome:
        context = self._context_for(source, chained=False)
        if isinstance(context, Failure):
            return context
        return await self._run(context)

    async def perform_goal(self, goal: PipelineGoal, source: Path) -> Outcome:
        match goal:
            case PipelineGoal.ASSEMBLE:
                return await self.assemble_only(source)
            case PipelineGoal.LINK:
                return await self.link_only(source)
            case PipelineGoal.RUN:
                return await self.run_only(source)
            case PipelineGoal.ASSEMBLE_RUN:
                return await self.run_pipeline(source)
            case _:
                assert_never(goal)

    async def run_current_file(self, goal: PipelineGoal) -> Outcome:
        """Perform goal on file currently opened in host and notify host with result."""
        source = self.host.get_current_file()
        if source is None:
            outcome: Outcome = Failure(
                reason="No file open.",
                kind=FailureKind.NO_ACTIVE_FILE,
            )
        else:
            outcome = await self.perform_goal(goal, source)

        if isinstance(outcome, Success):
            self.host.show_info(outcome_summary(outcome))
        else:
            self.host.show_error(outcome_summary(outcome))
        return outcome

    def _context_for(self, source: Path, *, chained: bool) -> PipelineContext | Failure:
        """Derive stage paths, refusing sources which derived paths would overwrite."""
        if problem := source_path_problem(source):
            return Failure(
                reason=f"Cannot use `{source.name}` as source: {problem}.",
                kind=FailureKind.INVALID_SOURCE,
            )
        return PipelineContext.from_source(source, chained=chained)

    async def _assemble(self, context: PipelineContext) -> Outcome:
        return await self.invoker.invoke(
            self.binary_directory,
            ASSEMBLER,
            [context.source_path],
            context.object_path,
            suppress_reveal=context.chained,
            working_directory=context.directory,
        )

    async def _link(self, context: PipelineContext) -> Outcome:
        return await self.invoker.invoke(
            self.binary_directory,
            LINKER,
            context.link_inputs,
            context.executable_path,
            suppress_reveal=context.chained,
            working_directory=context.directory,
        )

    async def _run(self, context: PipelineContext) -> Outcome:
        return await self.invoker.invoke(
            self.binary_directory,
            RUNTIME,
            [context.executable_path],
            context.executable_path,
            suppress_reveal=False,
            working_directory=context.directory,
        )

    def _discover_link_inputs(
        self,
        context: PipelineContext,
    ) -> tuple[PipelineContext, Outcome]:
        """Select linker inputs, fails when own object file is not within them."""
        try:
            link_inputs = select_link_inputs(self.link_input_policy, context, self.host)
        except OSError as e:
            reason = f"Cannot list object files in `{context.directory}`: {e.strerror or e}"
            self.invoker.status_sink.publish(LINKER.channel, reason, reveal=not context.chained)
            return context, Failure(
                reason=reason,
                captured_stderr=str(e),
                kind=FailureKind.DISCOVERY_EMPTY,
            )

        if context.object_path in link_inputs:
            return context.with_link_inputs(link_inputs), Success(
                message=f"Discovered {len(link_inputs)} object file(s) to link.",
            )

        if link_inputs:
            reason = f"Object file `{context.object_path.name}` is missing in `{context.directory}`, refusing to link {len(link_inputs)} unrelated object file(s)."
        else:
            reason = f"No object files (`*{context.object_path.suffix}`) found to link in `{context.directory}`."
        self.invoker.status_sink.publish(
            LINKER.channel,
            reason,
            reveal=not context.chained,
        )
        return context, Failure(
            reason=reason,
            kind=FailureKind.DISCOVERY_EMPTY,
        )
