from __future__ import annotations

import asyncio
import sys
from itertools import chain
from time import perf_counter_ns
from typing import TYPE_CHECKING, NoReturn

from libnamekit.binaries import validate_binary_directory
from libnamekit.invoker import Success, ToolInvoker
from libnamekit.pipeline import LinkInputPolicy, PipelineCoordinator
from libnamekit.status import StatusSink
from namekit.cli.goals.matrix import display_outcome_matrix
from namekit.cli.host import TerminalHost
from namekit.cli.output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libnamekit.invoker import Outcome
    from namekit.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def cli_perform_pipeline_goal(args: CLIArguments) -> NoReturn:
    """Perform requested toolchain stage(s) on every input file."""
    validate_binary_directory(args.binary_directory)
    cli_message(
        level="INFO",
        text=f"Performing `{args.goal.value}` on {len(args.source_filepaths)} file(s) with binaries from `{args.binary_directory}`...",
        verbose=args.verbose,
    )

    start_time = perf_counter_ns()
    matrix = asyncio.run(perform_goal_on_files(args.source_filepaths, args))
    time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
    cli_message(
        level="INFO",
        text=f"Toolchain finished in {time_taken:.2f}s.",
        verbose=args.verbose,
    )

    if len(matrix) > 1:
        display_outcome_matrix(matrix)

    if any(not isinstance(outcome, Success) for _, outcome in matrix):
        return sys.exit(1)
    return sys.exit(0)


async def perform_goal_on_files(
    paths: Sequence[Path],
    args: CLIArguments,
) -> list[tuple[Path, Outcome]]:
    """Run pipeline for each file, concurrently across directories.

    With directory glob linking, files sharing an directory are performed one after another,
    as each of them links every object file found in that directory.
    """
    if args.link_input_policy == LinkInputPolicy.EXPLICIT_SET:
        batches = [[path] for path in paths]
    else:
        by_directory: dict[Path, list[Path]] = {}
        for path in paths:
            by_directory.setdefault(path.parent, []).append(path)
        batches = list(by_directory.values())

    results = await asyncio.gather(*(perform_goal_on_batch(b, args) for b in batches))
    outcomes = dict(chain.from_iterable(results))
    return [(path, outcomes[path]) for path in paths]


async def perform_goal_on_batch(
    paths: Sequence[Path],
    args: CLIArguments,
) -> list[tuple[Path, Outcome]]:
    return [(path, await perform_goal_on_file(path, args)) for path in paths]


async def perform_goal_on_file(path: Path, args: CLIArguments) -> Outcome:
    host = TerminalHost(path, verbose=args.verbose)
    invoker = ToolInvoker(
        StatusSink(host),
        timeout=args.tool_timeout,
        on_command=lambda command: cli_message(
            level="INFO",
            text=f"Running `{' '.join(command)}`...",
            verbose=args.show_commands,
        ),
    )
    coordinator = PipelineCoordinator(
        invoker,
        host,
        args.binary_directory,
        link_input_policy=args.link_input_policy,
    )
    return await coordinator.run_current_file(args.goal)
