"""Tool invoker, spawns single toolchain binary and classifies its result."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from libnamekit.binaries import UnsupportedPlatformError, resolve_binary_path

from .outcome import Failure, FailureKind, NotFound, Outcome, Success
from .request import InvocationRequest

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from libnamekit.binaries import Host
    from libnamekit.status import StatusSink
    from libnamekit.tools import ToolSpec


class SpawnedProcess(Protocol):
    returncode: int | None

    async def communicate(self) -> tuple[bytes, bytes]: ...

    async def wait(self) -> int: ...

    def kill(self) -> None: ...


SpawnCallable: TypeAlias = "Callable[..., Awaitable[SpawnedProcess]]"


class ToolInvoker:
    """Spawns toolchain binaries and publishes their result into status sink.

    Any bytes written into error stream mark invocation as failed regardless of exit code,
    as tools may emit diagnostics and still exit normally.
    """

    def __init__(  # noqa: PLR0913
        self,
        status_sink: StatusSink,
        *,
        host: Host | None = None,
        spawn: SpawnCallable = asyncio.create_subprocess_exec,
        path_exists: Callable[[Path], bool] = Path.exists,
        timeout: float | None = None,
        on_command: Callable[[Sequence[str]], None] | None = None,
    ) -> None:
        """Configure invoker, defaults spawn real processes on inferred host.

        :param host: Override for binary naming platform, inferred if omitted
        :param spawn: Coroutine function with `asyncio.create_subprocess_exec` signature
        :param path_exists: Binary existence check, performed before spawning
        :param timeout: Seconds to wait for an tool, None waits forever
        :param on_command: Called with full command before spawning (e.g for logging).
        """
        self.status_sink = status_sink
        self.host = host
        self.timeout = timeout
        self._spawn = spawn
        self._path_exists = path_exists
        self._on_command = on_command

    async def invoke(
        self,
        binary_directory: Path,
        tool: ToolSpec,
        inputs: Sequence[Path],
        output: Path,
        *,
        suppress_reveal: bool,
        working_directory: Path | None = None,
    ) -> Outcome:
        """Run given tool to completion and return its outcome.

        Publishes exactly one status update into tool channel.
        """
        reveal = not suppress_reveal
        try:
            binary_path = resolve_binary_path(
                tool.binary_name,
                binary_directory,
                self.host,
            )
        except UnsupportedPlatformError as e:
            self.status_sink.publish(tool.channel, repr(e), reveal=reveal)
            return Failure(
                reason=repr(e),
                kind=FailureKind.UNSUPPORTED_PLATFORM,
                summary=f"Cannot run {tool.name} on this platform.",
            )

        binary_path = binary_path.absolute()
        if not self._path_exists(binary_path):
            self.status_sink.publish(
                tool.channel,
                f"{tool.name.capitalize()} not found at path: {binary_path}",
                reveal=reveal,
            )
            return NotFound(expected_path=binary_path)

        request = InvocationRequest(
            binary_directory=binary_directory,
            binary_path=binary_path,
            arguments=tuple(tool.compose_arguments(inputs, output)),
            working_directory=working_directory,
        )
        outcome = await self._execute(tool, request)

        match outcome:
            case Success():
                text = outcome.output if tool.stdout_is_result else tool.success_message
            case Failure():
                text = outcome.captured_stderr or outcome.reason
        self.status_sink.publish(tool.channel, text, reveal=reveal)
        return outcome

    async def _execute(
        self,
        tool: ToolSpec,
        request: InvocationRequest,
    ) -> Success | Failure:
        """Spawn process for request and wait until it is fully terminated."""
        if self._on_command:
            self._on_command(request.command)

        spawn_kwargs: dict[str, Any] = {
            "stdin": None if tool.interactive_stdin else asyncio.subprocess.DEVNULL,
            "stdout": asyncio.subprocess.PIPE,
            "stderr": asyncio.subprocess.PIPE,
        }
        if request.working_directory is not None:
            spawn_kwargs["cwd"] = str(request.working_directory)

        try:
            process = await self._spawn(*request.command, **spawn_kwargs)
        except OSError as e:
            return Failure(
                reason=str(e),
                captured_stderr=str(e),
                kind=FailureKind.SPAWN_ERROR,
                summary=f"Unable to start {tool.name}: {e.strerror or e}",
            )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self.timeout,
            )
        except TimeoutError:
            process.kill()
            await process.wait()
            reason = f"{tool.name.capitalize()} did not finish in {self.timeout} seconds and was killed."
            return Failure(
                reason=reason,
                kind=FailureKind.TIMEOUT,
                summary=reason,
            )

        exit_code = process.returncode if process.returncode is not None else 0
        captured_stderr = _decode_stream(stderr)
        if stderr:
            return Failure(
                reason=captured_stderr,
                captured_stderr=captured_stderr,
                kind=FailureKind.TOOL_FAILURE,
                summary=tool.failure_summary,
            )

        return Success(
            message=tool.success_summary,
            output=_decode_stream(stdout),
            exit_code=exit_code,
        )


def _decode_stream(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
