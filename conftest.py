"""Shared fixtures: stubbed toolchain processes, so no real binaries are spawned."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from libnamekit.binaries import Host
from libnamekit.host import InMemoryHost
from libnamekit.invoker import ToolInvoker
from libnamekit.status import StatusSink

if TYPE_CHECKING:
    from collections.abc import Callable

LINUX_HOST = Host(operating_system="Linux", architecture="AMD64")


@dataclass
class StubBehaviour:
    stdout: bytes = b""
    stderr: bytes = b""
    returncode: int = 0

    # Never finishes until killed
    hang: bool = False

    # Raised instead of spawning
    spawn_error: OSError | None = None

    # Called with command on spawn (e.g to create output files)
    on_spawn: Callable[[list[str]], None] | None = None


class StubProcess:
    def __init__(self, behaviour: StubBehaviour) -> None:
        self._behaviour = behaviour
        self._killed = asyncio.Event()
        self.returncode: int | None = None
        self.killed = False

    async def communicate(self) -> tuple[bytes, bytes]:
        if self._behaviour.hang:
            await self._killed.wait()
        self.returncode = self._behaviour.returncode
        return self._behaviour.stdout, self._behaviour.stderr

    async def wait(self) -> int:
        if self.returncode is None:
            await self._killed.wait()
        assert self.returncode is not None
        return self.returncode

    def kill(self) -> None:
        self.killed = True
        self.returncode = -9
        self._killed.set()


@dataclass
class StubToolchain:
    """Stands for spawned binaries, keyed by binary base name (e.g `name-as`)."""

    behaviours: dict[str, StubBehaviour] = field(default_factory=dict)
    commands: list[list[str]] = field(default_factory=list)
    processes: list[StubProcess] = field(default_factory=list)

    # Keyword arguments of each spawn call (e.g `stdin`, `cwd`), by binary base name
    spawn_options: dict[str, dict[str, Any]] = field(default_factory=dict)

    async def spawn(self, *command: str, **options: Any) -> StubProcess:
        binary_name = Path(command[0]).stem
        behaviour = self.behaviours.get(binary_name, StubBehaviour())
        if behaviour.spawn_error is not None:
            raise behaviour.spawn_error
        self.commands.append(list(command))
        self.spawn_options[binary_name] = options
        if behaviour.on_spawn:
            behaviour.on_spawn(list(command))
        process = StubProcess(behaviour)
        self.processes.append(process)
        return process

    def spawned(self, binary_name: str) -> list[list[str]]:
        return [c for c in self.commands if Path(c[0]).stem == binary_name]


@pytest.fixture
def stub_toolchain() -> StubToolchain:
    return StubToolchain()


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def status_sink(host: InMemoryHost) -> StatusSink:
    return StatusSink(host)


@pytest.fixture
def invoker(status_sink: StatusSink, stub_toolchain: StubToolchain) -> ToolInvoker:
    return ToolInvoker(
        status_sink,
        host=LINUX_HOST,
        spawn=stub_toolchain.spawn,
        path_exists=lambda _: True,
    )
