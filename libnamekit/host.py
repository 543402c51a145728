"""Host (editor, terminal) capabilities that toolchain core calls through.

Core never talks to UI directly, everything goes via `HostCollaborator`,
so orchestration can run headless (e.g under tests).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class OutputChannel(Protocol):
    """Named display panel (e.g editor output panel)."""

    def clear(self) -> None: ...

    def append(self, text: str) -> None: ...

    def reveal(self) -> None: ...


class HostCollaborator(Protocol):
    def get_current_file(self) -> Path | None:
        """File user currently works with, if any."""
        ...

    def list_directory(self, path: Path) -> set[str]:
        """Names of regular files inside given directory."""
        ...

    def show_info(self, text: str) -> None: ...

    def show_error(self, text: str) -> None: ...

    def output_channel(self, name: str) -> OutputChannel: ...


class InMemoryOutputChannel:
    """Channel that only keeps text, used for headless runs."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.text = ""
        self.reveals = 0

    def clear(self) -> None:
        self.text = ""

    def append(self, text: str) -> None:
        self.text += text

    def reveal(self) -> None:
        self.reveals += 1


class InMemoryHost:
    """Headless host, directory listing goes to real filesystem."""

    def __init__(self, current_file: Path | None = None) -> None:
        self.current_file = current_file
        self.channels: dict[str, InMemoryOutputChannel] = {}
        self.infos: list[str] = []
        self.errors: list[str] = []

    def get_current_file(self) -> Path | None:
        return self.current_file

    def list_directory(self, path: Path) -> set[str]:
        return {p.name for p in path.iterdir() if p.is_file()}

    def show_info(self, text: str) -> None:
        self.infos.append(text)

    def show_error(self, text: str) -> None:
        self.errors.append(text)

    def output_channel(self, name: str) -> InMemoryOutputChannel:
        if name not in self.channels:
            self.channels[name] = InMemoryOutputChannel(name)
        return self.channels[name]
