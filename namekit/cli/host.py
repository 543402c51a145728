"""Terminal host for toolchain core, stands in for an editor integration."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from namekit.cli.output import CLIColor, cli_message

if TYPE_CHECKING:
    from pathlib import Path


class TerminalOutputChannel:
    """Buffers channel text and prints it when channel is revealed."""

    def __init__(self, name: str, stream: TextIO) -> None:
        self.name = name
        self.text = ""
        self.revealed = False
        self._stream = stream

    def clear(self) -> None:
        self.text = ""
        self.revealed = False

    def append(self, text: str) -> None:
        self.text += text

    def reveal(self) -> None:
        self.revealed = True
        print(f"{CLIColor.BLUE}[{self.name}]{CLIColor.RESET}", file=self._stream)
        if self.text:
            print(self.text, end="" if self.text.endswith("\n") else "\n", file=self._stream)


class TerminalHost:
    """Host bound to single input file, channels are revealed into stdout."""

    def __init__(
        self,
        current_file: Path | None,
        *,
        verbose: bool,
        stream: TextIO | None = None,
    ) -> None:
        self.current_file = current_file
        self.verbose = verbose
        self._stream = stream or sys.stdout
        self._channels: dict[str, TerminalOutputChannel] = {}

    def get_current_file(self) -> Path | None:
        return self.current_file

    def list_directory(self, path: Path) -> set[str]:
        return {p.name for p in path.iterdir() if p.is_file()}

    def show_info(self, text: str) -> None:
        cli_message("INFO", self._with_file(text), verbose=self.verbose)

    def show_error(self, text: str) -> None:
        """Report an error, along with channel text that was written but never shown.

        Chained runs keep intermediate stage channels hidden until then.
        """
        cli_message("ERROR", self._with_file(text))
        for channel in self._channels.values():
            if channel.text and not channel.revealed:
                channel.reveal()

    def output_channel(self, name: str) -> TerminalOutputChannel:
        if name not in self._channels:
            self._channels[name] = TerminalOutputChannel(name, self._stream)
        return self._channels[name]

    def _with_file(self, text: str) -> str:
        if self.current_file is None:
            return text
        return f"{self.current_file.name}: {text}"
