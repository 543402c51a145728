"""Terminal output for CLI, the only place where toolchain messages are printed."""

import sys
from typing import Literal, NoReturn, TextIO, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


LEVEL_COLORS: dict[MESSAGE_LEVEL, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(
    level: MESSAGE_LEVEL,
    text: str,
    *,
    verbose: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Emit an message to CLI user with given level, skipped if not verbose."""
    if not verbose:
        return
    color = LEVEL_COLORS[level] if _is_colored(stream or sys.stderr) else ""
    reset = CLIColor.RESET if color else ""
    print(f"{color}[{level}]{reset} {text}", file=stream or sys.stderr)


def cli_fatal_abort(text: str, exit_code: int = 1) -> NoReturn:
    """Emit an error message and exit abnormally."""
    cli_message("ERROR", text)
    sys.exit(exit_code)


def _is_colored(stream: TextIO) -> bool:
    return hasattr(stream, "isatty") and stream.isatty()
