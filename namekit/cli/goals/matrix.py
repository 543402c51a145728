from pathlib import Path

from libnamekit.invoker import Failure, NotFound, Outcome, Success
from namekit.cli.output import CLIColor


def outcome_icon(outcome: Outcome) -> tuple[str, str]:
    match outcome:
        case Success():
            return CLIColor.GREEN, "+"
        case Failure():
            return CLIColor.RED, "-"
        case NotFound():
            return CLIColor.YELLOW, "?"


def display_outcome_matrix(matrix: list[tuple[Path, Outcome]]) -> None:
    for path, outcome in matrix:
        color, icon = outcome_icon(outcome)
        print(f"{color}{icon}{CLIColor.RESET}", path)
