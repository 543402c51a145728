from pathlib import Path

SOURCE_FILE_SUFFIX = ".asm"
OBJECT_FILE_SUFFIX = ".o"


def object_path_for(source: Path) -> Path:
    """Object file is placed near source with extension replaced (`fib.asm` -> `fib.o`)."""
    return source.with_suffix(OBJECT_FILE_SUFFIX)


def executable_path_for(source: Path) -> Path:
    """Executable is placed near source with extension stripped (`fib.asm` -> `fib`)."""
    return source.with_suffix("")


def source_path_problem(source: Path) -> str | None:
    """Reason why derived object or executable path would overwrite source itself, if so."""
    if not source.suffix:
        return "source file has no extension, executable path would be the source itself"
    if source.suffix == OBJECT_FILE_SUFFIX:
        return f"source file has `{OBJECT_FILE_SUFFIX}` extension, object path would be the source itself"
    return None
