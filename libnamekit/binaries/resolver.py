from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import BinaryDirectoryNotFoundError, UnsupportedPlatformError
from .host import Host, infer_host

if TYPE_CHECKING:
    from pathlib import Path


def resolve_binary_path(
    logical_name: str,
    binary_directory: Path,
    host: Host | None = None,
) -> Path:
    """Get path to toolchain binary inside given binary directory for that host.

    Does not touch filesystem, existence must be checked by caller.

    :param logical_name: Base name of an binary (e.g `name-as`)
    :param binary_directory: Flat directory containing all toolchain binaries
    :param host: Override for platform, inferred from current system if omitted
    :raises UnsupportedPlatformError: No naming scheme known for that host
    """
    return binary_directory / binary_filename(logical_name, host or infer_host())


def binary_filename(logical_name: str, host: Host) -> str:
    match (host.operating_system, host.architecture):
        case ("Windows", _):
            return f"{logical_name}.exe"
        case ("Darwin", "AMD64"):
            return f"{logical_name}_x86_64.app"
        case ("Darwin", "ARM64"):
            return f"{logical_name}_arm64.app"
        case ("Linux", _):
            return f"{logical_name}.bin"
        case _:
            raise UnsupportedPlatformError(host)


def validate_binary_directory(binary_directory: Path) -> None:
    """Ensure binaries directory exists, separate binaries are checked per invocation.

    :raises BinaryDirectoryNotFoundError: Directory is missing
    """
    if not binary_directory.is_dir():
        raise BinaryDirectoryNotFoundError(binary_directory)
