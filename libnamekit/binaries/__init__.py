"""Toolchain binaries naming, they are shipped with different names per platform."""

from .errors import BinaryDirectoryNotFoundError, UnsupportedPlatformError
from .host import Host, infer_host
from .resolver import binary_filename, resolve_binary_path, validate_binary_directory

__all__ = [
    "BinaryDirectoryNotFoundError",
    "Host",
    "UnsupportedPlatformError",
    "binary_filename",
    "infer_host",
    "resolve_binary_path",
    "validate_binary_directory",
]
