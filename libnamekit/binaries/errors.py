from pathlib import Path

from libnamekit.exceptions import NameKitError

from .host import Host


class UnsupportedPlatformError(NameKitError):
    headline = "Unsupported platform for toolchain binaries"
    code = "unsupported-platform"

    def __init__(self, host: Host) -> None:
        super().__init__(host)
        self.host = host

    def describe(self) -> list[str]:
        return [
            f"There is no known binary naming for operating system `{self.host.operating_system}` on architecture `{self.host.architecture}`",
            "Supported: Windows, Linux, macOS (x86-64 / arm64)",
        ]


class BinaryDirectoryNotFoundError(NameKitError):
    headline = "Toolchain binaries directory not found"
    code = "binary-directory-not-found"

    def __init__(self, binary_directory: Path) -> None:
        super().__init__(binary_directory)
        self.binary_directory = binary_directory

    def describe(self) -> list[str]:
        return [
            f"Expected directory `{self.binary_directory}` with `name-as`, `name-ld` and `name-emu` binaries",
            "Please specify it via `--bin-directory` or `NAMEKIT_BIN_DIRECTORY` environment variable",
        ]
