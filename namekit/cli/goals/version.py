import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libnamekit.binaries import UnsupportedPlatformError, infer_host, resolve_binary_path
from libnamekit.tools import TOOLCHAIN
from namekit.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain binaries."""
    host = infer_host()

    print("[NameKit toolchain driver]")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tOS: {host.operating_system}")
    print(f"\tArchitecture: {host.architecture}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print(f"Toolchain binaries (from `{args.binary_directory}`):")
    for tool in TOOLCHAIN:
        try:
            path = resolve_binary_path(tool.binary_name, args.binary_directory, host)
        except UnsupportedPlatformError:
            print(f"\t{tool.name}: unsupported platform")
            continue
        status = "found" if path.exists() else "missing"
        print(f"\t{tool.name}: {path} ({status})")
    return sys.exit(0)
