from dataclasses import dataclass
from platform import machine, system
from typing import Literal, TypeAlias

OperatingSystem: TypeAlias = Literal["Windows", "Darwin", "Linux", "Unknown"]
Architecture: TypeAlias = Literal["AMD64", "ARM64", "Unknown"]


@dataclass(frozen=True, slots=True)
class Host:
    """Platform that toolchain binaries are resolved for."""

    operating_system: OperatingSystem
    architecture: Architecture


def infer_host() -> Host:
    """Infer host from current system, unknown values are kept as `Unknown`."""
    return Host(
        operating_system=_normalize_operating_system(system()),
        architecture=_normalize_architecture(machine()),
    )


def _normalize_operating_system(name: str) -> OperatingSystem:
    match name:
        case "Windows" | "Darwin" | "Linux":
            return name
        case _:
            return "Unknown"


def _normalize_architecture(name: str) -> Architecture:
    match name.lower():
        case "x86_64" | "amd64":
            return "AMD64"
        case "arm64" | "aarch64":
            return "ARM64"
        case _:
            return "Unknown"
