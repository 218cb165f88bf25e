"""
Shared result types for binary identification.

Every decoder returns a BinaryType whose fields are members of the closed
enumerations below. The enum values are the plain strings callers see in
serialized output.
"""

from dataclasses import dataclass
from enum import Enum


class BinaryFormat(str, Enum):
    """Executable container formats that can be sniffed."""

    ELF = "elf"
    MACHO = "macho"
    PE = "pe"


class OperatingSystem(str, Enum):
    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"


class Architecture(str, Enum):
    X86 = "x86"
    X86_64 = "x86_64"
    ARM = "arm"
    ARM64 = "arm64"


class Endianness(str, Enum):
    LITTLE = "little"
    BIG = "big"

    @property
    def struct_prefix(self) -> str:
        """Byte-order character for the struct module."""
        return "<" if self is Endianness.LITTLE else ">"


@dataclass(frozen=True)
class BinaryType:
    """Normalized classification of an executable binary.

    Instances are only ever built fully populated; decoders raise instead of
    returning a partial result.
    """

    operating_system: OperatingSystem
    architecture: Architecture
    endianness: Endianness

    def to_dict(self) -> dict[str, str]:
        """Plain-string view, suitable for JSON output."""
        return {
            "operating_system": self.operating_system.value,
            "architecture": self.architecture.value,
            "endianness": self.endianness.value,
        }

    def __str__(self) -> str:
        return (
            f"{self.operating_system.value}/{self.architecture.value} "
            f"({self.endianness.value}-endian)"
        )
