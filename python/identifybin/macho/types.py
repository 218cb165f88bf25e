"""
Mach-O header constants used for identification.

The magic is always read big-endian. Its value decides both how the rest of
the header is decoded and where cputype sits, so the two facts live in one
table (MACHO_HEADER_LAYOUTS) instead of two parallel checks.
"""

from dataclasses import dataclass
from types import MappingProxyType

from ..types import Architecture, Endianness

MAGIC_OFFSET = 0

# Magic values as read big-endian from the first 4 bytes
MH_MAGIC = 0xFEEDFACE
MH_MAGIC_64 = 0xFEEDFACF
MH_CIGAM = 0xCEFAEDFE
MH_CIGAM_64 = 0xCFFAEDFE

# CPU types
CPU_ARCH_ABI64 = 0x01000000
CPU_TYPE_X86 = 7
CPU_TYPE_X86_64 = CPU_TYPE_X86 | CPU_ARCH_ABI64
CPU_TYPE_ARM = 12
CPU_TYPE_ARM64 = CPU_TYPE_ARM | CPU_ARCH_ABI64


@dataclass(frozen=True)
class MachoHeaderLayout:
    """How to decode the header that follows a given magic."""

    endianness: Endianness
    cputype_offset: int

    @property
    def cputype_fmt(self) -> str:
        """struct format for the signed 32-bit cputype field."""
        return f"{self.endianness.struct_prefix}i"


MACHO_HEADER_LAYOUTS = MappingProxyType(
    {
        MH_MAGIC: MachoHeaderLayout(Endianness.BIG, 4),
        MH_MAGIC_64: MachoHeaderLayout(Endianness.BIG, 4),
        MH_CIGAM: MachoHeaderLayout(Endianness.LITTLE, 8),
        MH_CIGAM_64: MachoHeaderLayout(Endianness.LITTLE, 8),
    }
)

# 0x03000000 and 0 are not standard cputype values. They are accepted for
# compatibility with binaries this tool has always classified that way.
MACHO_CPU_TYPES = MappingProxyType(
    {
        CPU_TYPE_X86: Architecture.X86,
        CPU_TYPE_X86_64: Architecture.X86_64,
        0x03000000: Architecture.X86_64,
        CPU_TYPE_ARM: Architecture.ARM,
        CPU_TYPE_ARM64: Architecture.ARM64,
        0x0100000D: Architecture.ARM64,
        0: Architecture.ARM64,
    }
)
