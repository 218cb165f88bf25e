"""
PE/COFF header constants used for identification.

References:
- Microsoft PE/COFF Specification
- https://learn.microsoft.com/en-us/windows/win32/debug/pe-format
"""

from types import MappingProxyType

from ..types import Architecture

# DOS Header
PE_SIGNATURE_OFFSET_LOCATION = 0x3C  # Offset in DOS header where e_lfanew lives

# The machine field follows the 4-byte "PE\0\0" signature
MACHINE_FIELD_OFFSET = 4

# Machine types
IMAGE_FILE_MACHINE_I386 = 0x14C
IMAGE_FILE_MACHINE_AMD64 = 0x8664
IMAGE_FILE_MACHINE_ARM64 = 0xAA64

PE_MACHINES = MappingProxyType(
    {
        IMAGE_FILE_MACHINE_I386: Architecture.X86,
        IMAGE_FILE_MACHINE_AMD64: Architecture.X86_64,
        IMAGE_FILE_MACHINE_ARM64: Architecture.ARM64,
    }
)
