"""ELF header decoder."""

from ..errors import UnsupportedArchitecture, UnsupportedEndianness
from ..format_detect import unpack_header_field
from ..types import BinaryFormat, BinaryType, OperatingSystem
from .types import EI_DATA_OFFSET, ELF_ENDIANNESS, ELF_MACHINES, E_MACHINE_OFFSET


def parse_elf(data: bytes | bytearray | memoryview) -> BinaryType:
    """Classify an ELF header.

    ELF is always reported as linux; other ELF-based systems are not told
    apart.

    Args:
        data: Buffer starting with the ELF magic

    Returns:
        BinaryType for linux with the decoded architecture and byte order

    Raises:
        UnsupportedArchitecture: If the machine byte is not supported
        UnsupportedEndianness: If the data-encoding byte is not 1 or 2
        TruncatedHeader: If the buffer ends before the machine byte
    """
    machine = unpack_header_field(BinaryFormat.ELF, "B", data, E_MACHINE_OFFSET)
    architecture = ELF_MACHINES.get(machine)
    if architecture is None:
        raise UnsupportedArchitecture(BinaryFormat.ELF, machine)

    encoding = unpack_header_field(BinaryFormat.ELF, "B", data, EI_DATA_OFFSET)
    endianness = ELF_ENDIANNESS.get(encoding)
    if endianness is None:
        raise UnsupportedEndianness(encoding)

    return BinaryType(OperatingSystem.LINUX, architecture, endianness)
