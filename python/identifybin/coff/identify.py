"""PE/COFF header decoder."""

from ..errors import UnsupportedArchitecture
from ..format_detect import unpack_header_field
from ..types import BinaryFormat, BinaryType, Endianness, OperatingSystem
from .types import MACHINE_FIELD_OFFSET, PE_MACHINES, PE_SIGNATURE_OFFSET_LOCATION


def parse_pe(data: bytes | bytearray | memoryview) -> BinaryType:
    """Classify a PE header reached through the DOS stub.

    The PE signature itself is not validated; e_lfanew is trusted and only
    bounds-checked against the buffer.

    Args:
        data: Buffer starting with the DOS "MZ" magic

    Returns:
        BinaryType for windows, always little-endian

    Raises:
        TruncatedHeader: If e_lfanew or the machine field lies past the buffer
        UnsupportedArchitecture: If the machine field is not supported
    """
    pe_offset = unpack_header_field(
        BinaryFormat.PE, "<I", data, PE_SIGNATURE_OFFSET_LOCATION
    )
    machine = unpack_header_field(
        BinaryFormat.PE, "<H", data, pe_offset + MACHINE_FIELD_OFFSET
    )
    architecture = PE_MACHINES.get(machine)
    if architecture is None:
        raise UnsupportedArchitecture(BinaryFormat.PE, machine)

    return BinaryType(OperatingSystem.WINDOWS, architecture, Endianness.LITTLE)
