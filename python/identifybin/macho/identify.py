"""Mach-O header decoder."""

from ..errors import UnrecognizedFormat, UnsupportedArchitecture
from ..format_detect import as_byte_view, unpack_header_field
from ..types import BinaryFormat, BinaryType, OperatingSystem
from .types import MACHO_CPU_TYPES, MACHO_HEADER_LAYOUTS, MAGIC_OFFSET


def parse_macho(data: bytes | bytearray | memoryview) -> BinaryType:
    """Classify a Mach-O header.

    Args:
        data: Buffer starting with one of the four Mach-O magics

    Returns:
        BinaryType for darwin with the decoded architecture and byte order

    Raises:
        UnrecognizedFormat: If the magic is not a Mach-O magic
        TruncatedHeader: If the buffer ends before cputype
        UnsupportedArchitecture: If cputype is not supported
    """
    magic = unpack_header_field(BinaryFormat.MACHO, ">I", data, MAGIC_OFFSET)
    layout = MACHO_HEADER_LAYOUTS.get(magic)
    if layout is None:
        raise UnrecognizedFormat(bytes(as_byte_view(data)[:4]))

    cputype = unpack_header_field(
        BinaryFormat.MACHO, layout.cputype_fmt, data, layout.cputype_offset
    )
    architecture = MACHO_CPU_TYPES.get(cputype)
    if architecture is None:
        raise UnsupportedArchitecture(BinaryFormat.MACHO, cputype)

    return BinaryType(OperatingSystem.DARWIN, architecture, layout.endianness)
