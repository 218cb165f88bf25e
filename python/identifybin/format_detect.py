"""
Binary format detection utilities.

This module sniffs the container format of a header buffer by its magic
prefix, so the identification API can dispatch to the matching decoder.
It also holds the bounds-checked field reader shared by the decoders.
"""

import struct

from .errors import BufferTooSmall, TruncatedHeader, UnrecognizedFormat
from .types import BinaryFormat


# Smallest buffer worth sniffing; covers every fixed offset the decoders read.
MIN_HEADER_SIZE = 64

# Magic bytes for format detection
ELF_MAGIC = b"\x7fELF"
MACHO_MAGICS = (
    b"\xfe\xed\xfa\xce",  # 32-bit, big-endian fields
    b"\xfe\xed\xfa\xcf",  # 64-bit, big-endian fields
    b"\xce\xfa\xed\xfe",  # 32-bit, little-endian fields
    b"\xcf\xfa\xed\xfe",  # 64-bit, little-endian fields
)
DOS_MAGIC = b"MZ"

# Checked in order, first match wins.
FORMAT_SIGNATURES: tuple[tuple[bytes, BinaryFormat], ...] = (
    (ELF_MAGIC, BinaryFormat.ELF),
    *((magic, BinaryFormat.MACHO) for magic in MACHO_MAGICS),
    (DOS_MAGIC, BinaryFormat.PE),
)


def as_byte_view(data: bytes | bytearray | memoryview) -> memoryview:
    """Flat unsigned-byte view of a buffer.

    A memoryview over e.g. array('I') has len() in items, not bytes; casting
    makes lengths, slices and offsets byte-based for every buffer type.
    """
    return memoryview(data).cast("B")


def detect_binary_format(data: bytes | bytearray | memoryview) -> BinaryFormat:
    """Detect which executable container format a header buffer holds.

    Args:
        data: Leading bytes of a binary (at least MIN_HEADER_SIZE)

    Returns:
        The matching BinaryFormat

    Raises:
        BufferTooSmall: If data is shorter than MIN_HEADER_SIZE
        UnrecognizedFormat: If no known magic prefix matches
    """
    data = as_byte_view(data)
    if len(data) < MIN_HEADER_SIZE:
        raise BufferTooSmall(len(data), MIN_HEADER_SIZE)

    header = bytes(data[:4])
    for magic, binary_format in FORMAT_SIGNATURES:
        if header.startswith(magic):
            return binary_format

    raise UnrecognizedFormat(header)


def unpack_header_field(
    binary_format: BinaryFormat,
    fmt: str,
    data: bytes | bytearray | memoryview,
    offset: int,
) -> int:
    """Read a single struct field, refusing to run past the buffer.

    Args:
        binary_format: Format being decoded (for error reporting)
        fmt: struct format with byte-order prefix and exactly one field
        data: Header buffer
        offset: Field offset within data

    Returns:
        The unpacked integer

    Raises:
        TruncatedHeader: If offset + field width exceeds len(data)
    """
    data = as_byte_view(data)
    width = struct.calcsize(fmt)
    if offset < 0 or offset + width > len(data):
        raise TruncatedHeader(binary_format, offset, width, len(data))
    (value,) = struct.unpack_from(fmt, data, offset)
    return value
