"""
Exception types raised while identifying a binary.

All decode failures derive from BinaryIdentificationError so callers can catch
the whole family, while the concrete subclasses let them branch on the cause
(e.g. fetch more bytes on BufferTooSmall, give up on UnsupportedArchitecture).
"""

from .types import BinaryFormat


class BinaryIdentificationError(ValueError):
    """Base class for all header decoding failures."""

    pass


class BufferTooSmall(BinaryIdentificationError):
    """Raised when fewer bytes are supplied than sniffing needs."""

    def __init__(self, size: int, required: int):
        self.size = size
        self.required = required
        super().__init__(f"Binary too small: {size} bytes, need at least {required}")


class UnrecognizedFormat(BinaryIdentificationError):
    """Raised when no known magic prefix matches."""

    def __init__(self, prefix: bytes):
        self.prefix = bytes(prefix)
        super().__init__(f"Unknown binary format (leading bytes: {self.prefix.hex(' ')})")


class TruncatedHeader(BinaryIdentificationError):
    """Raised when a header field lies beyond the end of the buffer."""

    def __init__(self, binary_format: BinaryFormat, offset: int, width: int, size: int):
        self.binary_format = binary_format
        self.offset = offset
        self.width = width
        self.size = size
        super().__init__(
            f"Truncated {binary_format.value} header: need {width} bytes at "
            f"offset {offset:#x}, buffer is {size} bytes"
        )


class UnsupportedArchitecture(BinaryIdentificationError):
    """Raised when the machine/cputype field is outside the supported set."""

    def __init__(self, binary_format: BinaryFormat, value: int):
        self.binary_format = binary_format
        self.value = value
        super().__init__(
            f"Unsupported {binary_format.value} architecture: {value:#x}"
        )


class UnsupportedEndianness(BinaryIdentificationError):
    """Raised when the ELF data-encoding byte is neither 1 nor 2."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Unsupported ELF data encoding: {value:#x}")
