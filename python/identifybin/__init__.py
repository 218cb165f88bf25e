"""
identifybin: Identify the operating system, architecture and byte order of
an executable binary from its header bytes.

ELF, Mach-O and PE binaries are recognized by their magic numbers and
decoded into a normalized BinaryType:

    from identifybin import detect_os_and_arch

    info = detect_os_and_arch("build/app.exe")
    print(info.operating_system, info.architecture, info.endianness)

Remote binaries are classified from a ranged download of their first bytes:

    info = detect_os_and_arch("https://example.com/releases/tool")

For format-specific decoding, use the subpackages directly:

    from identifybin.elf import parse_elf
    from identifybin.macho import parse_macho
    from identifybin.coff import parse_pe
"""

from .errors import (
    BinaryIdentificationError,
    BufferTooSmall,
    TruncatedHeader,
    UnrecognizedFormat,
    UnsupportedArchitecture,
    UnsupportedEndianness,
)
from .fetch import (
    DEFAULT_HEADER_BYTES,
    DEFAULT_TIMEOUT,
    FetchError,
    download_first_n_bytes,
    read_header,
)
from .format_detect import MIN_HEADER_SIZE, detect_binary_format
from .identify import (
    detect_os_and_arch,
    detect_os_and_arch_from_bytes,
    detect_os_and_arch_from_url,
    identify_file,
)
from .types import (
    Architecture,
    BinaryFormat,
    BinaryType,
    Endianness,
    OperatingSystem,
)

__all__ = [
    # Identification
    "detect_os_and_arch",
    "detect_os_and_arch_from_bytes",
    "detect_os_and_arch_from_url",
    "identify_file",
    "detect_binary_format",
    "MIN_HEADER_SIZE",
    # Result types
    "BinaryType",
    "BinaryFormat",
    "OperatingSystem",
    "Architecture",
    "Endianness",
    # Errors
    "BinaryIdentificationError",
    "BufferTooSmall",
    "UnrecognizedFormat",
    "TruncatedHeader",
    "UnsupportedArchitecture",
    "UnsupportedEndianness",
    # Byte acquisition
    "read_header",
    "download_first_n_bytes",
    "FetchError",
    "DEFAULT_HEADER_BYTES",
    "DEFAULT_TIMEOUT",
]
