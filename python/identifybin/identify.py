"""
Format-agnostic identification API.

The functions here sniff the container format and dispatch to the matching
decoder. Sources may be raw bytes, a local path or an HTTP(S) URL:

    from identifybin import detect_os_and_arch

    detect_os_and_arch(b"\\x7fELF...")          # bytes
    detect_os_and_arch("/usr/bin/ls")           # local file
    detect_os_and_arch("https://host/tool.exe") # ranged download
"""

import logging
import os
from collections.abc import Callable
from types import MappingProxyType

from .coff import parse_pe
from .elf import parse_elf
from .fetch import (
    DEFAULT_HEADER_BYTES,
    DEFAULT_TIMEOUT,
    download_first_n_bytes,
    read_header,
)
from .format_detect import as_byte_view, detect_binary_format
from .macho import parse_macho
from .types import BinaryFormat, BinaryType

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes | bytearray | memoryview], BinaryType]

DECODERS: MappingProxyType[BinaryFormat, Decoder] = MappingProxyType(
    {
        BinaryFormat.ELF: parse_elf,
        BinaryFormat.MACHO: parse_macho,
        BinaryFormat.PE: parse_pe,
    }
)

_URL_SCHEMES = ("http://", "https://")


def detect_os_and_arch_from_bytes(data: bytes | bytearray | memoryview) -> BinaryType:
    """Classify a header buffer.

    Args:
        data: Leading bytes of a binary

    Returns:
        BinaryType with operating system, architecture and endianness

    Raises:
        BinaryIdentificationError: Any of its subclasses, on the first
            problem found
    """
    data = as_byte_view(data)
    binary_format = detect_binary_format(data)
    logger.debug("Detected %s header (%d bytes)", binary_format.value, len(data))
    return DECODERS[binary_format](data)


def identify_file(
    path: str | os.PathLike, byte_count: int = DEFAULT_HEADER_BYTES
) -> BinaryType:
    """Classify a local binary from its leading bytes.

    Raises:
        FileNotFoundError: If the file doesn't exist
        BinaryIdentificationError: If the header can't be classified
    """
    return detect_os_and_arch_from_bytes(read_header(path, byte_count))


def detect_os_and_arch_from_url(
    url: str,
    byte_count: int = DEFAULT_HEADER_BYTES,
    timeout: float = DEFAULT_TIMEOUT,
) -> BinaryType:
    """Classify a remote binary, downloading only its leading bytes.

    Raises:
        FetchError: If the bytes can't be downloaded
        BinaryIdentificationError: If the header can't be classified
    """
    return detect_os_and_arch_from_bytes(
        download_first_n_bytes(url, byte_count, timeout=timeout)
    )


def is_url(source: str) -> bool:
    """Check if a source string names an HTTP(S) resource."""
    return source.lower().startswith(_URL_SCHEMES)


def detect_os_and_arch(
    source: bytes | bytearray | memoryview | str | os.PathLike,
    byte_count: int = DEFAULT_HEADER_BYTES,
    timeout: float = DEFAULT_TIMEOUT,
) -> BinaryType:
    """Classify a binary given as bytes, a local path or an HTTP(S) URL.

    Args:
        source: Header bytes, a path, or a URL string
        byte_count: How many leading bytes to read or download
        timeout: Download timeout in seconds (URLs only)

    Returns:
        BinaryType with operating system, architecture and endianness

    Raises:
        TypeError: If source is none of the accepted types
        FileNotFoundError: If a path doesn't exist
        FetchError: If a URL can't be downloaded
        BinaryIdentificationError: If the header can't be classified
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return detect_os_and_arch_from_bytes(source)

    if isinstance(source, str) and is_url(source):
        return detect_os_and_arch_from_url(source, byte_count, timeout)

    if isinstance(source, (str, os.PathLike)):
        return identify_file(source, byte_count)

    raise TypeError(f"Unsupported input type: {type(source).__name__}")
