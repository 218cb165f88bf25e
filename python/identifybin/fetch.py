"""
Byte acquisition for identification.

Only the leading bytes of a binary are needed, so local files are read
partially and remote files are fetched with an HTTP Range request. Servers
that ignore Range get their body streamed and cut off at the requested size.
"""

import logging
import os
from http import HTTPStatus

import requests

logger = logging.getLogger(__name__)

# Large enough to reach the PE header of typical Windows binaries.
DEFAULT_HEADER_BYTES = 4096
DEFAULT_TIMEOUT = 30.0

_STREAM_CHUNK_SIZE = 8192


class FetchError(OSError):
    """Raised when the leading bytes of a remote binary cannot be fetched."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{message}: {url}")


def read_header(
    path: str | os.PathLike, byte_count: int = DEFAULT_HEADER_BYTES
) -> bytes:
    """Read the leading bytes of a local file.

    Args:
        path: Path to binary file
        byte_count: Maximum number of bytes to read

    Returns:
        Up to byte_count bytes (fewer if the file is shorter)

    Raises:
        ValueError: If byte_count is not positive
        FileNotFoundError: If the file doesn't exist
    """
    if byte_count <= 0:
        raise ValueError(f"byte_count must be positive, got {byte_count}")

    with open(path, "rb") as f:
        data = f.read(byte_count)
    logger.debug("Read %d header bytes from %s", len(data), path)
    return data


def download_first_n_bytes(
    url: str, byte_count: int, timeout: float = DEFAULT_TIMEOUT
) -> bytes:
    """Download the first byte_count bytes of a remote file.

    Args:
        url: HTTP(S) URL of the binary
        byte_count: Number of leading bytes wanted
        timeout: Connect/read timeout in seconds

    Returns:
        At most byte_count bytes of the body, whether the server honoured
        the Range header (206) or ignored it (200)

    Raises:
        ValueError: If byte_count is not positive
        FetchError: On transport failure or any other status code
    """
    if byte_count <= 0:
        raise ValueError(f"byte_count must be positive, got {byte_count}")

    headers = {"Range": f"bytes=0-{byte_count - 1}"}
    try:
        response = requests.get(url, headers=headers, timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise FetchError(url, f"Request failed ({e})") from e

    try:
        if response.status_code == HTTPStatus.PARTIAL_CONTENT:
            data = _read_at_most(response, byte_count)
            logger.debug("Range request served %d bytes from %s", len(data), url)
            return data

        if response.status_code == HTTPStatus.OK:
            logger.debug("Server ignored Range header, streaming body: %s", url)
            return _read_at_most(response, byte_count)

        raise FetchError(
            url,
            f"Server returned non-OK status, got {response.status_code}",
            status_code=response.status_code,
        )
    except requests.RequestException as e:
        raise FetchError(url, f"Reading response failed ({e})") from e
    finally:
        response.close()


def _read_at_most(response: requests.Response, byte_count: int) -> bytes:
    buf = bytearray()
    for chunk in response.iter_content(chunk_size=_STREAM_CHUNK_SIZE):
        buf.extend(chunk)
        if len(buf) >= byte_count:
            break
    return bytes(buf[:byte_count])
