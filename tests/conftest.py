import pytest
import requests


class FakeResponse:
    """Stand-in for requests.Response covering what the fetcher touches."""

    def __init__(self, status_code: int, body: bytes = b"", chunk_size: int = 16):
        self.status_code = status_code
        self._body = body
        self._chunk_size = chunk_size
        self.closed = False
        self.chunks_read = 0

    @property
    def content(self) -> bytes:
        return self._body

    def iter_content(self, chunk_size: int = 1):
        # Ignore the caller's chunk size so truncation across chunks is exercised
        for start in range(0, len(self._body), self._chunk_size):
            self.chunks_read += 1
            yield self._body[start : start + self._chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeGet:
    """Records requests.get calls and replays a canned response or error."""

    def __init__(self):
        self.response: FakeResponse | None = None
        self.error: Exception | None = None
        self.calls: list[dict] = []

    def respond(
        self, status_code: int, body: bytes = b"", chunk_size: int = 16
    ) -> FakeResponse:
        self.response = FakeResponse(status_code, body, chunk_size)
        return self.response

    def __call__(self, url, headers=None, timeout=None, stream=False):
        self.calls.append(
            {"url": url, "headers": headers, "timeout": timeout, "stream": stream}
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_get(monkeypatch) -> FakeGet:
    """Replaces requests.get for the duration of a test."""
    fake = FakeGet()
    monkeypatch.setattr(requests, "get", fake)
    return fake
