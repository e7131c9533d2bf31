"""Shared pytest fixtures for stream adapter tests."""

import io

import pytest


class ChunkedSource:
    """Source that hands out at most `chunk` bytes per read."""

    def __init__(self, data: bytes, chunk: int):
        self._data = io.BytesIO(data)
        self._chunk = chunk
        self.requests: list[int] = []

    def read(self, size: int = -1) -> bytes:
        self.requests.append(size)
        if size is None or size < 0:
            size = self._chunk
        return self._data.read(min(size, self._chunk))


class FailingSource:
    """Source that yields `data` and then raises OSError."""

    def __init__(self, data: bytes = b""):
        self._data = data

    def read(self, size: int = -1) -> bytes:
        if self._data:
            data, self._data = self._data, b""
            return data
        raise OSError("device not ready")


class RecordingSink:
    """Sink that records every write separately."""

    def __init__(self, fail_on: bytes | None = None):
        self.writes: list[bytes] = []
        self._fail_on = fail_on

    def write(self, data: bytes) -> int:
        if self._fail_on is not None and bytes(data) == self._fail_on:
            raise OSError("No space left on device")
        self.writes.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.writes)


class BrokenSink:
    """Sink whose every write fails."""

    def write(self, data: bytes) -> int:
        raise OSError("Broken pipe")


@pytest.fixture
def chunked_source():
    """Factory for sources that return short reads."""
    return ChunkedSource


@pytest.fixture
def failing_source():
    """Factory for sources that raise OSError once drained."""
    return FailingSource


@pytest.fixture
def recording_sink():
    """Sink that keeps each write call's bytes."""
    return RecordingSink()


@pytest.fixture
def crlf_failing_sink():
    """Sink that fails whenever a line break is written."""
    return RecordingSink(fail_on=b"\r\n")


@pytest.fixture
def broken_sink():
    """Sink that raises OSError on the first write."""
    return BrokenSink()


@pytest.fixture
def all_bytes():
    """Every octet value once, in order."""
    return bytes(range(256))
