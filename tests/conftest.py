from typing import List, Optional

import pytest


class FakeStream:
    """In-memory file-like device recording every write as one frame."""

    def __init__(
        self,
        responses: bytes = b"",
        fail_on_write: Optional[int] = None,
        fail_on_read: bool = False,
    ) -> None:
        self.frames: List[bytes] = []
        self.reads: List[int] = []
        self.responses = bytearray(responses)
        self.fail_on_write = fail_on_write
        self.fail_on_read = fail_on_read
        self.close_calls = 0
        self.write_timeout: Optional[float] = None

    def write(self, data: bytes) -> int:
        if self.fail_on_write is not None and len(self.frames) == self.fail_on_write:
            raise OSError("device unplugged")
        self.frames.append(bytes(data))
        return len(data)

    def read(self, size: int) -> bytes:
        self.reads.append(size)
        if self.fail_on_read:
            raise TimeoutError("read timed out")
        chunk = bytes(self.responses[:size])
        del self.responses[:size]
        return chunk

    def close(self) -> None:
        self.close_calls += 1

    @property
    def output(self) -> bytes:
        return b"".join(self.frames)


@pytest.fixture
def stream() -> FakeStream:
    return FakeStream()


@pytest.fixture
def stream_factory():
    return FakeStream
