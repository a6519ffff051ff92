import io
from typing import List, Optional

import pytest

from thermal_escpos.exceptions import TransportError
from thermal_escpos.transport import Transport


class FakeSocket:
    def __init__(self, response: bytes = b"") -> None:
        self.sent: List[bytes] = []
        self.timeouts: List[Optional[float]] = []
        self.response = response
        self.closed = False

    def settimeout(self, value: Optional[float]) -> None:
        self.timeouts.append(value)

    def sendall(self, data: bytes) -> None:
        self.sent.append(data)

    def recv(self, size: int) -> bytes:
        return self.response[:size]

    def close(self) -> None:
        self.closed = True


def test_writes_to_file_like_stream() -> None:
    buf = io.BytesIO()
    transport = Transport(buf)
    transport.write(b"\x1b@")
    assert buf.getvalue() == b"\x1b@"


def test_socket_gets_deadline_before_each_write() -> None:
    sock = FakeSocket()
    transport = Transport(sock, write_timeout=10)
    transport.write(b"a")
    transport.write(b"b")
    assert sock.sent == [b"a", b"b"]
    assert sock.timeouts == [10, 10]


def test_serial_like_stream_gets_write_timeout(stream) -> None:
    transport = Transport(stream, write_timeout=2.5)
    transport.write(b"x")
    assert stream.write_timeout == 2.5


def test_stream_without_deadline_support_is_written() -> None:
    buf = io.BytesIO()
    Transport(buf, write_timeout=1).write(b"ok")
    assert buf.getvalue() == b"ok"


def test_write_error_is_transport_error(stream) -> None:
    stream.fail_on_write = 0
    with pytest.raises(TransportError) as exc_info:
        Transport(stream).write(b"abc")
    assert exc_info.value.operation == "write"
    assert isinstance(exc_info.value.__cause__, OSError)


def test_short_write_is_transport_error() -> None:
    class Short:
        def write(self, data: bytes) -> int:
            return len(data) - 1

    with pytest.raises(TransportError):
        Transport(Short()).write(b"abc")


def test_read_from_socket() -> None:
    assert Transport(FakeSocket(b"\x12\x34")).read(1) == b"\x12"


def test_empty_read_is_transport_error() -> None:
    with pytest.raises(TransportError) as exc_info:
        Transport(io.BytesIO()).read(1)
    assert exc_info.value.operation == "read"


def test_read_timeout_is_transport_error(stream) -> None:
    stream.fail_on_read = True
    with pytest.raises(TransportError):
        Transport(stream).read(1)


def test_close_once_then_fail(stream) -> None:
    transport = Transport(stream)
    transport.close()
    transport.close()
    assert stream.close_calls == 1
    assert transport.closed
    with pytest.raises(TransportError):
        transport.write(b"x")
    with pytest.raises(TransportError):
        transport.read(1)


def test_rejects_object_without_write() -> None:
    with pytest.raises(TypeError):
        Transport(object())
