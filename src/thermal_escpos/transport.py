"""
Byte-stream transport adapter.

Wraps whatever connection the caller opened (file, pyserial port, socket,
USB endpoint wrapper) behind blocking ``write``/``read``/``close``. Opening
the device is the caller's business.

Supported stream shapes:
    - file-like: ``write(bytes)``, ``read(n)``, optional ``close()``
    - socket-like: ``sendall(bytes)``, ``recv(n)``, optional ``close()``

Write deadline:
    When ``write_timeout`` is set it is applied before every write, through
    ``settimeout()`` (sockets) or the ``write_timeout`` attribute (pyserial).
    Streams with neither are written without a deadline.

Not thread-safe. One transport belongs to one printer.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from thermal_escpos.exceptions import TransportError

__all__ = ["Transport"]

logger = logging.getLogger(__name__)


class Transport:
    """Blocking adapter over a caller-owned byte stream."""

    def __init__(self, stream: Any, write_timeout: Optional[float] = None) -> None:
        if not (hasattr(stream, "write") or hasattr(stream, "sendall")):
            raise TypeError(f"{type(stream).__name__} has neither write() nor sendall()")
        self._stream = stream
        self._is_socket = hasattr(stream, "sendall") and hasattr(stream, "recv")
        self.write_timeout = write_timeout
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise TransportError("Connection is closed", operation=operation)

    def _apply_deadline(self) -> None:
        if self.write_timeout is None:
            return
        if hasattr(self._stream, "settimeout"):
            self._stream.settimeout(self.write_timeout)
        elif hasattr(self._stream, "write_timeout"):
            self._stream.write_timeout = self.write_timeout

    def write(self, data: bytes) -> None:
        """
        Write ``data`` completely.

        Raises:
            TransportError: On a closed transport, an ``OSError`` from the
                stream, or a short write.
        """
        self._check_open("write")
        try:
            self._apply_deadline()
            if self._is_socket:
                self._stream.sendall(data)
                written = len(data)
            else:
                written = self._stream.write(data)
                if hasattr(self._stream, "flush"):
                    self._stream.flush()
        except OSError as e:
            logger.error(f"Write of {len(data)} bytes failed: {e}")
            raise TransportError(
                f"Write failed: {e}", operation="write", context={"length": len(data)}
            ) from e

        # Streams returning None (e.g. some serial wrappers) are treated as complete.
        if written is not None and written != len(data):
            raise TransportError(
                "Short write",
                operation="write",
                context={"length": len(data), "written": written},
            )
        logger.debug(f"TX {len(data)} bytes: {data.hex(' ')}")

    def read(self, size: int) -> bytes:
        """
        Perform exactly one blocking read of up to ``size`` bytes.

        Raises:
            TransportError: On a closed transport, an ``OSError`` or an
                empty read (device did not answer).
        """
        self._check_open("read")
        try:
            if self._is_socket:
                data = self._stream.recv(size)
            else:
                data = self._stream.read(size)
        except OSError as e:
            logger.error(f"Read of {size} bytes failed: {e}")
            raise TransportError(f"Read failed: {e}", operation="read") from e

        if not data:
            raise TransportError(
                "No response from device", operation="read", context={"expected": size}
            )
        logger.debug(f"RX {len(data)} bytes: {bytes(data).hex(' ')}")
        return bytes(data)

    def close(self) -> None:
        """Close the underlying stream once; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        close = getattr(self._stream, "close", None)
        if close is None:
            return
        try:
            close()
        except OSError as e:
            raise TransportError(f"Close failed: {e}", operation="close") from e
