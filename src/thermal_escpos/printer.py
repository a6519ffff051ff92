"""
Printer facade: the single entry point of the encoder.

Converts text through a ``CharacterConverter``, builds frames with
``thermal_escpos.escpos.commands`` and writes each frame through one
``Transport``. Every I/O error propagates immediately; nothing is retried
and nothing is buffered.

Concurrency:
    A ``Printer`` is not safe for concurrent use. All operations share one
    stream, including the status read; callers serialize access (one lock
    around the printer, or a single owning thread/task).

Example:
    >>> import serial
    >>> with Printer(serial.Serial("/dev/ttyUSB0", 19200)) as p:
    ...     p.init()
    ...     p.align(Alignment.CENTER)
    ...     p.print_line("Thank you!")
    ...     p.qr("https://example.com", 6)
    ...     p.feed(3)
    ...     p.cut()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

from thermal_escpos.charset.converter import (
    DEFAULT_SUBSTITUTIONS,
    CharacterConverter,
    SingleByteConverter,
    apply_substitutions,
    converter_for_name,
)
from thermal_escpos.escpos import commands
from thermal_escpos.model.enums import (
    DEFAULT_CHARACTER_TABLE,
    Alignment,
    BarcodeType,
    CharacterTable,
    ErrorStatus,
    Font,
    Symbology,
)
from thermal_escpos.transport import Transport

__all__ = ["Printer"]

logger = logging.getLogger(__name__)


class Printer:
    """
    ESC/POS printer bound to one connection.

    Args:
        stream: Open byte stream (file-like or socket-like), owned by the
            printer from now on.
        converter: Text converter, ISO 8859-15 by default.
        write_timeout: Seconds applied before each write when the stream
            supports a deadline. Overrides the deadline of a ``Transport``
            passed as ``stream``; ``None`` keeps it.
        substitutions: Byte replacements applied to encoded text.
        character_table: Table selected by ``init``.
    """

    def __init__(
        self,
        stream: Any,
        converter: Optional[CharacterConverter] = None,
        write_timeout: Optional[float] = None,
        substitutions: Sequence[Tuple[bytes, bytes]] = DEFAULT_SUBSTITUTIONS,
        character_table: Union[CharacterTable, int] = DEFAULT_CHARACTER_TABLE,
    ) -> None:
        if isinstance(stream, Transport):
            self._transport = stream
            if write_timeout is not None:
                self._transport.write_timeout = write_timeout
        else:
            self._transport = Transport(stream, write_timeout)
        self.converter: CharacterConverter = converter or SingleByteConverter()
        self.substitutions = tuple(substitutions)
        self.character_table = character_table

    @classmethod
    def from_config(cls, stream: Any, config: Dict[str, Any]) -> "Printer":
        """
        Build a printer from a ``load_config()`` dictionary.

        Keys used: ``encoding``, ``write_timeout_seconds``, ``character_table``.
        """
        return cls(
            stream,
            converter=converter_for_name(config.get("encoding", "latin")),
            write_timeout=config.get("write_timeout_seconds"),
            character_table=config.get("character_table", DEFAULT_CHARACTER_TABLE),
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._transport.closed

    def close(self) -> None:
        """Close the connection. Every later operation raises ``TransportError``."""
        self._transport.close()

    def __enter__(self) -> "Printer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Raw output
    # -------------------------------------------------------------------------

    def write(self, data: bytes) -> None:
        """Write one frame as-is."""
        self._transport.write(data)

    def write_frames(self, frames: Iterable[bytes]) -> None:
        """Write frames in order, stopping at the first failure."""
        for frame in frames:
            self._transport.write(frame)

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------

    def init(self) -> None:
        self.write(commands.initialize(self.character_table))

    def reset(self) -> None:
        self.write(commands.reset())

    def end(self) -> None:
        self.write(commands.end_job())

    def cut(self) -> None:
        self.write(commands.cut())

    def feed(self, lines: int) -> None:
        self.write(commands.feed(lines))

    def newline(self) -> None:
        self.write(commands.newline())

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def size(self, width: int, height: int) -> None:
        self.write(commands.select_size(width, height))

    def font(self, font: Font) -> None:
        self.write(commands.select_font(font))

    def underline(self, enabled: bool) -> None:
        self.write(commands.underline(enabled))

    def kanji_underline(self, enabled: bool) -> None:
        self.write(commands.kanji_underline(enabled))

    def smooth(self, enabled: bool) -> None:
        self.write(commands.smooth(enabled))

    def bold(self, enabled: bool) -> None:
        self.write(commands.bold(enabled))

    def double_height(self, enabled: bool) -> None:
        self.write(commands.double_height(enabled))

    def double_width(self, enabled: bool) -> None:
        self.write(commands.double_width(enabled))

    def double_size(self, width: bool, height: bool) -> None:
        self.write(commands.double_size(width, height))

    def align(self, alignment: Alignment) -> None:
        self.write(commands.align(alignment))

    def print_area_width(self, width: int) -> None:
        self.write(commands.print_area_width(width))

    def character_set(self, n: int) -> None:
        self.write(commands.select_character_set(n))

    def select_character_table(self, table: Union[CharacterTable, int]) -> None:
        self.write(commands.select_character_table(table))

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def print(self, text: str) -> None:
        """
        Print ``text`` without a line feed.

        Empty text writes nothing. Conversion errors propagate before any
        byte is written.

        Raises:
            EncodingError: If the converter cannot represent ``text``.
            TransportError: If the write fails.
        """
        if not text:
            return

        data, count = self.converter.encode(text)
        data = apply_substitutions(data, self.substitutions)
        logger.debug(f"Encoded {count} chars as {len(data)} bytes ({self.converter.encoding})")
        self.write(data)

    def print_line(self, text: str) -> None:
        """``print(text)`` followed by a line feed, only if printing succeeded."""
        self.print(text)
        self.newline()

    # -------------------------------------------------------------------------
    # Barcodes
    # -------------------------------------------------------------------------

    def barcode(self, data: str, barcode_type: BarcodeType) -> None:
        """
        Print a 1D barcode and its value as a text line underneath.

        Raises:
            ProgrammingError: If ``barcode_type`` is not a ``BarcodeType``.
            EncodingError: If ``data`` is not ASCII.
            TransportError: If a write fails; later frames are not sent.
        """
        self.write_frames(commands.barcode_frames(data, barcode_type))
        self.print_line(data)

    def two_dimensional(self, data: Union[str, bytes], size: int, symbology: Symbology) -> None:
        """
        Store and print a 2D symbol. ``size`` outside 2-16 falls back to 3.

        Raises:
            TransportError: If a sub-frame write fails; later sub-frames
                are not sent.
        """
        self.write_frames(commands.two_dimensional_frames(data, size, symbology))

    def qr(self, data: Union[str, bytes], size: int) -> None:
        self.two_dimensional(data, size, Symbology.QR)

    def pdf417(self, data: Union[str, bytes], size: int) -> None:
        self.two_dimensional(data, size, Symbology.PDF417)

    def aztec(self, data: Union[str, bytes], size: int) -> None:
        self.two_dimensional(data, size, Symbology.AZTEC)

    def datamatrix(self, data: Union[str, bytes], size: int) -> None:
        self.two_dimensional(data, size, Symbology.DATAMATRIX)

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def get_error_status(self) -> ErrorStatus:
        """
        Query the offline-cause status byte (``DLE EOT 2``).

        One 3-byte write, then exactly one 1-byte read. Do not issue another
        query before this one returns.

        Raises:
            TransportError: If the write or read fails.
        """
        self.write(commands.DLE_EOT_OFFLINE_STATUS)
        response = self._transport.read(1)
        status = ErrorStatus(response[0])
        logger.debug(f"Status {status!r}")
        return status
