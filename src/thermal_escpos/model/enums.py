"""
model/enums.py

Value types for the ESC/POS encoder: fonts, alignment, barcode and 2D
symbology identifiers, character tables and the device status byte.

NO command assembly here! Each member only carries the protocol byte it maps
to (plus, for barcodes, how its payload length is encoded).

See Also:
    - thermal_escpos.escpos.commands (for protocol logic)
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final

__all__ = [
    "Font",
    "Alignment",
    "BarcodeType",
    "Symbology",
    "CharacterTable",
    "ErrorStatus",
    "DEFAULT_CHARACTER_TABLE",
]


class Font(IntEnum):
    """Printer-resident fonts selected with ``ESC M n``."""

    A = 0
    B = 1
    C = 2


class Alignment(IntEnum):
    """Justification selected with ``ESC a n``."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class BarcodeType(Enum):
    """
    1D symbologies accepted by ``GS k`` (function B, m = 65..73).

    Each member is ``(code, length_prefixed)``. Length-prefixed types send
    ``<len> <payload>``; all others send ``<payload> NUL``.
    """

    UPC_A = (0x41, False)
    UPC_E = (0x42, False)
    EAN13 = (0x43, False)
    EAN8 = (0x44, False)
    CODE39 = (0x45, False)
    ITF = (0x46, False)
    CODABAR = (0x47, False)
    CODE128 = (0x49, True)

    def __init__(self, code: int, length_prefixed: bool) -> None:
        self.code = code
        self.length_prefixed = length_prefixed


class Symbology(Enum):
    """
    2D symbologies addressed through the ``GS ( k`` envelope.

    Each member is ``(cn, has_error_correction_step)``.
    """

    PDF417 = (0x30, False)
    QR = (0x31, True)
    AZTEC = (0x35, False)
    DATAMATRIX = (0x36, False)

    def __init__(self, cn: int, has_error_correction_step: bool) -> None:
        self.cn = cn
        self.has_error_correction_step = has_error_correction_step


class CharacterTable(IntEnum):
    """Common ``ESC t n`` character code tables."""

    PC437 = 0
    KATAKANA = 1
    PC850 = 2
    PC860 = 3
    PC863 = 4
    PC865 = 5
    WPC1252 = 16
    PC866 = 17
    PC852 = 18
    PC858 = 19
    ISO8859_15 = 40


DEFAULT_CHARACTER_TABLE: Final[CharacterTable] = CharacterTable.ISO8859_15


class ErrorStatus(int):
    """
    Raw status byte answered to ``DLE EOT 2`` (offline cause).

    The value is transported as-is; the properties only name the bits the
    standard assigns, callers decide what they mean for their printer.
    """

    COVER_OPEN: Final[int] = 0x04
    PAPER_FED_BY_BUTTON: Final[int] = 0x08
    PAPER_END_STOP: Final[int] = 0x20
    ERROR_OCCURRED: Final[int] = 0x40

    def __new__(cls, value: int = 0) -> "ErrorStatus":
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Status must be a single byte, got {value}")
        return super().__new__(cls, value)

    @property
    def cover_open(self) -> bool:
        return bool(self & self.COVER_OPEN)

    @property
    def paper_fed_by_button(self) -> bool:
        return bool(self & self.PAPER_FED_BY_BUTTON)

    @property
    def paper_end_stop(self) -> bool:
        return bool(self & self.PAPER_END_STOP)

    @property
    def error_occurred(self) -> bool:
        return bool(self & self.ERROR_OCCURRED)

    def __repr__(self) -> str:
        return f"ErrorStatus(0x{int(self):02X})"
