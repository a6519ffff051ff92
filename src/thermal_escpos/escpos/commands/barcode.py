"""
Barcode commands: 1D symbologies via ``GS k`` and 2D symbologies via the
``GS ( k`` envelope.

Every builder here returns a list of frames. A frame is one discrete write to
the transport; the printer facade writes them in order and stops at the first
failure.

Reference: ESC/POS Application Programming Guide, "Bar Code" and
           "Two-dimensional code" commands
"""

import logging
from typing import Final, List, Union

from thermal_escpos.escpos.commands.sizing import split_length
from thermal_escpos.exceptions import EncodingError, ProgrammingError
from thermal_escpos.model.enums import BarcodeType, Symbology

__all__ = [
    "BARCODE_DIMENSIONS",
    "BARCODE_HRI_FONT",
    "DEFAULT_MODULE_SIZE",
    "MIN_MODULE_SIZE",
    "MAX_MODULE_SIZE",
    "encode_barcode_data",
    "barcode_payload",
    "barcode_frames",
    "clamp_module_size",
    "two_dimensional_envelope",
    "two_dimensional_frames",
]

logger = logging.getLogger(__name__)

# =============================================================================
# 1D BARCODE CONSTANTS
# =============================================================================

BARCODE_DIMENSIONS: Final[bytes] = b"\x1dw\x04\x1dh\x64"
"""
Module width 4, bar height 100 dots.

Command: GS w 4 GS h 100
Hex: 1D 77 04 1D 68 64
"""

BARCODE_HRI_FONT: Final[bytes] = b"\x1df\x00"
"""
HRI character font A.

Command: GS f 0
Hex: 1D 66 00
Note: The readable value is printed as an ordinary text line instead.
"""

_GS_K: Final[bytes] = b"\x1dk"
_GS_PAREN_K: Final[bytes] = b"\x1d(k"

# =============================================================================
# 2D SYMBOL CONSTANTS
# =============================================================================

MIN_MODULE_SIZE: Final[int] = 2
MAX_MODULE_SIZE: Final[int] = 16
DEFAULT_MODULE_SIZE: Final[int] = 3

_FN_MODULE_SIZE: Final[int] = 0x43
_FN_ERROR_CORRECTION: Final[int] = 0x45
_FN_STORE: Final[int] = 0x50
_FN_PRINT: Final[int] = 0x51

_ECC_LEVEL_L: Final[int] = 0x30
_M: Final[int] = 0x30

# cn + fn + m precede the data in the store sub-frame
_STORE_OVERHEAD: Final[int] = 3
MAX_2D_PAYLOAD: Final[int] = 0xFFFF - _STORE_OVERHEAD


# =============================================================================
# 1D BARCODES
# =============================================================================


def encode_barcode_data(data: str) -> bytes:
    """
    Encode barcode content as ASCII.

    Raises:
        EncodingError: If ``data`` contains a non-ASCII character.
    """
    try:
        return data.encode("ascii")
    except UnicodeEncodeError as e:
        raise EncodingError(
            "Barcode data must be ASCII",
            encoding="ascii",
            character=e.object[e.start : e.end],
            position=e.start,
        ) from e


def barcode_payload(data: bytes, barcode_type: BarcodeType) -> bytes:
    """
    Build the ``GS k`` payload frame.

    Command: GS k m d1...dk NUL      (null-terminated types)
             GS k m n d1...dn        (CODE128)

    Args:
        data: ASCII payload.
        barcode_type: Member of the closed ``BarcodeType`` enum.

    Raises:
        ProgrammingError: If ``barcode_type`` is not a ``BarcodeType``.
        ValueError: If a length-prefixed payload exceeds 255 bytes.

    Example:
        >>> barcode_payload(b"12345678", BarcodeType.CODE128)
        b'\\x1dkI\\x0812345678'
    """
    if not isinstance(barcode_type, BarcodeType):
        raise ProgrammingError(
            f"Unsupported barcode type: {barcode_type!r}",
            context={"expected": "BarcodeType"},
        )

    head = _GS_K + bytes([barcode_type.code])
    if barcode_type.length_prefixed:
        if len(data) > 0xFF:
            raise ValueError(
                f"{barcode_type.name} payload must be at most 255 bytes, got {len(data)}"
            )
        return head + bytes([len(data)]) + data
    return head + data + b"\x00"


def barcode_frames(data: str, barcode_type: BarcodeType) -> List[bytes]:
    """
    Full 1D barcode sequence: dimensions, HRI font, payload.

    The readable text line under the symbol is not part of this list; the
    printer facade prints it through the normal text path.
    """
    payload = barcode_payload(encode_barcode_data(data), barcode_type)
    return [BARCODE_DIMENSIONS, BARCODE_HRI_FONT, payload]


# =============================================================================
# 2D SYMBOLS
# =============================================================================


def clamp_module_size(size: int) -> int:
    """Return ``size`` if it lies in [2, 16], otherwise the default 3."""
    if size < MIN_MODULE_SIZE or size > MAX_MODULE_SIZE:
        logger.debug(f"Module size {size} out of range, using {DEFAULT_MODULE_SIZE}")
        return DEFAULT_MODULE_SIZE
    return size


def two_dimensional_envelope(symbology: Symbology, function: int, params: bytes) -> bytes:
    """
    Wrap a function call in the generic 2D envelope.

    Command: GS ( k pL pH cn fn params
    Hex: 1D 28 6B pL pH cn fn ...

    ``pL pH`` encode ``len(params) + 2`` (cn and fn are counted).
    """
    pl, ph = split_length(len(params) + 2)
    return _GS_PAREN_K + bytes([pl, ph, symbology.cn, function]) + params


def two_dimensional_frames(
    data: Union[str, bytes], size: int, symbology: Symbology
) -> List[bytes]:
    """
    Build the sub-frames that store and print one 2D symbol.

    Order: module size, error correction (QR only), store data, print.

    Args:
        data: Symbol content. ``str`` is sent as UTF-8.
        size: Module size 2-16; anything else falls back to 3.
        symbology: Target symbology.

    Raises:
        ValueError: If ``data`` is longer than 65532 bytes.

    Example:
        >>> frames = two_dimensional_frames("AB", 3, Symbology.QR)
        >>> frames[2]
        b'\\x1d(k\\x05\\x001P0AB'
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(payload) > MAX_2D_PAYLOAD:
        raise ValueError(f"2D payload must be at most {MAX_2D_PAYLOAD} bytes, got {len(payload)}")

    module_size = clamp_module_size(size)

    frames = [two_dimensional_envelope(symbology, _FN_MODULE_SIZE, bytes([module_size]))]
    if symbology.has_error_correction_step:
        frames.append(
            two_dimensional_envelope(symbology, _FN_ERROR_CORRECTION, bytes([_ECC_LEVEL_L]))
        )
    frames.append(two_dimensional_envelope(symbology, _FN_STORE, bytes([_M]) + payload))
    frames.append(two_dimensional_envelope(symbology, _FN_PRINT, bytes([_M])))
    return frames
