"""
Character size and print area commands.

Contains the packed ``GS !`` size select, the ``FS !`` double-width and
double-height modes, and ``GS W`` print area width. The little-endian
two-byte length split used here is shared with the 2D barcode envelope.

Reference: ESC/POS Application Programming Guide, "Print position" and
           "Print character" commands
"""

from typing import Final, Tuple

__all__ = [
    "FS_DOUBLE_HEIGHT",
    "FS_DOUBLE_WIDTH",
    "split_length",
    "pack_size",
    "select_size",
    "double_height",
    "double_width",
    "double_size",
    "print_area_width",
]

# =============================================================================
# FS ! MODE BITS
# =============================================================================

FS_DOUBLE_WIDTH: Final[int] = 0x04
"""Bit 2 of the ``FS !`` register: double-width double-byte characters."""

FS_DOUBLE_HEIGHT: Final[int] = 0x08
"""Bit 3 of the ``FS !`` register: double-height double-byte characters."""


# =============================================================================
# LENGTH ENCODING
# =============================================================================


def split_length(value: int) -> Tuple[int, int]:
    """
    Split a 16-bit value into ``(low, high)`` bytes (nL, nH).

    Args:
        value: 0-65535.

    Returns:
        ``(value % 256, value // 256)``.

    Raises:
        ValueError: If value does not fit in two bytes.

    Example:
        >>> split_length(380)
        (124, 1)
    """
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"Length must be 0-65535, got {value}")
    return value % 256, value // 256


# =============================================================================
# CHARACTER SIZE
# =============================================================================


def pack_size(width: int, height: int) -> int:
    """
    Pack magnification factors into the ``GS !`` parameter byte.

    Width goes to the high nibble, height to the low nibble, both stored as
    ``factor - 1``. Precondition: 1 <= width, height <= 16; other values give
    a meaningless (but single-byte) result.
    """
    return (((width - 1) << 4) | (height - 1)) & 0xFF


def select_size(width: int, height: int) -> bytes:
    """
    Select character size.

    Command: GS ! n
    Hex: 1D 21 n

    Example:
        >>> select_size(2, 2)
        b'\\x1d!\\x11'
    """
    return b"\x1d!" + bytes([pack_size(width, height)])


def double_height(enabled: bool) -> bytes:
    """
    Double-height mode for double-byte characters.

    Command: FS ! n
    Hex: 1C 21 08 (on) / 1C 21 00 (off)

    Note:
        ``FS !`` rewrites the whole mode register: this clears double width.
        Use ``double_size`` to set both at once.
    """
    return double_size(width=False, height=enabled)


def double_width(enabled: bool) -> bytes:
    """
    Double-width mode for double-byte characters.

    Command: FS ! n
    Hex: 1C 21 04 (on) / 1C 21 00 (off)

    Note:
        Shares the register with ``double_height`` (see there).
    """
    return double_size(width=enabled, height=False)


def double_size(width: bool, height: bool) -> bytes:
    n = 0
    if width:
        n |= FS_DOUBLE_WIDTH
    if height:
        n |= FS_DOUBLE_HEIGHT
    return b"\x1c!" + bytes([n])


# =============================================================================
# PRINT AREA
# =============================================================================


def print_area_width(width: int) -> bytes:
    """
    Set print area width in dots.

    Command: GS W nL nH
    Hex: 1D 57 nL nH

    Widths above 65535 wrap to 16 bits, like every other parameter byte;
    this builder never raises.

    Example:
        >>> print_area_width(380)  # narrow card-terminal receipts
        b'\\x1dW|\\x01'
    """
    nl, nh = split_length(width & 0xFFFF)
    return b"\x1dW" + bytes([nl, nh])
