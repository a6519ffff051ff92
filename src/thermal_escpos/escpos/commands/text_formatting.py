"""
Text formatting ESC/POS commands.

Two-state toggles (underline, smoothing, emphasis), font selection and
justification. Every toggle sends ``1`` or ``0`` in its parameter byte.

Reference: ESC/POS Application Programming Guide, "Print character" commands
"""

from typing import Final

from thermal_escpos.model.enums import Alignment, Font

__all__ = [
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_OFF",
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "underline",
    "kanji_underline",
    "smooth",
    "bold",
    "select_font",
    "align",
]

# =============================================================================
# UNDERLINE
# =============================================================================

ESC_UNDERLINE_ON: Final[bytes] = b"\x1b-\x01"
"""
Enable 1-dot underline.

Command: ESC - 1
Hex: 1B 2D 01
"""

ESC_UNDERLINE_OFF: Final[bytes] = b"\x1b-\x00"
"""
Disable underline.

Command: ESC - 0
Hex: 1B 2D 00
"""

# =============================================================================
# EMPHASIZED (BOLD)
# =============================================================================

ESC_BOLD_ON: Final[bytes] = b"\x1bE\x01"
"""
Enable emphasized printing.

Command: ESC E 1
Hex: 1B 45 01
"""

ESC_BOLD_OFF: Final[bytes] = b"\x1bE\x00"
"""
Disable emphasized printing.

Command: ESC E 0
Hex: 1B 45 00
"""


def _toggle(prefix: bytes, enabled: bool) -> bytes:
    return prefix + (b"\x01" if enabled else b"\x00")


def underline(enabled: bool) -> bytes:
    return ESC_UNDERLINE_ON if enabled else ESC_UNDERLINE_OFF


def kanji_underline(enabled: bool) -> bytes:
    """
    Underline for double-byte (Kanji/Chinese) characters.

    Command: FS - n
    Hex: 1C 2D n
    """
    return _toggle(b"\x1c-", enabled)


def smooth(enabled: bool) -> bytes:
    """
    Turn smoothing of enlarged characters on or off.

    Command: GS b n
    Hex: 1D 62 n

    Note:
        Smoothing is ``GS b``. ``ESC b`` (1B 62) is not a smoothing command
        and is never sent.
    """
    return _toggle(b"\x1db", enabled)


def bold(enabled: bool) -> bytes:
    return ESC_BOLD_ON if enabled else ESC_BOLD_OFF


def select_font(font: Font) -> bytes:
    """
    Select character font.

    Command: ESC M n
    Hex: 1B 4D n
    """
    return b"\x1bM" + bytes([int(font)])


def align(alignment: Alignment) -> bytes:
    """
    Select justification.

    Command: ESC a n
    Hex: 1B 61 n (0 = left, 1 = center, 2 = right)
    """
    return b"\x1ba" + bytes([int(alignment)])
