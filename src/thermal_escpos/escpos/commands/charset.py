"""
Character set commands.

``ESC t`` selects the code table used for bytes 128-255; ``ESC R`` selects
the international character set that remaps a handful of ASCII positions.
Table ids are firmware dependent and are passed through unvalidated.

Reference: ESC/POS Application Programming Guide, "Character code table"
"""

from typing import Union

from thermal_escpos.model.enums import CharacterTable

__all__ = [
    "select_character_table",
    "select_character_set",
]


def select_character_table(table: Union[CharacterTable, int]) -> bytes:
    """
    Select character code table.

    Command: ESC t n
    Hex: 1B 74 n

    Example:
        >>> select_character_table(CharacterTable.ISO8859_15)
        b'\\x1bt('
    """
    return b"\x1bt" + bytes([int(table) & 0xFF])


def select_character_set(n: int) -> bytes:
    """
    Select international character set.

    Command: ESC R n
    Hex: 1B 52 n

    Note:
        Some Chinese firmware dialects use n = 15 for the GB table.
    """
    return b"\x1bR" + bytes([n & 0xFF])
