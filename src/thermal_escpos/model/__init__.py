"""Immutable value types shared by the command builders and the printer."""

from thermal_escpos.model.enums import (
    DEFAULT_CHARACTER_TABLE,
    Alignment,
    BarcodeType,
    CharacterTable,
    ErrorStatus,
    Font,
    Symbology,
)

__all__ = [
    "Alignment",
    "BarcodeType",
    "CharacterTable",
    "DEFAULT_CHARACTER_TABLE",
    "ErrorStatus",
    "Font",
    "Symbology",
]
