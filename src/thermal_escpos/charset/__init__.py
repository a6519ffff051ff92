"""Text-to-printer character conversion."""

from thermal_escpos.charset.converter import (
    DEFAULT_SUBSTITUTIONS,
    CharacterConverter,
    DoubleByteConverter,
    SingleByteConverter,
    apply_substitutions,
    converter_for_name,
)

__all__ = [
    "CharacterConverter",
    "SingleByteConverter",
    "DoubleByteConverter",
    "converter_for_name",
    "DEFAULT_SUBSTITUTIONS",
    "apply_substitutions",
]
