"""
Character conversion from Python text to the printer's 8-bit encoding.

A converter is anything with ``encode(text) -> (data, count)``. Two variants
ship with the package:

- ``SingleByteConverter``: one byte per character (ISO 8859-15 by default,
  matching table 40 selected by ``initialize``).
- ``DoubleByteConverter``: East-Asian double-byte sets (GBK by default).

Which one a printer uses is decided once, at construction.

Example:
    >>> conv = SingleByteConverter()
    >>> conv.encode("Preis: 5€")
    (b'Preis: 5\\xa4', 9)
"""

from __future__ import annotations

import codecs
import logging
from typing import Final, FrozenSet, Mapping, Protocol, Sequence, Tuple, runtime_checkable

from thermal_escpos.exceptions import EncodingError

__all__ = [
    "CharacterConverter",
    "SingleByteConverter",
    "DoubleByteConverter",
    "DOUBLE_BYTE_CODECS",
    "converter_for_name",
    "DEFAULT_SUBSTITUTIONS",
    "apply_substitutions",
]

logger = logging.getLogger(__name__)

# Substitutions run on encoded bytes. Entries stay within ASCII control bytes
# so they never touch the trail byte of a double-byte character.
DEFAULT_SUBSTITUTIONS: Final[Tuple[Tuple[bytes, bytes], ...]] = (
    (b"\r\n", b"\n"),
    (b"\r", b"\n"),
)

_ALIASES: Final[Mapping[str, str]] = {
    "latin": "iso8859_15",
    "latin9": "iso8859_15",
    "gbk": "gbk",
    "chinese": "gbk",
}


@runtime_checkable
class CharacterConverter(Protocol):
    """Capability: turn text into printer bytes."""

    encoding: str

    def encode(self, text: str) -> Tuple[bytes, int]:
        """
        Return ``(data, count)`` where ``count`` is the number of characters
        converted.

        Raises:
            EncodingError: If a character has no representation.
        """
        ...


def _encode_strict(text: str, encoding: str) -> Tuple[bytes, int]:
    try:
        data, count = codecs.lookup(encoding).encode(text, "strict")
    except UnicodeEncodeError as e:
        bad = e.object[e.start : e.end]
        logger.warning(f"Cannot encode {bad!r} at position {e.start} as {encoding}")
        raise EncodingError(
            f"Text is not representable in {encoding}",
            encoding=encoding,
            character=bad,
            position=e.start,
        ) from e
    return data, count


# Python codec names (as ``codecs.lookup().name`` reports them) whose
# non-ASCII characters take a lead byte plus a trail byte.
DOUBLE_BYTE_CODECS: Final[FrozenSet[str]] = frozenset(
    {"gbk", "gb2312", "gb18030", "big5", "big5hkscs", "cp950"}
)


class _CodecConverter:
    """Strict codec-backed converter; variants restrict which codecs fit."""

    double_byte: bool = False

    def __init__(self, encoding: str) -> None:
        info = codecs.lookup(encoding)
        if (info.name in DOUBLE_BYTE_CODECS) != self.double_byte:
            kind = "double-byte" if self.double_byte else "single-byte"
            raise ValueError(f"{type(self).__name__} needs a {kind} codec, got {info.name!r}")
        self.encoding = info.name

    def encode(self, text: str) -> Tuple[bytes, int]:
        return _encode_strict(text, self.encoding)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encoding!r})"


class SingleByteConverter(_CodecConverter):
    """Latin-family single-byte tables (``iso8859_15``, ``cp437``, ``cp858``...)."""

    def __init__(self, encoding: str = "iso8859_15") -> None:
        super().__init__(encoding)


class DoubleByteConverter(_CodecConverter):
    """
    East-Asian double-byte tables (``gbk``, ``gb18030``, ``big5``...).

    ASCII stays single-byte; every other character becomes a lead byte
    (>= 0x81) followed by a trail byte.
    """

    double_byte = True

    def __init__(self, encoding: str = "gbk") -> None:
        super().__init__(encoding)


def converter_for_name(name: str) -> CharacterConverter:
    """
    Resolve a configuration name to a converter.

    Accepts the aliases ``latin``/``latin9`` and ``gbk``/``chinese`` or any
    Python codec name; multibyte codecs get a ``DoubleByteConverter``.

    Raises:
        ValueError: If the name is not a known codec.
    """
    codec = _ALIASES.get(name.lower(), name)
    try:
        info = codecs.lookup(codec)
    except LookupError as e:
        raise ValueError(f"Unknown printer encoding: {name!r}") from e

    if info.name in DOUBLE_BYTE_CODECS:
        return DoubleByteConverter(info.name)
    return SingleByteConverter(info.name)


def apply_substitutions(
    data: bytes, substitutions: Sequence[Tuple[bytes, bytes]] = DEFAULT_SUBSTITUTIONS
) -> bytes:
    """Replace byte sequences in table order."""
    for old, new in substitutions:
        data = data.replace(old, new)
    return data
