"""
Exceptions raised by the ESC/POS encoder.

Only I/O and text conversion can fail; frame builders are pure byte assembly
and raise ``ValueError`` solely for lengths the protocol cannot encode.

Hierarchy:
    EscPosError (base)
    ├── TransportError     write/read failure, closed printer, short read
    ├── EncodingError      text not representable in the printer encoding
    └── ProgrammingError   non-member passed to an enum-dispatched builder

Example:
    >>> from thermal_escpos.exceptions import EscPosError
    >>> try:
    ...     printer.print_line("Total: 12.50")
    ... except EscPosError as e:
    ...     logger.error(f"Printing failed: {e}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "EscPosError",
    "TransportError",
    "EncodingError",
    "ProgrammingError",
]


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class EscPosError(Exception):
    """
    Base class for all encoder errors.

    Attributes:
        message: Human readable description.
        context: Extra debugging details (operation, byte counts, ...).
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# ==============================================================================
# CONCRETE ERRORS
# ==============================================================================


class TransportError(EscPosError):
    """
    The underlying byte stream failed.

    Always fatal to the current call. The underlying ``OSError`` (if any) is
    chained as ``__cause__``; nothing is retried.

    Attributes:
        operation: ``"write"``, ``"read"`` or ``"close"``.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ctx = {"operation": operation}
        ctx.update(context or {})
        super().__init__(message, context=ctx)
        self.operation = operation


class EncodingError(EscPosError):
    """
    Text cannot be represented in the printer's target encoding.

    Attributes:
        encoding: Codec name of the converter.
        character: The offending character (if known).
        position: Index of the offending character in the input text.
    """

    def __init__(
        self,
        message: str,
        *,
        encoding: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        ctx: Dict[str, Any] = {"encoding": encoding}
        if character is not None:
            ctx["character"] = repr(character)
        if position is not None:
            ctx["position"] = position
        super().__init__(message, context=ctx)
        self.encoding = encoding
        self.character = character
        self.position = position


class ProgrammingError(EscPosError):
    """A value outside a closed enumeration reached a dispatching builder."""

    pass
