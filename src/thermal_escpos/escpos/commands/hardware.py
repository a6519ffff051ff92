"""
Printer control commands: initialization, end of job, paper feed and cut,
and the real-time status request.

Reference: ESC/POS Application Programming Guide (Epson TM series)
"""

from typing import Final, Union

from thermal_escpos.escpos.commands.charset import select_character_table
from thermal_escpos.model.enums import DEFAULT_CHARACTER_TABLE, CharacterTable

__all__ = [
    "ESC_INIT_PRINTER",
    "END_OF_JOB",
    "GS_FULL_CUT",
    "LF",
    "DLE_EOT_OFFLINE_STATUS",
    "initialize",
    "reset",
    "end_job",
    "cut",
    "feed",
    "newline",
]

# =============================================================================
# CONSTANTS
# =============================================================================

ESC_INIT_PRINTER: Final[bytes] = b"\x1b@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and resets every mode (bold, underline,
        double width/height, character table) to the power-on default.
"""

END_OF_JOB: Final[bytes] = b"\xfa"
"""
Finalize the print job.

Hex: FA
Note: Does not close the connection.
"""

GS_FULL_CUT: Final[bytes] = b"\x1dVA0"
"""
Feed to the cutter and cut.

Command: GS V A 0
Hex: 1D 56 41 30
"""

LF: Final[bytes] = b"\n"
"""Print buffer contents and feed one line (Hex: 0A)."""

DLE_EOT_OFFLINE_STATUS: Final[bytes] = b"\x10\x04\x02"
"""
Real-time status request, offline cause (n = 2).

Command: DLE EOT 2
Hex: 10 04 02
Response: exactly one status byte.
"""


# =============================================================================
# BUILDERS
# =============================================================================


def initialize(table: Union[CharacterTable, int] = DEFAULT_CHARACTER_TABLE) -> bytes:
    """
    Reset the printer and select a character table.

    Command: ESC @ ESC t n
    Hex: 1B 40 1B 74 n

    Args:
        table: ``ESC t`` table id, ISO 8859-15 (40) by default.

    Note:
        Callers must not assume any previous toggle survives this command.
    """
    return ESC_INIT_PRINTER + select_character_table(table)


def reset() -> bytes:
    """Bare ``ESC @`` without a character table selection."""
    return ESC_INIT_PRINTER


def end_job() -> bytes:
    return END_OF_JOB


def cut() -> bytes:
    return GS_FULL_CUT


def feed(lines: int) -> bytes:
    """
    Print and feed paper ``lines`` lines.

    Command: ESC d n
    Hex: 1B 64 n

    Args:
        lines: Line count, 0-255. Larger values wrap to one byte.
    """
    return b"\x1bd" + bytes([lines & 0xFF])


def newline() -> bytes:
    return LF
