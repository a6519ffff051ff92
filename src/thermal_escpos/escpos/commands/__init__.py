"""
ESC/POS command builders for thermal receipt printers.

Every function here is pure byte assembly: it takes typed parameters and
returns the exact bytes of one directive (or, for barcodes, a list of
frames). No I/O happens in this package; writing is the printer facade's job.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── hardware.py             # Init, end of job, feed, cut, status request
    ├── text_formatting.py      # Underline, bold, smoothing, font, alignment
    ├── sizing.py               # GS ! size, FS ! double modes, print area
    ├── charset.py              # ESC t tables, ESC R international sets
    └── barcode.py              # GS k 1D barcodes, GS ( k 2D symbols

Usage:
    >>> from thermal_escpos.escpos.commands import initialize, bold, cut
    >>> job = initialize() + bold(True) + b"TOTAL" + bold(False) + cut()
"""

# Barcode commands
from thermal_escpos.escpos.commands.barcode import (
    BARCODE_DIMENSIONS,
    BARCODE_HRI_FONT,
    barcode_frames,
    barcode_payload,
    clamp_module_size,
    encode_barcode_data,
    two_dimensional_envelope,
    two_dimensional_frames,
)

# Character set commands
from thermal_escpos.escpos.commands.charset import (
    select_character_set,
    select_character_table,
)

# Hardware control commands
from thermal_escpos.escpos.commands.hardware import (
    DLE_EOT_OFFLINE_STATUS,
    END_OF_JOB,
    ESC_INIT_PRINTER,
    GS_FULL_CUT,
    LF,
    cut,
    end_job,
    feed,
    initialize,
    newline,
    reset,
)

# Sizing commands
from thermal_escpos.escpos.commands.sizing import (
    double_height,
    double_size,
    double_width,
    pack_size,
    print_area_width,
    select_size,
    split_length,
)

# Text formatting commands
from thermal_escpos.escpos.commands.text_formatting import (
    align,
    bold,
    kanji_underline,
    select_font,
    smooth,
    underline,
)

__all__ = [
    # Hardware
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
    # Text formatting
    "underline",
    "kanji_underline",
    "smooth",
    "bold",
    "select_font",
    "align",
    # Sizing
    "split_length",
    "pack_size",
    "select_size",
    "double_height",
    "double_width",
    "double_size",
    "print_area_width",
    # Charset
    "select_character_table",
    "select_character_set",
    # Barcode
    "BARCODE_DIMENSIONS",
    "BARCODE_HRI_FONT",
    "encode_barcode_data",
    "barcode_payload",
    "barcode_frames",
    "clamp_module_size",
    "two_dimensional_envelope",
    "two_dimensional_frames",
]
