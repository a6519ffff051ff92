"""
thermal_escpos
==============

ESC/POS command encoder for thermal receipt printers.

This package provides:
    - Pure builders for ESC/POS directives (init, cut, feed, size, fonts,
      alignment, toggles, print area, character tables)
    - 1D barcodes (UPC, EAN, CODE39, ITF, CODABAR, CODE128) and 2D symbols
      (QR, PDF417, Aztec, DataMatrix)
    - Text conversion to single-byte Latin or double-byte Chinese tables
    - A ``Printer`` facade writing frames to any byte stream, including the
      ``DLE EOT`` status round trip

Basic usage:
    >>> import socket
    >>> from thermal_escpos import Printer, Alignment, BarcodeType, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> sock = socket.create_connection(("192.168.1.50", 9100))
    >>> with Printer(sock, write_timeout=10) as printer:
    ...     printer.init()
    ...     printer.align(Alignment.CENTER)
    ...     printer.print_line("Hello")
    ...     printer.barcode("12345678", BarcodeType.EAN8)
    ...     printer.cut()

Configuration:
    >>> import os
    >>> os.environ['ESCPOS_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from thermal_escpos import load_config, Printer
    >>> config = load_config()
    >>> printer = Printer.from_config(open("/dev/usb/lp0", "r+b", buffering=0), config)
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__description__ = "ESC/POS command encoder for thermal receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.9"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOGGER_NAMESPACE = "thermal_escpos"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Configure the package logger.

    Adds a stderr handler to the ``thermal_escpos`` logger with a
    timestamped format. The level comes from the ``ESCPOS_LOG_LEVEL``
    environment variable (DEBUG, INFO, WARNING, ERROR, CRITICAL; default
    WARNING). The level is set on the logger only; the handler passes every
    record, so ``load_config`` can raise or lower it later. Idempotent: a
    logger that already has handlers is left alone.
    """
    log_level_str = os.environ.get("ESCPOS_LOG_LEVEL", "WARNING").upper()
    log_level = _LOG_LEVELS.get(log_level_str, logging.WARNING)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``thermal_escpos`` namespace.

    Args:
        module_name: Usually ``__name__``. ``"__main__"`` maps to
            ``thermal_escpos.main``; other names are prefixed.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Sending %d frames", 4)
    """
    if module_name == LOGGER_NAMESPACE or module_name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{module_name.lstrip('.')}")


# =============================================================================
# CONFIGURATION
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "encoding": "latin",
    "character_table": 40,
    "write_timeout_seconds": 10.0,
    "log_level": "WARNING",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load printer settings from JSON, falling back to defaults.

    Keys:
        - encoding: str - ``latin``, ``gbk`` or any Python codec name
        - character_table: int - ``ESC t`` table selected by ``init``
        - write_timeout_seconds: float | None - per-write deadline
        - log_level: str - applied to the package logger

    Args:
        config_path: Path to the JSON file; ``escpos_config.json`` in the
            current directory when omitted.

    Returns:
        Defaults updated with the file's values. Missing or invalid files
        are logged and ignored.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("escpos_config.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Config file must contain a JSON object, got {type(user_config).__name__}"
                )

            config.update(user_config)
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Cannot parse {config_path}: invalid JSON at line {e.lineno}, "
                f"column {e.colno}. Using defaults."
            )
        except OSError as e:
            logger.warning(f"Cannot read {config_path}: {e}. Using defaults.")
        except ValueError as e:
            logger.warning(f"Invalid configuration format: {e}. Using defaults.")
    else:
        logger.debug(f"Config file {config_path} not found. Using defaults.")

    level = _LOG_LEVELS.get(str(config.get("log_level", "")).upper())
    if level is not None:
        logging.getLogger(LOGGER_NAMESPACE).setLevel(level)

    return config


# =============================================================================
# PUBLIC API
# =============================================================================

# Imported after the utilities so that logging is configured first.
from thermal_escpos.charset.converter import (  # noqa: E402
    CharacterConverter,
    DoubleByteConverter,
    SingleByteConverter,
    converter_for_name,
)
from thermal_escpos.exceptions import (  # noqa: E402
    EncodingError,
    EscPosError,
    ProgrammingError,
    TransportError,
)
from thermal_escpos.model.enums import (  # noqa: E402
    Alignment,
    BarcodeType,
    CharacterTable,
    ErrorStatus,
    Font,
    Symbology,
)
from thermal_escpos.printer import Printer  # noqa: E402
from thermal_escpos.transport import Transport  # noqa: E402

__all__ = [
    # Version metadata
    "__version__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    # Facade
    "Printer",
    "Transport",
    # Converters
    "CharacterConverter",
    "SingleByteConverter",
    "DoubleByteConverter",
    "converter_for_name",
    # Values
    "Alignment",
    "BarcodeType",
    "CharacterTable",
    "ErrorStatus",
    "Font",
    "Symbology",
    # Errors
    "EscPosError",
    "TransportError",
    "EncodingError",
    "ProgrammingError",
]

_setup_logging()
