"""
Unit tests for thermal_escpos/__init__.py
Package metadata, logging setup, configuration loading and the public API.
"""

import json
import logging
import re
from importlib import reload
from pathlib import Path
from unittest import mock

import thermal_escpos


class TestVersionMetadata:
    """Version metadata and constants."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", thermal_escpos.__version__)

    def test_version_components(self) -> None:
        expected = (
            f"{thermal_escpos.VERSION_MAJOR}."
            f"{thermal_escpos.VERSION_MINOR}."
            f"{thermal_escpos.VERSION_PATCH}"
        )
        assert thermal_escpos.__version__ == expected


class TestPublicAPI:
    """Exports of the package root."""

    def test_all_exports_exist(self) -> None:
        for name in thermal_escpos.__all__:
            assert hasattr(thermal_escpos, name), f"'{name}' from __all__ is missing"

    def test_no_duplicate_exports(self) -> None:
        assert len(thermal_escpos.__all__) == len(set(thermal_escpos.__all__))

    def test_facade_exported(self) -> None:
        assert "Printer" in thermal_escpos.__all__
        assert "load_config" in thermal_escpos.__all__


class TestLogging:
    """Logging configuration."""

    def test_get_logger_prefixes_name(self) -> None:
        assert thermal_escpos.get_logger("test_module").name == "thermal_escpos.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        logger = thermal_escpos.get_logger("thermal_escpos.printer")
        assert logger.name == "thermal_escpos.printer"

    def test_get_logger_with_main(self) -> None:
        assert thermal_escpos.get_logger("__main__").name == "thermal_escpos.main"

    def test_logger_is_configured(self) -> None:
        root_logger = logging.getLogger("thermal_escpos")
        assert len(root_logger.handlers) >= 1
        assert root_logger.propagate is False

    def test_log_level_from_environment(self) -> None:
        root_logger = logging.getLogger("thermal_escpos")
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        try:
            with mock.patch.dict("os.environ", {"ESCPOS_LOG_LEVEL": "DEBUG"}):
                for handler in root_logger.handlers[:]:
                    root_logger.removeHandler(handler)
                reload(thermal_escpos)
                assert logging.getLogger("thermal_escpos").level == logging.DEBUG
        finally:
            for handler in root_logger.handlers[:]:
                root_logger.removeHandler(handler)
            for handler in saved_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)


class TestConfiguration:
    """Configuration loading."""

    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        config = thermal_escpos.load_config(tmp_path / "missing.json")
        assert config["encoding"] == "latin"
        assert config["character_table"] == 40
        assert config["write_timeout_seconds"] == 10.0

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"encoding": "gbk"}), encoding="utf-8")
        config = thermal_escpos.load_config(path)
        assert config["encoding"] == "gbk"
        assert config["character_table"] == 40

    def test_invalid_json_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert thermal_escpos.load_config(path)["encoding"] == "latin"

    def test_non_object_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert thermal_escpos.load_config(path)["encoding"] == "latin"

    def test_log_level_from_config_reaches_handlers(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
        root_logger = logging.getLogger("thermal_escpos")
        saved_level = root_logger.level
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        capture = ListHandler()
        root_logger.addHandler(capture)
        try:
            thermal_escpos.load_config(path)
            thermal_escpos.get_logger("printer").debug("frame sent")
            assert "frame sent" in [r.getMessage() for r in records]
            for handler in root_logger.handlers:
                assert handler.level <= logging.DEBUG
        finally:
            root_logger.removeHandler(capture)
            root_logger.setLevel(saved_level)
