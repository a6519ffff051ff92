import pytest

from thermal_escpos.model.enums import (
    DEFAULT_CHARACTER_TABLE,
    Alignment,
    BarcodeType,
    CharacterTable,
    ErrorStatus,
    Font,
    Symbology,
)


def test_alignment_codes() -> None:
    assert [int(a) for a in Alignment] == [0, 1, 2]


def test_font_codes() -> None:
    assert int(Font.A) == 0
    assert int(Font.B) == 1


@pytest.mark.parametrize(
    "barcode_type, code",
    [
        (BarcodeType.UPC_A, 0x41),
        (BarcodeType.UPC_E, 0x42),
        (BarcodeType.EAN13, 0x43),
        (BarcodeType.EAN8, 0x44),
        (BarcodeType.CODE39, 0x45),
        (BarcodeType.ITF, 0x46),
        (BarcodeType.CODABAR, 0x47),
        (BarcodeType.CODE128, 0x49),
    ],
)
def test_barcode_type_codes(barcode_type: BarcodeType, code: int) -> None:
    assert barcode_type.code == code


def test_barcode_codes_are_unique() -> None:
    codes = [t.code for t in BarcodeType]
    assert len(codes) == len(set(codes)) == 8


def test_symbology_identifiers() -> None:
    assert Symbology.PDF417.cn == 0x30
    assert Symbology.QR.cn == 0x31
    assert Symbology.AZTEC.cn == 0x35
    assert Symbology.DATAMATRIX.cn == 0x36
    assert [s for s in Symbology if s.has_error_correction_step] == [Symbology.QR]


def test_default_character_table_is_latin9() -> None:
    assert DEFAULT_CHARACTER_TABLE is CharacterTable.ISO8859_15
    assert int(DEFAULT_CHARACTER_TABLE) == 40


class TestErrorStatus:
    def test_zero_value(self) -> None:
        status = ErrorStatus()
        assert status == 0
        assert not status.cover_open
        assert not status.error_occurred

    def test_raw_value_is_preserved(self) -> None:
        status = ErrorStatus(0x12)
        assert int(status) == 0x12
        assert repr(status) == "ErrorStatus(0x12)"

    @pytest.mark.parametrize(
        "value, attr",
        [
            (0x04, "cover_open"),
            (0x08, "paper_fed_by_button"),
            (0x20, "paper_end_stop"),
            (0x40, "error_occurred"),
        ],
    )
    def test_named_bits(self, value: int, attr: str) -> None:
        assert getattr(ErrorStatus(value | 0x12), attr) is True
        assert getattr(ErrorStatus(0x12), attr) is False

    @pytest.mark.parametrize("value", [-1, 256])
    def test_rejects_non_byte(self, value: int) -> None:
        with pytest.raises(ValueError):
            ErrorStatus(value)
