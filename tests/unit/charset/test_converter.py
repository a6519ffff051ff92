import pytest

from thermal_escpos.charset.converter import (
    DEFAULT_SUBSTITUTIONS,
    CharacterConverter,
    DoubleByteConverter,
    SingleByteConverter,
    apply_substitutions,
    converter_for_name,
)
from thermal_escpos.exceptions import EncodingError


def test_single_byte_latin9() -> None:
    conv = SingleByteConverter()
    data, count = conv.encode("Café 5€")
    assert data == b"Caf\xe9 5\xa4"
    assert count == 7


def test_single_byte_rejects_unmappable() -> None:
    with pytest.raises(EncodingError) as exc_info:
        SingleByteConverter().encode("ok 你")
    err = exc_info.value
    assert err.character == "你"
    assert err.position == 3
    assert "iso8859-15" in str(err)


def test_double_byte_gbk() -> None:
    data, count = DoubleByteConverter().encode("A你好")
    assert data == b"A" + "你好".encode("gbk")
    assert len(data) == 5
    assert count == 3


def test_converters_satisfy_capability() -> None:
    assert isinstance(SingleByteConverter(), CharacterConverter)
    assert isinstance(DoubleByteConverter(), CharacterConverter)


@pytest.mark.parametrize(
    "name, cls, encoding",
    [
        ("latin", SingleByteConverter, "iso8859-15"),
        ("LATIN9", SingleByteConverter, "iso8859-15"),
        ("cp437", SingleByteConverter, "cp437"),
        ("gbk", DoubleByteConverter, "gbk"),
        ("chinese", DoubleByteConverter, "gbk"),
        ("gb18030", DoubleByteConverter, "gb18030"),
    ],
)
def test_converter_for_name(name: str, cls: type, encoding: str) -> None:
    conv = converter_for_name(name)
    assert isinstance(conv, cls)
    assert conv.encoding == encoding


def test_converter_for_unknown_name() -> None:
    with pytest.raises(ValueError):
        converter_for_name("klingon")


def test_substitutions_normalize_line_endings() -> None:
    assert apply_substitutions(b"a\r\nb\rc\n", DEFAULT_SUBSTITUTIONS) == b"a\nb\nc\n"


def test_substitutions_leave_double_byte_text_intact() -> None:
    data = "收据\r\n".encode("gbk")
    assert apply_substitutions(data) == "收据\n".encode("gbk")


def test_custom_substitutions() -> None:
    assert apply_substitutions(b"a\tb", [(b"\t", b"    ")]) == b"a    b"


@pytest.mark.parametrize("encoding", ["iso8859_15", "cp437", "latin-1"])
def test_double_byte_rejects_single_byte_codec(encoding: str) -> None:
    with pytest.raises(ValueError):
        DoubleByteConverter(encoding)


@pytest.mark.parametrize("encoding", ["gbk", "cp936", "big5"])
def test_single_byte_rejects_double_byte_codec(encoding: str) -> None:
    with pytest.raises(ValueError):
        SingleByteConverter(encoding)


def test_repr_names_variant() -> None:
    assert repr(DoubleByteConverter("gb2312")) == "DoubleByteConverter('gb2312')"
    assert repr(SingleByteConverter()) == "SingleByteConverter('iso8859-15')"
