import pytest

from utf_core.buffers import new_unit_buffer, units_to_bytes
from utf_core.encoder import (
    encode_scalars,
    encode_string,
    encode_utf8,
    utf16_encode,
    utf16_encode_rune,
    utf16_encode_string,
)
from utf_core.errors import BufferTooSmallError
from utf_core.surrogates import REPLACEMENT_CHAR


@pytest.mark.parametrize(
    "scalar, expected",
    [
        (0x41, [0x41]),
        (0xD7FF, [0xD7FF]),
        (0xE000, [0xE000]),
        (0xFFFF, [0xFFFF]),
        (0x10000, [0xD800, 0xDC00]),
        (0x1F600, [0xD83D, 0xDE00]),
        (0x10FFFF, [0xDBFF, 0xDFFF]),
    ],
)
def test_encode_rune_valid(scalar: int, expected: list[int]) -> None:
    dst = new_unit_buffer(2)
    written = utf16_encode_rune(dst, scalar)
    assert written == len(expected)
    assert list(dst[:written]) == expected


@pytest.mark.parametrize("scalar", [-1, 0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000, 0x7FFFFFFF])
def test_encode_rune_invalid_writes_replacement(scalar: int) -> None:
    dst = new_unit_buffer(2)
    assert utf16_encode_rune(dst, scalar) == 1
    assert dst[0] == REPLACEMENT_CHAR
    assert dst[1] == 0


def test_encode_rune_at_offset():
    dst = [0, 0, 0]
    assert utf16_encode_rune(dst, 0x1F600, 1) == 2
    assert dst == [0, 0xD83D, 0xDE00]


def test_encode_rune_without_capacity():
    with pytest.raises(BufferTooSmallError):
        utf16_encode_rune(new_unit_buffer(0), 0x41)
    dst = new_unit_buffer(1)
    with pytest.raises(BufferTooSmallError) as excinfo:
        utf16_encode_rune(dst, 0x1F600)
    assert excinfo.value.required == 2
    assert excinfo.value.available == 1
    assert dst[0] == 0


def test_encode_rune_single_slot_is_enough_for_bmp():
    dst = new_unit_buffer(1)
    assert utf16_encode_rune(dst, 0xFFFF) == 1


def test_encode_string():
    dst = new_unit_buffer(3)
    assert utf16_encode_string(dst, "a\U0001F600") == 3
    assert list(dst) == [0x61, 0xD83D, 0xDE00]


def test_encode_string_lone_surrogate():
    dst = new_unit_buffer(1)
    assert utf16_encode_string(dst, "\ud800") == 1
    assert dst[0] == REPLACEMENT_CHAR


def test_encode_empty_sources():
    dst = new_unit_buffer(0)
    assert utf16_encode_string(dst, "") == 0
    assert utf16_encode(dst, b"") == 0


def test_encode_string_short_buffer():
    dst = new_unit_buffer(2)
    with pytest.raises(BufferTooSmallError):
        utf16_encode_string(dst, "a\U0001F600")
    assert list(dst) == [0, 0]


def test_encode_utf8():
    source = "hé\U0001F600".encode("utf-8")
    dst = new_unit_buffer(4)
    assert utf16_encode(dst, source) == 4
    assert list(dst) == [0x68, 0xE9, 0xD83D, 0xDE00]


def test_encode_utf8_replaces_malformed_bytes():
    dst = new_unit_buffer(3)
    assert utf16_encode(dst, b"a\xffb") == 3
    assert list(dst) == [0x61, REPLACEMENT_CHAR, 0x62]


def test_encode_utf8_short_buffer_is_rejected_before_writing():
    dst = new_unit_buffer(2)
    with pytest.raises(BufferTooSmallError) as excinfo:
        utf16_encode(dst, b"abc")
    assert excinfo.value.required == 3
    assert list(dst) == [0, 0]


def test_encode_utf8_leaves_slack_untouched():
    dst = [7, 7, 7, 7, 7]
    assert utf16_encode(dst, b"ab") == 2
    assert dst == [0x61, 0x62, 7, 7, 7]


def test_encode_scalars_generic_source():
    dst = new_unit_buffer(4)
    assert encode_scalars(dst, iter([0x41, 0x10000, 0x110000])) == 4
    assert list(dst) == [0x41, 0xD800, 0xDC00, REPLACEMENT_CHAR]


def test_allocating_helpers_match_python_codec():
    text = "Grüße, 世界 \U0001F30D"
    assert units_to_bytes(encode_string(text), "little") == text.encode("utf-16-le")
    assert units_to_bytes(encode_utf8(text.encode("utf-8")), "little") == text.encode("utf-16-le")


def test_encode_rune_rejects_negative_offset():
    dst = [0, 0, 0]
    with pytest.raises(ValueError):
        utf16_encode_rune(dst, 0x1F600, -1)
    assert dst == [0, 0, 0]


def test_encode_rune_offset_at_end_has_no_capacity():
    dst = [0, 0]
    with pytest.raises(BufferTooSmallError):
        utf16_encode_rune(dst, 0x41, 2)
    with pytest.raises(BufferTooSmallError):
        utf16_encode_rune(dst, 0x41, 5)


def test_encode_scalars_rejects_bad_offsets():
    dst = new_unit_buffer(2)
    with pytest.raises(ValueError):
        encode_scalars(dst, [], -1)
    with pytest.raises(BufferTooSmallError):
        encode_scalars(dst, [], 3)
    assert encode_scalars(dst, [], 2) == 0
    assert list(dst) == [0, 0]


def test_encode_scalars_at_offset():
    dst = new_unit_buffer(3)
    assert encode_scalars(dst, [0x10000], 1) == 2
    assert list(dst) == [0, 0xD800, 0xDC00]


def test_encoding_writes_nothing_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    utf16_encode_string(new_unit_buffer(1), "\ud800")
    with pytest.raises(BufferTooSmallError):
        utf16_encode(new_unit_buffer(1), b"ab")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
