import struct

import pytest

from stringplus.memory import memchr, memcmp, memcpy, memmove, memset


def padded(text: bytes, size: int = 100) -> bytearray:
    return bytearray(text.ljust(size, b"\0"))


@pytest.mark.parametrize(
    "data, c, count, expected",
    [
        (b"", 0, 0, None),
        (b"sfasdf\0", 0, 7, 6),
        (b"AdsfAb", ord("A"), 6, 0),
        (b"Adsfab", ord("A"), 0, None),
        (b"string123", ord("2"), 0, None),
        (b"adkfdsa\0", ord("a"), 8, 0),
        (b"adada\0", ord("c"), 6, None),
        (b"string123", ord("2"), 9, 7),
    ],
)
def test_memchr(data, c, count, expected):
    assert memchr(data, c, count) == expected


def test_memchr_in_int_array_uses_low_byte():
    data = struct.pack("<7i", 1, 2, 3, 666, 5, 99, 100)
    assert memchr(data, 666, len(data)) == 12


def test_memchr_in_float_array_finds_nothing():
    data = struct.pack("<7f", 1, 2, 3, 666, 5, 99, 100)
    assert memchr(data, 666, len(data)) is None


def test_memchr_count_beyond_buffer():
    with pytest.raises(ValueError):
        memchr(b"abc", ord("a"), 4)


@pytest.mark.parametrize(
    "first, second, n, expected",
    [
        (b"Hello", b"Hello", 0, 0),
        (b"Hello", b"Hello", 3, 0),
        (b"Hello", b"hello", 1, -32),
        (b"1", b"1", 0, 0),
        (b"1234", b"1234", 2, 0),
        (b"13", b"1234", 2, 1),
        (
            b"111111111111111111112312312312312312434524563567adsfe 4rafa ewfseASDASD",
            b"111111111111111111112312312312312312434524563567adsfe 4rafa ewfseASDASD",
            71,
            0,
        ),
        (
            b"111111111111111111112312312312312312434524563567adsfe 4rafa ewfseASDASD",
            b"111111111111111111112312312312312312434524563567adsfe 4rafa ewfseASDASd",
            71,
            -32,
        ),
    ],
)
def test_memcmp(first, second, n, expected):
    assert memcmp(first, second, n) == expected


def test_memcmp_negative_count():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)


@pytest.mark.parametrize(
    "source, count",
    [
        (b"It's gonna be sad, you know\0", 28),
        (b"\0", 0),
        (b"I\0", 1),
        (b"It's gonna be sad, you know\0", 0),
        (b"123321\0", 5),
        (b"It's gonna be sad, you know\0", 2),
        (b"123321\0", 1),
        (b"aodasf ieuwfh luhasdfLIAUSHD liuh 12li3uh 12i4ouhsdfh\0", 53),
    ],
)
def test_memcpy(source, count):
    dest = bytearray(count + 10)
    result = memcpy(dest, source, count)
    assert result is dest
    assert dest[:count] == source[:count]
    assert dest[count:] == bytes(10)


@pytest.mark.parametrize(
    "source, count",
    [
        (b"SDKJGALDFG;ADFJNG;DFNG\0", 28),
        (b"It's gonna be sad, you know. " * 9 + b"\0", 270),
    ],
)
def test_memcpy_count_longer_than_source(source, count):
    with pytest.raises(ValueError):
        memcpy(bytearray(count + 10), source, count)


def test_memcpy_into_readonly_buffer():
    with pytest.raises(TypeError):
        memcpy(b"abc", b"xyz", 3)


def test_memmove_empty():
    buf = padded(b"")
    memmove(buf, buf, 0)
    assert buf == bytearray(100)


def test_memmove_into_empty_dest():
    dest = padded(b"")
    memmove(dest, padded(b"123SDFAZ`ESFsdfsdf"), 10)
    assert dest[:10] == b"123SDFAZ`E"


def test_memmove_empty_src():
    dest = padded(b"i asdqwe love")
    memmove(dest, padded(b""), 0)
    assert dest[:13] == b"i asdqwe love"


def test_memmove_write_in_left():
    dest = padded(b"i hate memcmp")
    memmove(dest, padded(b"Hate"), 4)
    assert dest[:17] == b"Hatete memcmp\0\0\0\0"


def test_memmove_write_in_right():
    dest = padded(b"I asdadasgtrs...")
    memmove(memoryview(dest)[13:], padded(b"like"), 4)
    assert dest[:17] == b"I asdadasgtrslike"


def test_memmove_write_in_mid():
    dest = padded(b"I asdadasgtrs")
    memmove(memoryview(dest)[5:], padded(b"like"), 4)
    assert dest[:17] == b"I asdlikegtrs\0\0\0\0"


def test_memmove_overlap_same_start():
    buf = padded(b"I asdadasgtrs...")
    memmove(buf, buf, 17)
    assert buf[:34] == b"I asdadasgtrs..." + bytes(18)


def test_memmove_overlap_forward():
    buf = padded(b"u love memsets...")
    memmove(memoryview(buf)[5:], buf, 17)
    assert buf[5:39] == b"u love memsets..." + bytes(17)
    assert buf[:5] == b"u lov"


@pytest.mark.parametrize(
    "c, count, expected",
    [
        ("g", 5, b"gggggg"),
        ("\0", 0, b"string"),
        ("g", 6, b"gggggg"),
        ("1", 1, b"1tring"),
        ("A", 2, b"AAring"),
        ("+", 3, b"+++ing"),
    ],
)
def test_memset(c, count, expected):
    buf = bytearray(b"string")
    assert memset(buf, ord(c), count) is buf
    assert buf == expected


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 2)
    assert buf == b"AA\0"


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)