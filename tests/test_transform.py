import pytest

from stringplus.transform import insert, to_lower, to_upper, trim

GARBLE = "+!0-aeoi2o3i23iuhuhh3O*YADyagsduyoaweq213"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("mac top", "MAC TOP"),
        ("123", "123"),
        ("", ""),
        (" ", " "),
        ("caf\u00e9", "CAF\u00e9"),
        ("ab\0cd", "AB"),
    ],
)
def test_to_upper(text, expected):
    assert to_upper(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("MAC TOP", "mac top"),
        ("123", "123"),
        ("", ""),
        (" ", " "),
        ("\u00c9A", "\u00c9a"),
    ],
)
def test_to_lower(text, expected):
    assert to_lower(text) == expected


def test_insert():
    assert insert("Hello, world!", "beautiful ", 7) == "Hello, beautiful world!"


def test_insert_at_start():
    assert insert("world", "hello ", 0) == "hello world"


@pytest.mark.parametrize("index", [15, 13, -1])
def test_insert_out_of_range(index):
    with pytest.raises(IndexError):
        insert("Hello, world!", "beautiful ", index)


def test_insert_into_empty():
    with pytest.raises(IndexError):
        insert("", "x", 0)


@pytest.mark.parametrize(
    "src, trim_chars, expected",
    [
        ("", "", ""),
        ("", GARBLE, ""),
        (GARBLE, "", GARBLE),
        (GARBLE, GARBLE, ""),
        ("+!!++Abo+ba++00", "+!0-", "Abo+ba"),
        ("Ab000cd0", "003", "Ab000cd"),
        ("DoNotTouch", "Not", "DoNotTouch"),
        ("&* !!sc21 * **", "&!* ", "sc21"),
        (" Good morning!    ", " ", "Good morning!"),
        ("        abc         ", "", "abc"),
        ("        abc         ", None, "abc"),
        ("\t\n abc \r\f\v", None, "abc"),
    ],
)
def test_trim(src, trim_chars, expected):
    assert trim(src, trim_chars) == expected


def test_trim_default_argument():
    assert trim("  x  ") == "x"