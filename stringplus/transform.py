"""Functions that build new strings: case changes, insertion and trimming."""

from __future__ import annotations

import string

from .strings import strlen

DEFAULT_TRIM_CHARS = "\f\n\v\t\r "

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _text(value: str) -> str:
    return value[: strlen(value)]


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII lower-case letters made upper case."""
    return _text(text).translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII upper-case letters made lower case."""
    return _text(text).translate(_TO_LOWER)


def insert(dest: str, src: str, start_index: int) -> str:
    """Return ``dest`` with ``src`` inserted before position ``start_index``.

    Raises IndexError unless ``start_index`` falls inside ``dest``.
    """
    dest = _text(dest)
    if not 0 <= start_index < len(dest):
        raise IndexError(
            f"start index {start_index} out of range for length {len(dest)}"
        )
    return dest[:start_index] + _text(src) + dest[start_index:]


def trim(src: str, trim_chars: str | None = None) -> str:
    """Remove characters in ``trim_chars`` from both ends of ``src``.

    When ``trim_chars`` is None or empty, white space is removed.
    """
    chars = _text(trim_chars) if trim_chars else ""
    return _text(src).strip(chars or DEFAULT_TRIM_CHARS)