"""Text routines in the manner of the classic null-terminated string functions.

A ``"\\0"`` character in any argument ends the string, as it would in a
character buffer. Functions that locate something return an index into the
string, or None when nothing is found.
"""

from __future__ import annotations

from collections.abc import Iterator

_NUL = "\0"


def _cstr(text: str) -> str:
    return text.partition(_NUL)[0]


def _char(c: str | int) -> str:
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_n(n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")


def strlen(text: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_cstr(text))


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most ``n`` characters of ``src`` appended to ``dest``."""
    _check_n(n)
    return _cstr(dest) + _cstr(src)[:n]


def strchr(text: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``text``.

    Searching for the terminator finds it at the end of the string.
    """
    text, ch = _cstr(text), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``text``."""
    text, ch = _cstr(text), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: int | None) -> int:
    pairs = zip(_cstr(first) + _NUL, _cstr(second) + _NUL)
    for position, (a, b) in enumerate(pairs):
        if limit is not None and position >= limit:
            break
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the difference of the first mismatch or 0."""
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _check_n(n)
    return _compare(first, second, n)


def strncpy(dest: str, src: str, n: int) -> str:
    """Write exactly ``n`` characters of ``src`` over the start of ``dest``.

    A short ``src`` is padded with terminators; a long one is cut without
    one, so the rest of ``dest`` shows through. Returns the resulting string.
    """
    _check_n(n)
    written = _cstr(src)[:n].ljust(n, _NUL)
    return _cstr(written + dest[n:])


def strcpy(dest: str, src: str) -> str:
    """Write ``src`` and its terminator over ``dest``; return the result."""
    return strncpy(dest, src, strlen(src) + 1)


def strcspn(text: str, reject: str) -> int:
    """Return the length of the leading part of ``text`` with no char of ``reject``."""
    text, rejected = _cstr(text), set(_cstr(reject))
    return next((i for i, ch in enumerate(text) if ch in rejected), len(text))


def strspn(text: str, accept: str) -> int:
    """Return the length of the leading part of ``text`` made only of ``accept``."""
    text, accepted = _cstr(text), set(_cstr(accept))
    return next((i for i, ch in enumerate(text) if ch not in accepted), len(text))


def strpbrk(text: str, accept: str) -> int | None:
    """Return the index of the first character of ``text`` found in ``accept``."""
    index = strcspn(text, accept)
    return None if index == strlen(text) else index


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle`` in ``haystack``."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


class Tokenizer:
    """Splits a string into tokens, one call at a time.

    Each call may use a different set of delimiters.
    """

    def __init__(self, text: str) -> None:
        self._text = _cstr(text)
        self._pos = 0

    def next_token(self, delim: str) -> str | None:
        """Return the next token, or None when the string is exhausted."""
        text = self._text
        start = self._pos + strspn(text[self._pos:], delim)
        end = start + strcspn(text[start:], delim)
        self._pos = end + 1 if end < len(text) else end
        return text[start:end] if start < len(text) else None


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield the tokens of ``text`` separated by any character of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token