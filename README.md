# stringplus

This package provides the classic C string and memory routines, a few helpers
modelled on C# string methods, tables of system error messages, and a
printf-style formatter. All of it works on ordinary Python `str`, `bytes` and
`bytearray` values, and it depends only on the standard library.

## Installation

```
pip install stringplus
```

To run the test suite:

```
pip install "stringplus[test]"
pytest
```

## `stringplus.memory`

These functions operate on byte buffers. Anything that supports the buffer
protocol works: `bytes`, `bytearray` or `memoryview`.

- `memchr(data, c, count)` looks for the byte `c` in the first `count` bytes.
  It returns the offset of the first match, or `None` if there is none.
- `memcmp(first, second, n)` compares the first `n` bytes of the two buffers.
  It returns the difference of the first pair of bytes that differ, or `0`.
- `memcpy(dest, src, count)` copies `count` bytes into the writable buffer
  `dest` and returns `dest`. It reads all the bytes before writing any, so
  overlapping regions are safe.
- `memmove(dest, src, count)` does the same as `memcpy`.
- `memset(dest, c, count)` fills the first `count` bytes of `dest` with `c`
  and returns `dest`.

These functions raise `ValueError` if a count is negative or larger than a
buffer.

```python
from stringplus.memory import memset, memcmp, memchr

buf = bytearray(b"string")
memset(buf, ord("g"), 3)
assert buf == bytearray(b"ggging")
assert memcmp(b"Hello", b"hello", 1) < 0
assert memchr(b"AdsfAb", ord("A"), 6) == 0
```

## `stringplus.strings`

These functions work on `str`. A `"\0"` character in any argument ends the
string, just as it would in a character buffer. Python strings are immutable,
so the functions return new strings instead of changing their arguments. A
function that finds something returns an index, or `None` if nothing is found.

- `strlen(text)` returns the number of characters before the terminator.
- `strcat(dest, src)` and `strncat(dest, src, n)` return `src` appended to
  `dest`. `strncat` appends at most `n` characters.
- `strchr(text, c)` and `strrchr(text, c)` return the index of the first or
  last `c`. The argument `c` may be a one-character string or a code point.
- `strcmp(first, second)` and `strncmp(first, second, n)` return the difference
  of the first mismatching characters, or `0`.
- `strcpy(dest, src)` and `strncpy(dest, src, n)` return the string that
  results from writing `src` over the start of `dest`.
- `strcspn(text, reject)` and `strspn(text, accept)` return the length of the
  leading span of `text`:
  - for `strcspn`, the span that has no character from `reject`;
  - for `strspn`, the span made only of characters from `accept`.
- `strpbrk(text, accept)` returns the index of the first character of `text`
  that appears in `accept`.
- `strstr(haystack, needle)` returns the index of the first occurrence of
  `needle` in `haystack`.

A negative length raises `ValueError`.

To split a string into tokens, use the `Tokenizer` class or the `tokenize`
generator. Both keep their state in the object, not in a hidden global.
`Tokenizer.next_token` can take a different set of delimiters on each call.

```python
from stringplus.strings import Tokenizer, tokenize, strstr

assert list(tokenize("aboBA+ pipka = = pppp", "+ =")) == ["aboBA", "pipka", "pppp"]

tok = Tokenizer("a,b;c")
assert tok.next_token(",") == "a"
assert tok.next_token(";") == "b"

assert strstr("You are chepux!", "chepux") == 8
```

## `stringplus.transform`

- `to_upper(text)` and `to_lower(text)` change the case of ASCII letters and
  leave every other character as it is.
- `insert(dest, src, start_index)` returns `dest` with `src` inserted before
  position `start_index`. It raises `IndexError` unless `start_index` is a
  valid index into `dest`.
- `trim(src, trim_chars=None)` removes any of the characters in `trim_chars`
  from both ends of `src`. If `trim_chars` is `None` or empty, it removes
  whitespace (`"\f\n\v\t\r "`, also available as `DEFAULT_TRIM_CHARS`).

```python
from stringplus.transform import insert, trim, to_upper

assert insert("Hello, world!", "beautiful ", 7) == "Hello, beautiful world!"
assert trim("+!!++Abo+ba++00", "+!0-") == "Abo+ba"
assert to_upper("mac top") == "MAC TOP"
```

## `stringplus.errors`

`strerror(errnum, platform=None)` returns the message for a system error
number. The message tables for Linux and macOS are built into the package.

- The `platform` argument selects a table. It may be a `Platform` member
  (`Platform.LINUX`, `Platform.MACOS`) or the string `"linux"` or `"macos"`.
- If `platform` is omitted, the table for the running system is used, as
  reported by `current_platform()`.
- A number outside the table gives `"Unknown error N"` on Linux and
  `"Unknown error: N"` on macOS.
- An unrecognised platform name raises `ValueError`.

```python
from stringplus.errors import strerror

assert strerror(2, "linux") == "No such file or directory"
assert strerror(-1, "macos") == "Unknown error: -1"
```

## `stringplus.formatting`

`sprintf(fmt, *args)` formats its arguments in the style of C `printf` and
returns the resulting string. It supports:

- the conversions `d i u o x X c s p n f e E g G %`;
- the flags `-`, `+`, space, `0` and `#`;
- a width and a precision, either of which may be `*`;
- the length modifiers `h`, `l` and `L`.

Integers are reduced to the size that the length modifier names: 16 bits for
`h`, 64 bits for `l`, and 32 bits otherwise. Other argument rules:

- `%s` prints `(null)` for `None`.
- `%p` takes an integer address, `None`, or any other object (which is shown
  by its `id`).
- `%n` takes a `Counter`. After the call, its `value` holds the number of
  characters written up to that point.

`sprintf` raises `ValueError` for a malformed or unsupported directive and
`TypeError` for a missing or unsuitable argument. Extra arguments are ignored.

```python
from stringplus.formatting import sprintf, Counter

assert sprintf("%+5.5d aboba", 10000) == "+10000 aboba"
assert sprintf("%#x", 18571) == "0x488b"
assert sprintf("%x", -1230) == "fffffb32"

count = Counter()
assert sprintf("%d%n", 123, count) == "123"
assert count.value == 3
```

## What it does not do

The package is a library only. It has no command-line tool. `sprintf` returns
a new string; it does not write into a caller's buffer or print anything.