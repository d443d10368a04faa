"""printf-style formatting of values into a string.

Supported conversions are ``d i u o x X c s n p f e E g G %`` with the
flags ``- + space 0 #``, a width and a precision (either may be ``*``),
and the length modifiers ``h``, ``l`` and ``L``. Integers are reduced to
the size the length modifier names: 16 bits for ``h``, 64 for ``l``, and
32 otherwise.
"""

from __future__ import annotations

import numbers
import operator
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .strings import strlen

_DIRECTIVE = re.compile(
    r"%(?P<flags>[-+ 0#]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:(?P<dot>\.)(?P<precision>\*|\d*))?"
    r"(?P<length>[hlL])?"
    r"(?P<conversion>.)?",
    re.DOTALL,
)

_CONVERSIONS = frozenset("diuoxXcsnpfeEgG%")
_LENGTH_BITS = {"h": 16, "l": 64, "L": 64}
_DEFAULT_BITS = 32
_POINTER_BITS = 64
_DEFAULT_FLOAT_PRECISION = 6
_NULL_STRING = "(null)"


@dataclass
class Counter:
    """Receives the number of characters written so far at a ``%n``."""

    value: int = 0


@dataclass
class FormatSpec:
    """One parsed conversion directive."""

    conversion: str
    minus: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    zero: bool = False
    width: int = 0
    precision: int | None = None
    length: str = ""

    def __post_init__(self) -> None:
        # '+' overrides ' ', and '-' overrides '0'.
        self.space = self.space and not self.plus
        self.zero = self.zero and not self.minus

    @property
    def flag_chars(self) -> str:
        """The flags as they would appear in a directive."""
        pairs = (
            ("-", self.minus),
            ("+", self.plus),
            (" ", self.space),
            ("#", self.alternate),
            ("0", self.zero),
        )
        return "".join(char for char, on in pairs if on)

    @property
    def bits(self) -> int:
        """The integer size named by the length modifier."""
        return _LENGTH_BITS.get(self.length, _DEFAULT_BITS)

    def pad(self, body: str) -> str:
        """Pad ``body`` with spaces to the field width."""
        if self.minus:
            return body.ljust(self.width)
        return body.rjust(self.width)


def _next(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"an integer is required, got {type(value).__name__}"
        ) from None


def _parse(match: re.Match[str], values: Iterator[Any]) -> FormatSpec:
    conversion = match["conversion"]
    if conversion is None:
        raise ValueError("incomplete format directive at end of string")
    if conversion not in _CONVERSIONS:
        raise ValueError(f"unsupported format character {conversion!r}")

    flags = match["flags"]
    minus = "-" in flags

    width = 0
    if match["width"] == "*":
        width = _as_int(_next(values))
        if width < 0:
            minus, width = True, -width
    elif match["width"]:
        width = int(match["width"])

    precision: int | None = None
    if match["dot"]:
        if match["precision"] == "*":
            precision = _as_int(_next(values))
            if precision < 0:
                precision = None
        else:
            precision = int(match["precision"] or "0")

    return FormatSpec(
        conversion=conversion,
        minus=minus,
        plus="+" in flags,
        space=" " in flags,
        alternate="#" in flags,
        zero="0" in flags,
        width=width,
        precision=precision,
        length=match["length"] or "",
    )


def _digits(magnitude: int, base: int, upper: bool) -> str:
    code = {8: "o", 10: "d", 16: "X" if upper else "x"}[base]
    return format(magnitude, code)


def _integer(
    spec: FormatSpec,
    magnitude: int,
    base: int,
    *,
    sign: str = "",
    prefix: str = "",
    upper: bool = False,
) -> str:
    if magnitude == 0 and spec.precision == 0:
        digits = ""
    else:
        digits = _digits(magnitude, base, upper)
    if spec.precision is not None:
        digits = digits.zfill(spec.precision)
    if base == 8 and spec.alternate and not digits.startswith("0"):
        digits = "0" + digits
    if spec.zero and spec.precision is None:
        digits = digits.zfill(spec.width - len(sign) - len(prefix))
    return spec.pad(sign + prefix + digits)


def _signed(spec: FormatSpec, value: Any) -> str:
    bits = spec.bits
    number = _as_int(value) & ((1 << bits) - 1)
    if number >> (bits - 1):
        number -= 1 << bits
    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    return _integer(spec, abs(number), 10, sign=sign)


def _unsigned(spec: FormatSpec, value: Any) -> str:
    number = _as_int(value) & ((1 << spec.bits) - 1)
    base = {"u": 10, "o": 8}.get(spec.conversion, 16)
    upper = spec.conversion == "X"
    prefix = ""
    if base == 16 and spec.alternate and number:
        prefix = "0X" if upper else "0x"
    return _integer(spec, number, base, prefix=prefix, upper=upper)


def _pointer(spec: FormatSpec, value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, numbers.Integral):
        address = int(value)
    else:
        address = id(value)
    address &= (1 << _POINTER_BITS) - 1
    return _integer(spec, address, 16, prefix="0x")


def _char(spec: FormatSpec, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c requires a single character, got {value!r}")
        char = value
    else:
        char = chr(_as_int(value))
    return spec.pad(char)


def _string(spec: FormatSpec, value: Any) -> str:
    if value is None:
        text = _NULL_STRING
    elif isinstance(value, str):
        text = value[: strlen(value)]
    else:
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    if spec.precision is not None:
        text = text[: spec.precision]
    return spec.pad(text)


def _float(spec: FormatSpec, value: Any) -> str:
    if not isinstance(value, numbers.Real):
        raise TypeError(
            f"%{spec.conversion} requires a number, got {type(value).__name__}"
        )
    precision = (
        _DEFAULT_FLOAT_PRECISION if spec.precision is None else spec.precision
    )
    width = str(spec.width) if spec.width else ""
    directive = f"%{spec.flag_chars}{width}.{precision}{spec.conversion}"
    return directive % float(value)


_RENDERERS = {
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "o": _unsigned,
    "x": _unsigned,
    "X": _unsigned,
    "c": _char,
    "s": _string,
    "p": _pointer,
    "f": _float,
    "e": _float,
    "E": _float,
    "g": _float,
    "G": _float,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the printf-style format ``fmt``.

    Returns the formatted string. A ``%n`` directive takes a Counter and
    stores in it the number of characters produced so far. Raises
    ValueError for a malformed directive and TypeError for missing or
    unsuitable arguments; surplus arguments are ignored.
    """
    fmt = fmt[: strlen(fmt)]
    values = iter(args)
    pieces: list[str] = []
    written = 0
    position = 0

    def emit(text: str) -> None:
        nonlocal written
        pieces.append(text)
        written += len(text)

    for match in _DIRECTIVE.finditer(fmt):
        emit(fmt[position : match.start()])
        position = match.end()
        spec = _parse(match, values)
        if spec.conversion == "%":
            emit(spec.pad("%"))
        elif spec.conversion == "n":
            target = _next(values)
            if not isinstance(target, Counter):
                raise TypeError("%n requires a Counter argument")
            target.value = written
        else:
            emit(_RENDERERS[spec.conversion](spec, _next(values)))
    emit(fmt[position:])
    return "".join(pieces)