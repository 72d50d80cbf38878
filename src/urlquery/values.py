"""Query values and the text conversions applied to them.

A parsed query maps each key to one of a small closed set of values:
``None``, the absent marker :data:`UNDEFINED`, a string, a number, a
boolean, or a flat list of strings, numbers and booleans.
"""

import decimal as _decimal
import enum as _enum
import math as _math
import re as _re
import typing as _ty

PREFIX = "?"
SEPARATOR = "&"
ASSIGNMENT = "="
ENCODING = "utf-8"


class _Undefined(object):
    """Marker for a key that is present without a value."""

    __slots__ = ()
    _instance: "_Undefined" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "UNDEFINED"


UNDEFINED = _Undefined()

QueryScalar: _ty.TypeAlias = str | int | float | bool
QueryValue: _ty.TypeAlias = QueryScalar | list[QueryScalar] | _Undefined | None
QueryObject: _ty.TypeAlias = dict[str, QueryValue]


class ValueKind(_enum.Enum):
    NULL = 1
    UNDEFINED = 2
    STRING = 3
    NUMBER = 4
    BOOLEAN = 5
    SEQUENCE = 6
    OTHER = 7


def kind_of(value: _ty.Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, str):
        return ValueKind.STRING
    # bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


_WHITESPACE = " \t\n\r\v\f\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_DECIMAL = _re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX = _re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

_LITERALS: dict[str, _ty.Any] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": UNDEFINED,
}


def to_number(text: str) -> int | float:
    """Read ``text`` as a number the way a browser's ``Number()`` does.

    Surrounding whitespace is ignored and an empty string reads as zero.
    Decimal literals (with sign, fraction and exponent), ``Infinity`` and
    unsigned hexadecimal, octal and binary literals are understood.
    Anything else is NaN. Finite integral results come back as ``int``.
    """
    text = text.strip(_WHITESPACE)
    if not text:
        return 0
    if _RADIX.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL.fullmatch(text):
        return _math.nan
    number = float(text)
    if _math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def coerce(value: _ty.Any) -> _ty.Any:
    """Infer a boolean, null, undefined or number from a string token.

    Only ``"0"`` itself and strings reading as a non-zero number become
    numbers, so ``"-0"``, ``"0.0"`` and ``"00"`` are kept as text.
    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    if value in _LITERALS:
        return _LITERALS[value]
    if value == "0":
        return 0
    number = to_number(value)
    if number and not _math.isnan(number):
        return number
    return value


def _format_float(value: float) -> str:
    # fixed notation for 1e-6 <= |value| < 1e21, unpadded exponent otherwise
    text = repr(value)
    mantissa, _, exponent = text.partition("e")
    if not exponent:
        return text
    power = int(exponent)
    if -7 < power < 21:
        return format(_decimal.Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def to_string(value: _ty.Any) -> str:
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.UNDEFINED:
        return "undefined"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.SEQUENCE:
        return ",".join(
            "" if item is None or item is UNDEFINED else to_string(item)
            for item in value
        )
    if kind is ValueKind.NUMBER and isinstance(value, float):
        if _math.isnan(value):
            return "NaN"
        if _math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return _format_float(value)
    return str(value)


def is_blank(value: _ty.Any) -> bool:
    return not to_string(value).strip()


def is_nullish(value: _ty.Any) -> bool:
    return value is None or value is UNDEFINED or is_blank(value)
