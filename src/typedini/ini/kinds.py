# -*- encoding: utf-8 -*-
# @File   : kinds.py
# @Time   : 2024/10/12 22:03:47
# @Author : Kariko Lin

"""Value kinds an INI field may hold, each with its text codec.

The set is closed. Any other field type is `UnsupportedKind`.
Numbers are plain base-10: no `_` or `,` grouping, no `0x`/`0o` prefixes.
"""

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from enum import Enum
from re import IGNORECASE
from re import compile as regex
from struct import pack

_INT_SYNTAX = regex(r'[+-]?[0-9]+')
_REAL_SYNTAX = regex(
    r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
# what `repr(float)` may give back, so that floats round-trip.
_REAL_SPECIALS = regex(r'[+-]?(?:inf|infinity|nan)', IGNORECASE)

# `key[] = value` appends to a list field.
LIST_SUFFIX = '[]'


class IniKind(Enum):
    BOOL = 'bool'
    CHAR = 'char'
    INT8 = 'int8'
    UINT8 = 'uint8'
    INT16 = 'int16'
    UINT16 = 'uint16'
    INT32 = 'int32'
    UINT32 = 'uint32'
    INT64 = 'int64'
    UINT64 = 'uint64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    DECIMAL = 'decimal'
    TEXT = 'text'
    TEXT_LIST = 'text[]'

    @property
    def is_list(self) -> bool:
        return self is IniKind.TEXT_LIST

    def parse(self, text: str) -> object:
        """Convert the (trimmed) text of a value. Raise `ValueError` if bad.

        For `TEXT_LIST` this converts a single element.
        """
        return _CODECS[self][0](text)

    def format(self, value: object) -> str:
        return _CODECS[self][1](value)


def _parse_bool(text: str) -> bool:
    match text.lower():
        case 'true':
            return True
        case 'false':
            return False
        case _:
            raise ValueError(f'{text!r} is neither "true" nor "false"')


def _format_bool(value: object) -> str:
    return 'true' if value else 'false'


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f'{text!r} is not a single character')
    return text


def _integer(bits: int, signed: bool) -> Callable[[str], int]:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1

    def parse(text: str) -> int:
        if not _INT_SYNTAX.fullmatch(text):
            raise ValueError(f'{text!r} is not a base-10 integer')
        value = int(text)
        if not lo <= value <= hi:
            raise ValueError(f'{value} out of range [{lo}, {hi}]')
        return value

    return parse


def _format_int(value: object) -> str:
    return str(int(value))


def _parse_float64(text: str) -> float:
    if not (_REAL_SYNTAX.fullmatch(text) or _REAL_SPECIALS.fullmatch(text)):
        raise ValueError(f'{text!r} is not a base-10 real number')
    return float(text)


def _parse_float32(text: str) -> float:
    value = _parse_float64(text)
    # finite text must round to a finite single.
    try:
        pack('<f', value)
    except OverflowError as e:
        raise ValueError(f'{text!r} overflows float32') from e
    return value


def _format_float(value: object) -> str:
    return repr(float(value))


def _parse_decimal(text: str) -> Decimal:
    if not _REAL_SYNTAX.fullmatch(text):
        raise ValueError(f'{text!r} is not a base-10 decimal')
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f'{text!r} is not a base-10 decimal') from e


def _identity(text: str) -> str:
    return text


_CODECS: dict[IniKind, tuple[Callable[[str], object], Callable[..., str]]] = {
    IniKind.BOOL: (_parse_bool, _format_bool),
    IniKind.CHAR: (_parse_char, str),
    IniKind.INT8: (_integer(8, True), _format_int),
    IniKind.UINT8: (_integer(8, False), _format_int),
    IniKind.INT16: (_integer(16, True), _format_int),
    IniKind.UINT16: (_integer(16, False), _format_int),
    IniKind.INT32: (_integer(32, True), _format_int),
    IniKind.UINT32: (_integer(32, False), _format_int),
    IniKind.INT64: (_integer(64, True), _format_int),
    IniKind.UINT64: (_integer(64, False), _format_int),
    IniKind.FLOAT32: (_parse_float32, _format_float),
    IniKind.FLOAT64: (_parse_float64, _format_float),
    IniKind.DECIMAL: (_parse_decimal, str),
    IniKind.TEXT: (_identity, str),
    IniKind.TEXT_LIST: (_identity, str),
}
