# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""Errors raised while decoding or encoding typed INI documents.

Malformed lines are never errors: the decoder just skips them.
A missing input file isn't an error either, `IniParser.read()` returns `None`.
"""


class IniError(Exception):
    """Base class of every error raised by `typedini`."""
    pass


class UnknownSection(IniError, KeyError):
    """A `[header]` names no field of the document type."""

    def __init__(self, section: str, document_type: type) -> None:
        super().__init__(section)
        self.section = section
        self.document_type = document_type

    def __str__(self) -> str:
        return (f'[{self.section}] does not exist in '
                f'{self.document_type.__name__}')


class TypeCoercionFailure(IniError, ValueError):
    """A scalar value could not be parsed into its field's kind."""

    def __init__(self, key: str, value: str, kind: object) -> None:
        super().__init__(key, value, kind)
        self.key = key
        self.value = value
        self.kind = kind

    def __str__(self) -> str:
        kind = getattr(self.kind, 'value', self.kind)
        return f'cannot convert {self.key} = {self.value!r} to {kind}'


class UnsupportedKind(IniError, TypeError):
    """A field is declared with a type that has no INI coercion."""

    def __init__(self, type_: object, where: str = '') -> None:
        super().__init__(type_, where)
        self.type = type_
        self.where = where

    def __str__(self) -> str:
        ret = f'unsupported type: {self.type!r}'
        if self.where:
            ret += f' (at {self.where})'
        return ret


class InvalidLocation(IniError, ValueError):
    """Write target is not an `.ini` file."""
    pass
