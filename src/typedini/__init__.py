# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:18:55
# @Author : Kariko Lin

"""Statically-typed INI documents on top of `dataclasses`."""

from .errors import (
    IniError,
    InvalidLocation,
    TypeCoercionFailure,
    UnknownSection,
    UnsupportedKind
)
from .ini import (
    FieldHandle,
    IniKind,
    IniParser,
    RecordSchema,
    decode,
    decode_async,
    dump,
    dumps,
    encode,
    ini_field,
    load,
    loads,
    resolve,
    schema_of
)

__all__ = [
    'IniKind', 'FieldHandle', 'RecordSchema', 'ini_field', 'resolve',
    'schema_of',
    'decode', 'decode_async', 'load', 'loads',
    'encode', 'dump', 'dumps',
    'IniParser',
    'IniError', 'UnknownSection', 'TypeCoercionFailure', 'UnsupportedKind',
    'InvalidLocation'
]
