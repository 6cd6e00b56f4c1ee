# -*- encoding: utf-8 -*-
# @File   : encoder.py
# @Time   : 2024/10/13 01:02:51
# @Author : Kariko Lin

"""Typed document -> INI text. Never mutates the document."""

from io import TextIOBase

from .fields import FieldHandle, schema_of
from .kinds import LIST_SUFFIX


def _output_section(name: str, section: object) -> str:
    ret = f'[{name}]'
    for handle in schema_of(type(section)).values():
        if handle.is_section:
            continue  # no nested sections in INI.
        if (value := handle.get(section)) is None:
            continue
        ret += _output_entry(handle, value)
    return ret


def _output_entry(handle: FieldHandle, value: object) -> str:
    if handle.is_list:
        return ''.join(
            f'\n{handle.name}{LIST_SUFFIX} = {handle.kind.format(i)}'
            for i in value)
    return f'\n{handle.name} = {handle.kind.format(value)}'


def encode(document: object | None, *, blank_lines: int = 1) -> str:
    """Render a document, sections and keys in declaration order.

    `None` sections and values are left out, as are empty lists.
    """
    if document is None:
        return ''
    buffers = [
        _output_section(handle.name, section)
        for handle in schema_of(type(document)).values()
        if handle.is_section and (section := handle.get(document)) is not None
    ]
    sep = '\n' * (blank_lines + 1)
    return ''.join(i + sep for i in buffers).rstrip()


def dump(document: object | None, fp: TextIOBase, *,
         blank_lines: int = 1) -> None:
    fp.write(encode(document, blank_lines=blank_lines))


def dumps(document: object | None, *, blank_lines: int = 1) -> str:
    return encode(document, blank_lines=blank_lines)
