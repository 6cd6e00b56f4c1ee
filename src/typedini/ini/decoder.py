# -*- encoding: utf-8 -*-
# @File   : decoder.py
# @Time   : 2024/10/13 00:12:36
# @Author : Kariko Lin

"""INI text -> typed document.

Accepted lines:

    ```ini
    [Section]
    key = value
    key[] = element
    ```

`[Section]` must be a field of the document type. For a scalar `key` the
last line wins; `key[]` lines are appended to a `list[str]` field in order.
There are no comments, quoting or escaping.
Anything else is skipped silently, so is a key the section doesn't have.
"""

import logging
from collections.abc import AsyncIterable, Iterable
from io import StringIO, TextIOBase

from ..errors import TypeCoercionFailure, UnknownSection
from .fields import RecordSchema, schema_of
from .kinds import LIST_SUFFIX

logger = logging.getLogger(__name__)


def _header_name(line: str) -> str | None:
    if len(line) < 2 or line[0] != '[' or line[-1] != ']':
        return None
    name = line[1:-1]
    if '[' in name or ']' in name:
        return None
    return name


class _DecodeState[T]:
    """One decode pass. Lines are fed one by one, no suspension inside."""

    def __init__(self, document_type: type[T]) -> None:
        self._schema = schema_of(document_type)
        self.document: T = document_type()
        self._section: object | None = None
        self._section_name = ''
        self._section_schema: RecordSchema | None = None
        # key -> values, committed on section switch or EOF.
        self._pending: dict[str, list[str]] = {}
        self._lineno = 0

    def feed(self, line: str) -> None:
        self._lineno += 1
        line = line.strip()
        if not line:
            return
        if (name := _header_name(line)) is not None:
            self._enter(name)
        elif self._section is None:
            logger.debug('line %d: outside any section, skipped: %r',
                         self._lineno, line)
        else:
            self._pair(line)

    def finish(self) -> T:
        self._flush()
        return self.document

    def _enter(self, name: str) -> None:
        self._flush()
        handle = self._schema.resolve(name)
        if handle is None or not handle.is_section:
            raise UnknownSection(name, self._schema.record_type)
        if (section := handle.get(self.document)) is None:
            section = handle.instantiate_default()
            handle.set(self.document, section)
        self._section = section
        self._section_name = name
        self._section_schema = schema_of(handle.section_type)
        logger.debug('line %d: entering [%s]', self._lineno, name)

    def _pair(self, line: str) -> None:
        if '=' not in line:
            logger.debug('line %d: no "=", skipped: %r', self._lineno, line)
            return
        key, value = (i.strip() for i in line.split('=', 1))
        is_list = key.endswith(LIST_SUFFIX)
        if is_list:
            key = key[:-len(LIST_SUFFIX)]

        handle = self._section_schema.resolve(key)
        if handle is None or handle.is_section or handle.is_list != is_list:
            logger.debug('line %d: [%s] has no %s field "%s", skipped',
                         self._lineno, self._section_name,
                         'list' if is_list else 'scalar', key)
            return

        if is_list:
            self._pending.setdefault(key, []).append(value)
            return
        try:
            converted = handle.kind.parse(value)
        except ValueError as e:
            raise TypeCoercionFailure(key, value, handle.kind) from e
        handle.set(self._section, converted)

    def _flush(self) -> None:
        if not self._pending:
            return
        for key, values in self._pending.items():
            self._section_schema[key].set(self._section, values)
        self._pending.clear()


def decode[T](document_type: type[T], lines: Iterable[str]) -> T:
    """Decode INI lines (a text file object works) into `document_type`.

    For a whole text in one string, use `loads()`.

    Raises:
        TypeError: `lines` is a single `str`.
        UnknownSection: a header names no field of `document_type`.
        TypeCoercionFailure: a scalar value doesn't fit its field.
        UnsupportedKind: the dataclasses hold an unsupported field type.
    """
    if isinstance(lines, str):
        raise TypeError('decode() takes lines, not a str; use loads()')
    state = _DecodeState(document_type)
    for i in lines:
        state.feed(i)
    return state.finish()


async def decode_async[T](
    document_type: type[T], lines: AsyncIterable[str]
) -> T:
    """Same as `decode()`, only awaiting between lines."""
    state = _DecodeState(document_type)
    async for i in lines:
        state.feed(i)
    return state.finish()


def load[T](document_type: type[T], fp: TextIOBase) -> T:
    return decode(document_type, fp)


def loads[T](document_type: type[T], text: str) -> T:
    return decode(document_type, StringIO(text))
