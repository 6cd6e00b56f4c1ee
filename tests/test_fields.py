"""Tests for the field resolver."""

from dataclasses import dataclass
from typing import Annotated

import pytest

from typedini import IniKind, UnsupportedKind, resolve, schema_of

from samples import Config, Extras, Sample


# ---------------------------------------------------------------------------
# schema building
# ---------------------------------------------------------------------------

def test_declaration_order():
    assert list(schema_of(Sample)) == [
        'MyBool', 'MyByte', 'MyInt', 'MyLong',
        'MyFloat', 'MyDouble', 'MyString', 'MyArray']

def test_inferred_kinds():
    s = schema_of(Sample)
    assert s['MyBool'].kind is IniKind.BOOL
    assert s['MyInt'].kind is IniKind.INT32
    assert s['MyDouble'].kind is IniKind.FLOAT64
    assert s['MyString'].kind is IniKind.TEXT
    assert s['MyArray'].kind is IniKind.TEXT_LIST

def test_annotated_and_metadata_kinds():
    s = schema_of(Sample)
    assert s['MyByte'].kind is IniKind.UINT8
    assert s['MyLong'].kind is IniKind.INT64
    assert s['MyFloat'].kind is IniKind.FLOAT32

def test_optional_annotated_kinds():
    s = schema_of(Extras)
    assert s['Letter'].kind is IniKind.CHAR
    assert s['Small'].kind is IniKind.INT8
    assert s['Price'].kind is IniKind.DECIMAL
    assert s['Tags'].kind is IniKind.TEXT_LIST

def test_schema_cached():
    assert schema_of(Sample) is schema_of(Sample)


# ---------------------------------------------------------------------------
# resolve / handles
# ---------------------------------------------------------------------------

def test_resolve_exact_name():
    assert resolve(Sample, 'MyInt').name == 'MyInt'
    assert resolve(Sample, 'myint') is None
    assert resolve(Sample, 'MyArray[]') is None

def test_section_handles():
    h = resolve(Config, 'A')
    assert h.is_section
    assert h.kind is None
    assert h.instantiate_default() == Sample()

def test_instantiate_default_on_scalar():
    with pytest.raises(TypeError):
        resolve(Sample, 'MyInt').instantiate_default()

def test_get_set():
    s = Sample()
    h = resolve(Sample, 'MyInt')
    h.set(s, 42)
    assert h.get(s) == 42

def test_tuple_container():
    e = Extras()
    resolve(Extras, 'Tags').set(e, ['a', 'b'])
    assert e.Tags == ('a', 'b')


# ---------------------------------------------------------------------------
# unsupported
# ---------------------------------------------------------------------------

def test_unsupported_field_type():
    @dataclass
    class Bad:
        Mapping: dict[str, str] | None = None

    with pytest.raises(UnsupportedKind) as e:
        schema_of(Bad)
    assert 'Bad.Mapping' in str(e.value)

def test_unsupported_list_of_ints():
    @dataclass
    class Bad:
        Numbers: list[int] | None = None

    with pytest.raises(UnsupportedKind):
        schema_of(Bad)

def test_record_must_be_dataclass():
    class Plain:
        A: int = 0

    with pytest.raises(UnsupportedKind):
        schema_of(Plain)

def test_annotated_without_kind_falls_back():
    @dataclass
    class Doc:
        Count: Annotated[int, 'just a note'] = 0

    assert schema_of(Doc)['Count'].kind is IniKind.INT32
