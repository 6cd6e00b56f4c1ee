# -*- encoding: utf-8 -*-
# @File   : fields.py
# @Time   : 2024/10/12 22:41:09
# @Author : Kariko Lin

"""Field resolver: name -> accessor tables of INI record types.

Records are plain `dataclasses`. A document looks like:

    ```python
    @dataclass
    class Test:
        MyBool: bool = False
        MyByte: Annotated[int, IniKind.UINT8] = 0
        MyFloat: float = ini_field(IniKind.FLOAT32, default=0.0)
        MyArray: list[str] = field(default_factory=list)

    @dataclass
    class Config:
        A: Test | None = None  # [A]
        B: Test | None = None  # [B]
    ```

Tables get built once per record type (see `schema_of()`),
thus decoding never inspects types per value.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from decimal import Decimal
from functools import cache
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from ..errors import UnsupportedKind
from .kinds import IniKind

KIND_METADATA = 'typedini.kind'

_PLAIN_KINDS: dict[object, IniKind] = {
    bool: IniKind.BOOL,
    int: IniKind.INT32,
    float: IniKind.FLOAT64,
    Decimal: IniKind.DECIMAL,
    str: IniKind.TEXT,
}


def ini_field(kind: IniKind, *, default: Any = MISSING,
              default_factory: Callable[[], Any] | Any = MISSING) -> Any:
    """`dataclasses.field()` pinning the INI kind of a field."""
    return field(default=default, default_factory=default_factory,
                 metadata={KIND_METADATA: kind})


@dataclass(frozen=True)
class FieldHandle:
    """Accessor pair of one record field.

    `kind` is `None` for section fields, which carry `section_type` instead.
    """
    name: str
    kind: IniKind | None = None
    section_type: type | None = None
    container: type = list

    @property
    def is_section(self) -> bool:
        return self.section_type is not None

    @property
    def is_list(self) -> bool:
        return self.kind is IniKind.TEXT_LIST

    def get(self, instance: object) -> Any:
        return getattr(instance, self.name)

    def set(self, instance: object, value: Any) -> None:
        if self.is_list:
            value = self.container(value)
        setattr(instance, self.name, value)

    def instantiate_default(self) -> Any:
        if self.section_type is None:
            raise TypeError(f'{self.name} is not a section field')
        return self.section_type()


class RecordSchema(Mapping[str, FieldHandle]):
    """Handles of a record type, in declaration order."""

    def __init__(self, record_type: type, handles: list[FieldHandle]) -> None:
        self.record_type = record_type
        self.__handles = {i.name: i for i in handles}

    def __getitem__(self, key: str) -> FieldHandle:
        return self.__handles[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__handles)

    def __len__(self) -> int:
        return len(self.__handles)

    def __repr__(self) -> str:
        return f'RecordSchema({self.record_type.__name__}: {list(self)})'

    def resolve(self, name: str) -> FieldHandle | None:
        return self.__handles.get(name)


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, UnionType):
        args = [i for i in get_args(tp) if i is not NoneType]
        if len(args) == 1:
            return args[0]
    return tp


def infer_kind(tp: Any, where: str = '') -> IniKind:
    """Map a field annotation to its `IniKind`.

    Raises `UnsupportedKind` when nothing matches.
    """
    tp = _unwrap_optional(tp)
    if get_origin(tp) is Annotated:
        for i in tp.__metadata__:
            if isinstance(i, IniKind):
                return i
        tp = _unwrap_optional(get_args(tp)[0])

    if tp in _PLAIN_KINDS:
        return _PLAIN_KINDS[tp]
    if tp in (list, tuple):
        return IniKind.TEXT_LIST
    match get_origin(tp), get_args(tp):
        case (origin, (arg,)) if origin is list and arg is str:
            return IniKind.TEXT_LIST
        case (origin, (arg, rest)) if (
                origin is tuple and arg is str and rest is Ellipsis):
            return IniKind.TEXT_LIST
    raise UnsupportedKind(tp, where)


def _container_of(tp: Any) -> type:
    tp = _unwrap_optional(tp)
    if get_origin(tp) is Annotated:
        tp = _unwrap_optional(get_args(tp)[0])
    return tuple if tp is tuple or get_origin(tp) is tuple else list


def _section_type_of(tp: Any) -> type | None:
    tp = _unwrap_optional(tp)
    return tp if isinstance(tp, type) and is_dataclass(tp) else None


@cache
def schema_of(record_type: type) -> RecordSchema:
    """Build (once) the handle table of a dataclass record type."""
    if not (isinstance(record_type, type) and is_dataclass(record_type)):
        raise UnsupportedKind(record_type, 'record type must be a dataclass')

    hints = get_type_hints(record_type, include_extras=True)
    handles: list[FieldHandle] = []
    for f in fields(record_type):
        tp = hints.get(f.name, f.type)
        where = f'{record_type.__name__}.{f.name}'
        if (section := _section_type_of(tp)) is not None:
            handles.append(FieldHandle(f.name, section_type=section))
            continue
        kind = f.metadata.get(KIND_METADATA) or infer_kind(tp, where)
        handles.append(FieldHandle(f.name, kind, container=_container_of(tp)))
    return RecordSchema(record_type, handles)


def resolve(record_type: type, name: str) -> FieldHandle | None:
    return schema_of(record_type).resolve(name)
