# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 01:52:40
# @Author : Kariko Lin

from .kinds import IniKind
from .fields import FieldHandle, RecordSchema, ini_field, resolve, schema_of
from .decoder import decode, decode_async, load, loads
from .encoder import dump, dumps, encode
from .parser import IniParser
