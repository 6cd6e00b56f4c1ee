# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 01:30:22
# @Author : Kariko Lin

"""Read / write typed INI documents from / to files.

A missing file is "nothing to parse", not a failure:
`read()` returns `None` then, while a broken file raises `IniError`.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from io import StringIO
from os import PathLike, makedirs
from os.path import dirname, isfile

import chardet

from ..abstract import FileHandler
from ..errors import InvalidLocation
from .decoder import decode, decode_async
from .encoder import encode

logger = logging.getLogger(__name__)

INI_SUFFIX = '.ini'


class IniParser[T](FileHandler[T]):
    def __init__(
        self, filename: str | PathLike[str], document_type: type[T],
        encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._type = document_type
        self._codec = encoding

    def _exists(self) -> bool:
        if not self._fn:
            logger.warning('No INI file given, nothing to parse.')
            return False
        if not isfile(self._fn):
            logger.warning(f'INI file not found: {self._fn}')
            return False
        return True

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> T | None:
        """读取`IniParser`实例指定的文件。

        Returns `None` if the filename is empty or the file doesn't exist.
        """
        if not self._exists():
            return None
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return decode(self._type, fp)
        except UnicodeDecodeError:
            logger.warning(f'{self._fn} is not {self._codec}, guessing codec.')
            return decode(self._type, self._decode_file(self._fn))

    async def _readlines(self) -> AsyncIterator[str]:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            while line := await asyncio.to_thread(fp.readline):
                yield line

    async def read_async(self) -> T | None:
        """Like `read()`, but each line is read in a worker thread."""
        if not self._exists():
            return None
        try:
            async with aclosing(self._readlines()) as lines:
                return await decode_async(self._type, lines)
        except UnicodeDecodeError:
            logger.warning(f'{self._fn} is not {self._codec}, guessing codec.')
            buf = await asyncio.to_thread(self._decode_file, self._fn)
            return decode(self._type, buf)

    def write(self, instance: T | None, *, blank_lines: int = 1) -> None:
        """保存到*一个* INI 文件。

        Nothing happens for an empty filename or a `None` document,
        though a non-`.ini` filename is refused first.
        Parent directories are created as needed.
        """
        if not self._fn:
            return
        if not self._fn.endswith(INI_SUFFIX):
            raise InvalidLocation(f'{self._fn} must end with {INI_SUFFIX}')
        if instance is None:
            return
        if parent := dirname(self._fn):
            makedirs(parent, exist_ok=True)
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(encode(instance, blank_lines=blank_lines))

    def __str__(self) -> str:
        return (f'INI document {self._type.__name__}: '
                + super().__str__() + f'({self._codec})')
