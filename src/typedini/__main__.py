# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 02:10:05
# @Author : Kariko Lin

"""`python -m typedini check FILE MODULE:CLASS`

Decode FILE into the document dataclass and print it back as INI.
"""

import argparse
import logging
import sys
from importlib import import_module

from .errors import IniError
from .ini import IniParser, encode


def load_document_type(spec: str) -> type:
    """`package.module:ClassName` -> the class."""
    module_name, sep, class_name = spec.partition(':')
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected MODULE:CLASS, got '{spec}'")
    return getattr(import_module(module_name), class_name)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='typedini',
        description='typedini - statically-typed INI documents'
    )
    sub = parser.add_subparsers(dest='command', required=True)
    check = sub.add_parser('check', help='Decode a file and re-encode it')
    check.add_argument('file', help='INI file to decode')
    check.add_argument('document', help='Document dataclass, MODULE:CLASS')
    check.add_argument('-e', '--encoding', default=None,
                       help='File encoding (guessed on failure)')
    check.add_argument('-v', '--verbose', action='store_true',
                       help='Log skipped lines')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')

    try:
        document_type = load_document_type(args.document)
    except (ImportError, AttributeError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    try:
        doc = IniParser(args.file, document_type, args.encoding).read()
    except IniError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    if doc is None:
        print(f'Error: {args.file} not found', file=sys.stderr)
        return 2

    print(encode(doc))
    return 0


if __name__ == '__main__':
    sys.exit(main())
