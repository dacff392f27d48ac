# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2024/10/13 00:02:19
# @Author : Kariko Lin

"""Tiny inspector: `python -m pyminiini FILE [SECTION [KEY]]`.

    $ python -m pyminiini settings.ini
    $ python -m pyminiini settings.ini video --size
    $ python -m pyminiini settings.ini video width --type uint
    $ python -m pyminiini settings.ini --yaml
"""

import argparse
import logging
import sys
from typing import Sequence

import yaml

from .ini import IniDocument, IniParser

__all__ = ['main']

_GETTERS = {
    'str': IniDocument.get_str,
    'int': IniDocument.get_int,
    'uint': IniDocument.get_uint,
    'float': IniDocument.get_float,
    'bool': IniDocument.get_bool,
}


def _build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pyminiini',
        description='Read an INI file tolerantly and print what it holds.')
    parser.add_argument('file')
    parser.add_argument('section', nargs='?')
    parser.add_argument('key', nargs='?')
    parser.add_argument(
        '-t', '--type', choices=tuple(_GETTERS), default='str',
        help='how to interpret the value of KEY (default: str)')
    parser.add_argument(
        '--size', action='store_true',
        help='print count of sections, or of keys in SECTION')
    parser.add_argument(
        '--yaml', action='store_true', help='dump as YAML instead of INI')
    parser.add_argument('--encoding', default=None)
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_argparser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format='[%(asctime)s] %(levelname)s: %(message)s')
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(level)

    doc = IniParser(args.file, args.encoding).read()

    if args.size:
        print(doc.size(args.section))
        return 0

    if args.key is not None:
        value = _GETTERS[args.type](doc, args.section, args.key)
        print(_format_value(value))
        return 0

    if args.section is not None:
        if args.section not in doc:
            return 0
        shown = IniDocument()
        shown[doc[args.section].name] = doc[args.section]
        doc = shown

    if args.yaml:
        yaml.safe_dump(
            doc.to_dict(), sys.stdout,
            allow_unicode=True, sort_keys=False, default_flow_style=False)
    else:
        sys.stdout.write(IniParser.dumps(doc))
    return 0
