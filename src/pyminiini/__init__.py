# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:41:26
# @Author : Kariko Lin

from .ini import IniDocument, IniSection, IniParser, classify

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'classify',
    'loads', 'dumps', 'load'
]

loads = IniParser.loads
dumps = IniParser.dumps


def load(filename, encoding=None) -> IniDocument:
    """Shortcut of `IniParser(filename, encoding).read()`."""
    return IniParser(filename, encoding).read()
