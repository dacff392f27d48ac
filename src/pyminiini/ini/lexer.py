# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2024/10/12 22:03:51
# @Author : Kariko Lin

"""Line classification for INI text.

Every raw line maps to exactly one `IniLine`:

    ```ini
    ; comment          -> COMMENT
    [ section ]  junk  -> SECTION  name='section'
    key = value        -> PAIR     name='key', value='value'
    [broken            -> GARBAGE  (no `]`, no `=`)
    = orphan           -> GARBAGE  (empty key)
    ```

Nothing is unquoted or unescaped. `;` only starts a comment
at the head of a line, so `key=a;b` keeps `a;b` as its value.
"""

from enum import Enum
from typing import NamedTuple

__all__ = ['LineKind', 'IniLine', 'classify', 'trim']

# ASCII blanks only, `str.strip()` would also eat form feeds and NBSPs.
_BLANKS = ' \t'


class LineKind(Enum):
    COMMENT = 'comment'
    SECTION = 'section'
    PAIR = 'pair'
    GARBAGE = 'garbage'


class IniLine(NamedTuple):
    kind: LineKind
    name: str = ''   # section name, or key of a pair
    value: str = ''  # only meaningful for PAIR


COMMENT = IniLine(LineKind.COMMENT)
GARBAGE = IniLine(LineKind.GARBAGE)


def trim(text: str) -> str:
    return text.strip(_BLANKS)


def classify(line: str) -> IniLine:
    """将一行文本归类为注释、小节头、键值对或垃圾行。纯函数，从不抛出异常。"""
    line = line.rstrip('\r\n')
    head = line.lstrip(_BLANKS)
    if not head:
        return GARBAGE
    if head[0] == ';':
        return COMMENT
    if head[0] == '[':
        end = head.find(']')
        if end != -1:
            return IniLine(LineKind.SECTION, trim(head[1:end]))
        # unclosed bracket, may still be a pair like `[a=1`.
    if '=' not in line:
        return GARBAGE
    key, val = line.split('=', 1)
    key = trim(key)
    if not key:
        return GARBAGE
    return IniLine(LineKind.PAIR, key, trim(val))
