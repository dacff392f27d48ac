# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:40:02
# @Author : Kariko Lin

from .lexer import LineKind, IniLine, classify
from .model import IniSection, IniDocument
from .parser import IniParser
