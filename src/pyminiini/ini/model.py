# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:17
# @Author : Kariko Lin

"""
Basically INI Structure: ordered sections of ordered `str: str` pairs.

Lookups ignore case, while the spelling first stored is the one
kept for iteration and output. As for reading files, just see `ini.parser`.
"""

import math
import re
from collections.abc import Mapping, MutableMapping
from typing import Iterator

__all__ = ['IniSection', 'IniDocument']

_INT = re.compile(r'[+-]?[0-9]+')
_UINT = re.compile(r'\+?[0-9]+')
_FLOAT = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

_TRUTHY = ('true', 'yes')
_FALSY = ('false', 'no', '0', '')


def _norm(name: str) -> str:
    return name.lower()


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    维护一个小节内的全部键值对，键名大小写不敏感，但保留首次写入时的写法。
    重复写入同一个键只会覆盖值，*不会*改变它在小节中的位置。

    所有键值对均*应该*是`str: str`类型（哪怕值为空串），
    但由于 Python 的动态类型性质，运行时并不会对此作出限制。
    """

    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        # lowered key -> value, and lowered key -> original key
        self.__data: dict[str, str] = {}
        self.__keyproxy: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[_norm(key)]

    def __setitem__(self, key: str, value: str) -> None:
        lowered = _norm(key)
        self.__keyproxy.setdefault(lowered, key)
        self.__data[lowered] = value

    def __delitem__(self, key: str) -> None:
        lowered = _norm(key)
        del self.__data[lowered]
        del self.__keyproxy[lowered]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _norm(key) in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keyproxy.values())

    def __eq__(self, other: object) -> bool:
        # order matters, unlike plain `Mapping.__eq__`.
        if not isinstance(other, IniSection):
            return NotImplemented
        return (_norm(self._name) == _norm(other._name)
                and list(self.items()) == list(other.items()))

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self))

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        key = val  ; 不属于任何小节的键值对会被丢弃。

        [section]
        key233 = val666
        [Section]  ; 与上面是同一个小节
        KEY233 = val114514  ; 覆盖 key233 的值，位置不变
        ```

    读值请使用`get_str()`、`get_int()`等方法，缺失或无法解析时返回默认值，
    需要区分“缺失”与“零值”时请先用`has()`检查。
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[_norm(key)]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        if not isinstance(value, Mapping):
            raise TypeError(
                f'section [{key}] must be a mapping, '
                f'not {type(value).__name__}')
        lowered = _norm(key)
        # keep the first spelling, and never keep ptr to external dict.
        name = self.__raw[lowered].name if lowered in self.__raw else key
        self.__raw[lowered] = IniSection(name, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[_norm(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _norm(key) in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__raw.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return list(self.values()) == list(other.values())

    def __repr__(self) -> str:
        return '<IniDocument { %s }>' % ', '.join(
            repr(i) for i in self.values())

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If section `key` not in self, then add it (filled by `default`).

        Returns the section itself, for further R/W.
        """
        if key not in self:
            self[key] = default or {}
        return self[key]

    def clear(self) -> None:
        self.__raw.clear()

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Plain nested dict copy, with display names."""
        return {i.name: i.to_dict() for i in self.values()}

    # existence & size.
    def has(self, section: str, key: str | None = None) -> bool:
        if section not in self:
            return False
        return key is None or key in self[section]

    def size(self, section: str | None = None) -> int:
        """Count of sections, or count of keys in `section` (0 if missing)."""
        if section is None:
            return len(self)
        if section not in self:
            return 0
        return len(self[section])

    def set(self, section: str, key: str, value: object) -> None:
        """Add or update a pair, creating `section` if needed."""
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        self.setdefault(section)[key] = str(value)

    # typed accessors. none of them raise on missing or malformed values.
    def get_str(self, section: str, key: str, default: str = '') -> str:
        if not self.has(section, key):
            return default
        return self[section][key]

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        val = self.get_str(section, key)
        if _INT.fullmatch(val) is None:
            return default
        return int(val)

    def get_uint(self, section: str, key: str, default: int = 0) -> int:
        val = self.get_str(section, key)
        if _UINT.fullmatch(val) is None:
            return default
        return int(val)

    def get_float(
        self, section: str, key: str, default: float = 0.0
    ) -> float:
        val = self.get_str(section, key)
        if _FLOAT.fullmatch(val) is None:
            return default
        ret = float(val)
        # exponent overflow, like `1e999`.
        return default if math.isinf(ret) else ret

    def get_bool(
        self, section: str, key: str, default: bool = False
    ) -> bool:
        if not self.has(section, key):
            return default
        val = self.get_str(section, key).lower()
        if val in _TRUTHY:
            return True
        if val in _FALSY:
            return False
        if _INT.fullmatch(val) is not None:
            return int(val) != 0
        return default
