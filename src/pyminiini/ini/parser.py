# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:12:40
# @Author : Kariko Lin

"""Note: This parser **never rejects** the content it reads.

Hand-edited INIs are full of typos, so every line that makes no sense
is just dropped:

1. Comments (`; ...`) and garbage lines are ignored.
2. Pairs placed before the first `[section]` have no home, dropped too.
3. A missing file reads the same as an empty one: no section at all.

Only a programming mistake (like a delimiter other than `=`) would raise.
"""

import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase

import chardet

from ..abstract import FileHandler
from .lexer import LineKind, classify
from .model import IniDocument, IniSection

__all__ = ['IniParser']


class IniParser(FileHandler[IniDocument]):
    @staticmethod
    def readlines(
        lines: Iterable[str], ins: IniDocument | None = None
    ) -> IniDocument:
        """逐行构建 INI 文档。

        传入`ins`时会在已有文档上继续读取（后读到的值覆盖先前的）。
        """
        if ins is None:
            ins = IniDocument()
        this_sect: IniSection | None = None
        for lineno, i in enumerate(lines, 1):
            if lineno == 1:
                i = i.removeprefix('\ufeff')
            line = classify(i)
            match line.kind:
                case LineKind.SECTION:
                    this_sect = ins.setdefault(line.name)
                case LineKind.PAIR if this_sect is not None:
                    this_sect[line.name] = line.value
                case LineKind.PAIR:
                    logging.debug(
                        f'line {lineno}: "{line.name}" is out of any section,'
                        ' dropped.')
                case LineKind.GARBAGE if i.strip():
                    logging.debug(f'line {lineno}: garbage skipped: {i!r}')
        return ins

    @staticmethod
    def loads(text: str, ins: IniDocument | None = None) -> IniDocument:
        """读取整段字符串。`\\r\\n`换行与开头的 BOM 均可容忍。"""
        if not text:
            return IniParser.readlines((), ins)
        return IniParser.readlines(text.split('\n'), ins)

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniDocument | None = None
    ) -> IniDocument:
        """Consume an already decoded text stream, one line at a time."""
        return IniParser.readlines(buf, ins)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            codec = {'encoding': 'utf-8', 'confidence': 0.0}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError:
                buf = raw.decode('utf-8', errors='replace')
        return StringIO(buf)

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        文件不存在或无法读取时记录一条警告，并返回空文档（或原样返回`ins`）。
        """
        if ins is None:
            ins = IniDocument()
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    text = fp.read()
                return self.loads(text, ins)
            except UnicodeDecodeError:
                return self.readstream(self._decode_file(self._fn), ins)
        except OSError as e:
            logging.warning(f'INI not loaded, treated as empty: {e}')
            return ins

    @staticmethod
    def dumps(
        instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> str:
        """Render as INI text, which reads back into an equal document.

        Args:
            blank_lines: how many lines between sections?
            delimiter: how to connect key with value? spaces are fine,
                like `' = '`, but nothing else.
        """
        if delimiter.strip(' \t') != '=':
            raise ValueError(
                f'delimiter must be "=" padded by blanks: {delimiter!r}')
        sections = []
        for sect in instance.values():
            buf = [str(sect)]
            buf.extend(f'{k}{delimiter}{v}' for k, v in sect.items())
            sections.append('\n'.join(buf) + '\n')
        return ('\n' * blank_lines).join(sections)

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> None:
        """保存到 INI 文件。编码未指定时使用`utf-8`。"""
        text = self.dumps(
            instance, blank_lines=blank_lines, delimiter=delimiter)
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(text)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
