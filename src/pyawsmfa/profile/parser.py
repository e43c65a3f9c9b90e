# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:10:52
# @Author : Kariko Lin

"""Reading and writing `~/.aws/credentials` and `~/.aws/config`.

There is no attempt to keep comments, blank lines nor byte-identical
output. What survives a load/save cycle is the profile -> key -> value
content (see `compare.equivalent()`), plus any non `key = value` line,
which is written back as it was read.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from io import StringIO
from os import PathLike, fspath
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..errors import ParseMisconfigured, ProfileIOError
from .dialect import Dialect, capture
from .model import ProfileStore, Renderer, Section

__all__ = ['ParserOptions', 'ProfileParser', 'readstream', 'loads', 'dumps']

logger = logging.getLogger(__name__)


def readstream(
    buf: Iterable[str],
    pattern: str | re.Pattern[str],
    source: str | None = None
) -> ProfileStore:
    """Read decoded lines (a text file, a `StringIO`, a list...).

    Unless there's a special need, just call `ProfileParser.read()`.
    """
    sections: list[Section] = []
    name, lines = '', []  # '' means "not inside a section yet"
    orphans = 0

    def flush() -> None:
        section = Section(name, lines)
        if dups := section.duplicated_keys():
            warn(
                f'[{name}] in {source or "<stream>"} repeats '
                f'{", ".join(dups)}, the first occurrence is used.')
        sections.append(section)

    for i in buf:
        line = i.rstrip('\r\n')
        if (declared := capture(pattern, line)) is not None:
            if name:
                flush()
            name, lines = declared, []
        elif not line.strip():
            continue
        elif name:
            lines.append(line)
        else:
            orphans += 1

    if name:
        flush()
    if orphans:
        logger.debug(
            'dropped %d line(s) before the first section of %s',
            orphans, source or '<stream>')
    return ProfileStore(sections, source)


def loads(
    text: str,
    pattern: str | re.Pattern[str],
    source: str | None = None
) -> ProfileStore:
    return readstream(StringIO(text), pattern, source)


def dumps(store: ProfileStore, renderer: Renderer) -> str:
    """One block per section, separated by a blank line,
    nothing after the last one."""
    return store.format(renderer)


@dataclass
class ParserOptions:
    """What `ProfileParser` needs. Checked on use, not on construction."""
    path: str | PathLike[str] | None = None
    pattern: str | re.Pattern[str] | None = None
    renderer: Renderer | None = None
    encoding: str | None = None

    @classmethod
    def for_dialect(
        cls,
        dialect: Dialect,
        root: str | PathLike[str],
        encoding: str | None = None
    ) -> 'ParserOptions':
        return cls(
            dialect.path(root), dialect.pattern, dialect.renderer, encoding)

    def validate(self) -> tuple[str, str | re.Pattern[str], Renderer]:
        if self.path is None:
            raise ParseMisconfigured('path is not set')
        if self.pattern is None:
            raise ParseMisconfigured('pattern is not set')
        if self.renderer is None:
            raise ParseMisconfigured('renderer is not set')
        return fspath(self.path), self.pattern, self.renderer


class ProfileParser(FileHandler[ProfileStore]):
    def __init__(self, options: ParserOptions) -> None:
        super().__init__(options.path if options.path is not None else '')
        self._options = options
        self._codec = options.encoding

    @classmethod
    def of(
        cls,
        dialect: Dialect,
        root: str | PathLike[str],
        encoding: str | None = None
    ) -> 'ProfileParser':
        return cls(ParserOptions.for_dialect(dialect, root, encoding))

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> ProfileStore:
        path, pattern, _ = self._options.validate()
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, just fallback to `chardet`.
            try:
                with open(path, 'r', encoding=self._codec) as fp:
                    ret = readstream(fp, pattern, path)
            except UnicodeDecodeError:
                ret = readstream(self._decode_file(path), pattern, path)
        except OSError as e:
            raise ProfileIOError(f'Error reading "{path}". {e}', path) from e
        logger.debug('loaded %d profile(s) from %s', len(ret), path)
        return ret

    def write(self, instance: ProfileStore) -> None:
        """Overwrite the target file with `instance`.

        Not transactional: a failure halfway leaves the file as it is.
        """
        path, _, renderer = self._options.validate()
        try:
            with open(path, 'w', encoding=self._codec) as fp:
                fp.write(dumps(instance, renderer))
        except OSError as e:
            raise ProfileIOError(
                f'Error writing to "{path}". {e}', path) from e
        logger.debug('saved %d profile(s) to %s', len(instance), path)

    def __str__(self) -> str:
        return 'AWS profiles: ' + super().__str__() + f' ({self._codec})'
