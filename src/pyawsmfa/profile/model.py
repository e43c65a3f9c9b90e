# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:03:41
# @Author : Kariko Lin

"""
AWS shared-config structure: sections of raw `key = value` lines.

Both `Section` and `ProfileStore` are read-only mappings. Every "mutation"
hands back a new instance, so a store loaded from disk is never changed
behind the caller's back.

Lookup rules:
- `Section[key]` returns the *first* line carrying `key`
  (only hand-edited files may hold duplicates).
- `Section.set()` / `Section.remove()` drop *every* line carrying `key`,
  so after a `set` the key exists exactly once, at the end.
- Lines that don't split on `=` are kept verbatim, rendered back,
  but never looked up nor compared.
"""

import warnings
from collections.abc import Iterable, Iterator, Mapping
from typing import Callable

from ..errors import InvalidInput, KeyNotFound, ProfileNotFound

Renderer = Callable[[str], str]


def split_line(line: str) -> tuple[str, str] | None:
    """`' region = us-east-1'` -> `('region', 'us-east-1')`,
    `None` for an opaque line."""
    if '=' not in line:
        return None
    key, val = line.split('=', 1)
    return key.strip(), val.strip()


class Section(Mapping[str, str]):
    """A named block of lines, i.e. one `[profile]` of a file."""

    def __init__(self, name: str, lines: Iterable[str] = ()) -> None:
        if not name:
            raise InvalidInput('section name must not be empty')
        self._name = name
        self._lines: tuple[str, ...] = tuple(lines)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def __getitem__(self, key: str) -> str:
        for i in self._lines:
            pair = split_line(i)
            if pair is not None and pair[0] == key:
                return pair[1]
        raise KeyNotFound(key, self._name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.pairs())

    def __len__(self) -> int:
        return len(self.pairs())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._name == other._name and self.pairs() == other.pairs()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._lines))

    def pairs(self) -> dict[str, str]:
        """Key-value view of the section, first occurrence wins."""
        ret: dict[str, str] = {}
        for i in self._lines:
            if (pair := split_line(i)) is not None:
                ret.setdefault(*pair)
        return ret

    def duplicated_keys(self) -> list[str]:
        seen: set[str] = set()
        dups: list[str] = []
        for i in self._lines:
            if (pair := split_line(i)) is None:
                continue
            if pair[0] in seen and pair[0] not in dups:
                dups.append(pair[0])
            seen.add(pair[0])
        return dups

    def push(self, line: str) -> 'Section':
        """Append a raw line as-is. Meant for the parser."""
        return Section(self._name, self._lines + (line,))

    def _without(self, key: str) -> tuple[str, ...]:
        return tuple(
            i for i in self._lines
            if (pair := split_line(i)) is None or pair[0] != key
        )

    def set(self, key: str, value: str) -> 'Section':
        return Section(self._name, self._without(key) + (f'{key} = {value}',))

    def remove(self, key: str) -> 'Section':
        return Section(self._name, self._without(key))

    def rename(self, name: str) -> 'Section':
        return Section(name, self._lines)

    def format(self, renderer: Renderer) -> str:
        return f'{renderer(self._name)}\n' + '\n'.join(self._lines)


class ProfileStore(Mapping[str, Section]):
    """All sections of one file, unique by name, in file/append order.

    `source` only names the file in error messages.
    """

    def __init__(
        self,
        sections: Iterable[Section] = (),
        source: str | None = None
    ) -> None:
        self.source = source
        ordered: dict[str, Section] = {}
        for i in sections:
            if i.name in ordered:
                warnings.warn(
                    f'[{i.name}] declared more than once in {source or "store"}, '
                    'the later one replaces the former.')
                del ordered[i.name]
            ordered[i.name] = i
        self._sections: tuple[Section, ...] = tuple(ordered.values())

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    def _derive(self, sections: Iterable[Section]) -> 'ProfileStore':
        ret = ProfileStore.__new__(ProfileStore)
        ret.source = self.source
        ret._sections = tuple(sections)
        return ret

    def __getitem__(self, name: str) -> Section:
        for i in self._sections:
            if i.name == name:
                return i
        raise ProfileNotFound(name, self.source)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfileStore):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            i.name in other and other[i.name] == i for i in self._sections)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'ProfileStore({self.source!r}, {list(self)})'

    def get_section(self, name: str) -> Section:
        return self[name]

    def get_value(self, name: str, key: str) -> str:
        try:
            return self[name][key]
        except KeyNotFound:
            raise KeyNotFound(key, name, self.source) from None

    def set(self, section: Section) -> 'ProfileStore':
        """Upsert: drop any section of the same name, append `section`."""
        return self._derive(
            [i for i in self._sections if i.name != section.name]
            + [section])

    def add(self, name: str) -> 'ProfileStore':
        """Append an empty section, clearing an existing one of that name."""
        return self.set(Section(name))

    def remove_section(self, name: str) -> 'ProfileStore':
        return self._derive(i for i in self._sections if i.name != name)

    def copy(self, src: str, dst: str) -> 'ProfileStore':
        return self.set(Section(dst, self[src].lines))

    def rename(self, old: str, new: str) -> 'ProfileStore':
        section = self[old].rename(new)
        return self.remove_section(old).set(section)

    def set_value(self, name: str, key: str, value: str) -> 'ProfileStore':
        return self.set(self[name].set(key, value))

    def remove_value(self, name: str, key: str) -> 'ProfileStore':
        return self.set(self[name].remove(key))

    def format(self, renderer: Renderer) -> str:
        return '\n\n'.join(i.format(renderer) for i in self._sections)
