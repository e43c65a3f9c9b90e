# -*- encoding: utf-8 -*-
# @File   : compare.py
# @Time   : 2024/10/13 00:02:26
# @Author : Kariko Lin

"""Content equivalence of stores (and sections).

Two stores are the same configuration when they hold the same profile
names and, for each profile, the same key -> value pairs. Line order and
opaque lines are not taken into account, so `[a]` written after `[b]`,
or `output` before `region`, still counts as equal.
"""

from typing import overload

from .model import ProfileStore, Section

__all__ = ['equivalent', 'differences']


@overload
def equivalent(a: ProfileStore, b: ProfileStore) -> bool: ...
@overload
def equivalent(a: Section, b: Section) -> bool: ...


def equivalent(a, b) -> bool:
    return not differences(a, b)


def _section_diff(a: Section, b: Section) -> list[str]:
    if a.name != b.name:
        return [f'profile name: {a.name!r} != {b.name!r}']
    ret = []
    pa, pb = a.pairs(), b.pairs()
    for k in pa.keys() - pb.keys():
        ret.append(f'[{a.name}] {k}: only on the left')
    for k in pb.keys() - pa.keys():
        ret.append(f'[{a.name}] {k}: only on the right')
    for k in pa.keys() & pb.keys():
        if pa[k] != pb[k]:
            ret.append(f'[{a.name}] {k}: {pa[k]!r} != {pb[k]!r}')
    return sorted(ret)


def differences(
    a: ProfileStore | Section, b: ProfileStore | Section
) -> list[str]:
    """Explain why `a` and `b` are not equivalent (empty if they are)."""
    if isinstance(a, Section) and isinstance(b, Section):
        return _section_diff(a, b)
    if not (isinstance(a, ProfileStore) and isinstance(b, ProfileStore)):
        raise TypeError(
            f'cannot compare {type(a).__name__} with {type(b).__name__}')

    ret = []
    for name in a:
        if name not in b:
            ret.append(f'[{name}]: only on the left')
        else:
            ret.extend(_section_diff(a[name], b[name]))
    for name in b:
        if name not in a:
            ret.append(f'[{name}]: only on the right')
    return ret
