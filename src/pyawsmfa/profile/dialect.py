# -*- encoding: utf-8 -*-
# @File   : dialect.py
# @Time   : 2024/10/12 22:31:09
# @Author : Kariko Lin

"""The two header flavours of `~/.aws`.

```ini
; credentials
[default]
[tanaka]

; config
[default]
[profile tanaka]
```

`[default]` is always recognized, whatever the pattern is,
as `config` never writes it as `[profile default]`.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from os import PathLike
from pathlib import Path

from .model import Renderer

__all__ = [
    'PROFILE_CREDENTIALS', 'PROFILE_CONFIG', 'DEFAULT_PROFILE',
    'Dialect', 'CREDENTIALS', 'CONFIG', 'capture',
    'render_credentials', 'render_config'
]

PROFILE_CREDENTIALS = r'^\[(.+)\]$'
PROFILE_CONFIG = r'^\[profile\s+(.+)\]$'
DEFAULT_PROFILE = 'default'


@lru_cache(maxsize=None)
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def capture(pattern: str | re.Pattern[str], line: str) -> str | None:
    """Section name declared by `line`, or `None` for a data line."""
    line = line.strip()
    if line == f'[{DEFAULT_PROFILE}]':
        return DEFAULT_PROFILE

    if isinstance(pattern, str):
        pattern = _compiled(pattern)
    if (m := pattern.match(line)) is None:
        return None
    return m.group(1)


def render_credentials(name: str) -> str:
    return f'[{name}]'


def render_config(name: str) -> str:
    if name == DEFAULT_PROFILE:
        return f'[{DEFAULT_PROFILE}]'
    return f'[profile {name}]'


@dataclass(frozen=True)
class Dialect:
    """Header matcher, header renderer and file name, bundled."""
    name: str
    pattern: str
    renderer: Renderer
    filename: str

    def capture(self, line: str) -> str | None:
        return capture(self.pattern, line)

    def render(self, name: str) -> str:
        return self.renderer(name)

    def path(self, root: str | PathLike[str]) -> Path:
        return Path(root) / self.filename


CREDENTIALS = Dialect(
    'credentials', PROFILE_CREDENTIALS, render_credentials, 'credentials')
CONFIG = Dialect('config', PROFILE_CONFIG, render_config, 'config')
