# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 22:00:35
# @Author : Kariko Lin

from .compare import differences, equivalent
from .dialect import (
    CONFIG,
    CREDENTIALS,
    PROFILE_CONFIG,
    PROFILE_CREDENTIALS,
    Dialect,
    capture
)
from .model import ProfileStore, Section
from .parser import ParserOptions, ProfileParser, dumps, loads, readstream

__all__ = [
    'Section', 'ProfileStore',
    'Dialect', 'CREDENTIALS', 'CONFIG',
    'PROFILE_CREDENTIALS', 'PROFILE_CONFIG', 'capture',
    'ParserOptions', 'ProfileParser', 'readstream', 'loads', 'dumps',
    'equivalent', 'differences'
]
