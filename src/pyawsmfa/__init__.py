# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:35:02
# @Author : Kariko Lin

import logging

from .profile import (
    CONFIG,
    CREDENTIALS,
    Dialect,
    ParserOptions,
    ProfileParser,
    ProfileStore,
    Section,
    differences,
    dumps,
    equivalent,
    loads
)

__version__ = '0.3.0'

__all__ = [
    'Section', 'ProfileStore', 'Dialect', 'CREDENTIALS', 'CONFIG',
    'ParserOptions', 'ProfileParser', 'loads', 'dumps',
    'equivalent', 'differences'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
