# -*- encoding: utf-8 -*-
# @File   : files.py
# @Time   : 2024/10/13 16:20:44
# @Author : Kariko Lin

"""`config` and `credentials` handled as one unit.

Where the AWS home is, is up to the caller (`default_aws_home()` gives
the usual `~/.aws`), so everything here works against any directory.
"""

import logging
import os
from os import PathLike
from pathlib import Path

from ..errors import ProfileIOError
from ..profile import CONFIG, CREDENTIALS, Dialect, ProfileParser, ProfileStore
from .sts import StsCredential

__all__ = ['AwsProfiles', 'default_aws_home', 'MFA_SERIAL']

logger = logging.getLogger(__name__)

MFA_SERIAL = 'mfa_serial'
HOME_ENV = 'AWS_MFA_HOME'


def default_aws_home() -> Path:
    if home := os.environ.get(HOME_ENV):
        return Path(home)
    return Path.home() / '.aws'


class AwsProfiles:
    def __init__(
        self,
        root: str | PathLike[str],
        config: ProfileStore,
        credentials: ProfileStore
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.credentials = credentials

    @staticmethod
    def _load_one(
        dialect: Dialect, root: str | PathLike[str], missing_ok: bool
    ) -> ProfileStore:
        parser = ProfileParser.of(dialect, root)
        try:
            return parser.read()
        except ProfileIOError:
            if missing_ok and not Path(parser.filename).exists():
                logger.debug('%s not found, starting empty', parser)
                return ProfileStore(source=parser.filename)
            raise

    @classmethod
    def load(
        cls, root: str | PathLike[str], *, missing_ok: bool = False
    ) -> 'AwsProfiles':
        return cls(
            root,
            cls._load_one(CONFIG, root, missing_ok),
            cls._load_one(CREDENTIALS, root, missing_ok))

    def mfa_serial(self, name: str) -> str:
        return self.config.get_value(name, MFA_SERIAL)

    def set_session(
        self, src: str, dst: str, cred: StsCredential
    ) -> 'AwsProfiles':
        """`dst` becomes `src` minus its MFA device, signed in with `cred`.

        Both `dst` profiles get overwritten, if any. A `src` living only
        in `credentials` yields an empty `dst` in `config`.
        """
        if src in self.config:
            config = self.config.copy(src, dst).remove_value(dst, MFA_SERIAL)
        else:
            config = self.config.add(dst)
        credentials = self.credentials.add(dst)
        for k, v in cred.to_pairs().items():
            credentials = credentials.set_value(dst, k, v)
        return AwsProfiles(self.root, config, credentials)

    def save(self) -> None:
        """Write `config`, then `credentials`.

        Stops on the first failure, leaving `credentials` untouched
        if `config` could not be written.
        """
        ProfileParser.of(CONFIG, self.root).write(self.config)
        ProfileParser.of(CREDENTIALS, self.root).write(self.credentials)
        logger.debug('saved profiles under %s', self.root)

    def __repr__(self) -> str:
        return (f'AwsProfiles({str(self.root)!r}, '
                f'config={list(self.config)}, '
                f'credentials={list(self.credentials)})')
