# -*- encoding: utf-8 -*-
# @File   : registry.py
# @Time   : 2024/10/13 17:05:31
# @Author : Kariko Lin

"""Virtual MFA devices known to `awsmfa`, kept in `mfa_config.yml`.

```yaml
devices:
- profile: default
  arn: arn:aws:iam::123456789012:mfa/mfa_device_name
  secret: JBSWY3DPEHPK3PXP
```
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from os import PathLike
from pathlib import Path

import yaml

from .abstract import FileHandler
from .errors import DeviceNotFound, ProfileError, ProfileIOError

__all__ = ['Device', 'DeviceRegistry', 'RegistryFile', 'REGISTRY_FILENAME']

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = 'mfa_config.yml'


@dataclass(frozen=True)
class Device:
    profile: str
    arn: str
    secret: str

    def __str__(self) -> str:
        return (f'[profile {self.profile}]\n'
                f'arn\t: {self.arn}\n'
                f'secret\t: {self.secret}\n')


class DeviceRegistry:
    def __init__(
        self, devices: Iterable[Device] = (), source: str | None = None
    ) -> None:
        self.devices: tuple[Device, ...] = tuple(devices)
        self.source = source

    def __len__(self) -> int:
        return len(self.devices)

    def __str__(self) -> str:
        if not self.devices:
            return ('There are no mfa devices. '
                    'Use set command to register your first mfa device.\n')
        return '\n'.join(str(i) for i in self.devices)

    def get(self, profile: str) -> Device:
        for i in self.devices:
            if i.profile == profile:
                return i
        raise DeviceNotFound(profile, self.source)

    def get_secret(self, profile: str) -> str:
        return self.get(profile).secret

    def get_arn(self, profile: str) -> str:
        return self.get(profile).arn

    def set(self, profile: str, arn: str, secret: str) -> 'DeviceRegistry':
        devices = [i for i in self.devices if i.profile != profile]
        devices.append(Device(profile, arn, secret))
        return DeviceRegistry(devices, self.source)

    def remove(self, profile: str) -> 'DeviceRegistry':
        return DeviceRegistry(
            (i for i in self.devices if i.profile != profile), self.source)


class RegistryFile(FileHandler[DeviceRegistry]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @classmethod
    def under(cls, root: str | PathLike[str]) -> 'RegistryFile':
        return cls(Path(root) / REGISTRY_FILENAME)

    def read(self) -> DeviceRegistry:
        """A missing file is just an empty registry."""
        if not os.path.exists(self._fn):
            return DeviceRegistry(source=self._fn)
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = yaml.safe_load(fp) or {}
        except OSError as e:
            raise ProfileIOError(
                f'Error reading "{self._fn}". {e}', self._fn) from e
        except yaml.YAMLError as e:
            raise ProfileError(f'{self._fn} is not valid YAML. {e}') from e

        try:
            devices = [
                Device(str(i['profile']), str(i['arn']), str(i['secret']))
                for i in data.get('devices') or []
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ProfileError(
                f'{self._fn} has a malformed device entry. {e!r}') from e
        logger.debug('loaded %d device(s) from %s', len(devices), self._fn)
        return DeviceRegistry(devices, self._fn)

    def write(self, instance: DeviceRegistry) -> None:
        data = {'devices': [asdict(i) for i in instance.devices]}
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                yaml.safe_dump(data, fp, sort_keys=False)
        except OSError as e:
            raise ProfileIOError(
                f'Error writing to "{self._fn}". {e}', self._fn) from e
        logger.debug('saved %d device(s) to %s', len(instance), self._fn)
