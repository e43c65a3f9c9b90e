# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2024/10/13 18:30:16
# @Author : Kariko Lin

"""`awsmfa`: sign in with a virtual MFA device, write the session
credentials back to `~/.aws`.

```sh
awsmfa set -p default -a arn:aws:iam::123456789012:mfa/me -s JBSWY3DPEHPK3PXP
awsmfa -p default            # -> [default-mfa] in config & credentials
awsmfa otp -p default
```
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .aws import AwsProfiles, default_aws_home, get_session_token
from .errors import NotFound, ProfileError
from .otp import make_totp
from .registry import RegistryFile

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = 'default'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='awsmfa',
        description='Get MFA session credentials into your AWS profiles.')
    parser.add_argument('--version', action='version', version=__version__)
    parser.add_argument(
        '-p', '--profile',
        help='Profile name executing mfa action for.')
    parser.add_argument(
        '-d', '--duration', type=int,
        help='Duration seconds that the credentials should remain valid.')
    parser.add_argument(
        '-t', '--target',
        help='Profile to save the session to (default: <profile>-mfa).')
    parser.add_argument(
        '--aws-home', type=Path,
        help='Directory holding config & credentials (default: ~/.aws).')

    sub = parser.add_subparsers(dest='command')
    sub.add_parser('ls', help='List mfa devices.')

    cmd = sub.add_parser('set', help='Set mfa device to config file.')
    cmd.add_argument('-p', '--profile', required=True, dest='device_profile')
    cmd.add_argument('-a', '--arn', required=True, help='Arn of mfa device')
    cmd.add_argument('-s', '--secret', required=True,
                     help='Secret for the device')

    cmd = sub.add_parser(
        'otp', help='Get one time password for provided profile.')
    cmd.add_argument('-p', '--profile', dest='device_profile')

    cmd = sub.add_parser('rm', help='Remove mfa device from config file.')
    cmd.add_argument('-p', '--profile', required=True, dest='device_profile')
    return parser


def run_ls(root: Path) -> None:
    print(RegistryFile.under(root).read(), end='')


def run_set(root: Path, profile: str, arn: str, secret: str) -> None:
    handler = RegistryFile.under(root)
    handler.write(handler.read().set(profile, arn, secret))
    logger.info('Saved MFA device for profile "%s" successfully.', profile)


def run_rm(root: Path, profile: str) -> None:
    handler = RegistryFile.under(root)
    handler.write(handler.read().remove(profile))
    logger.info('Removed the MFA device for profile "%s" successfully.',
                profile)


def run_otp(root: Path, profile: str) -> None:
    print(make_totp(RegistryFile.under(root).read().get_secret(profile)))


def run_session(
    root: Path,
    profile: str | None,
    target: str | None,
    duration: int | None
) -> None:
    name = profile or DEFAULT_PROFILE
    registry = RegistryFile.under(root).read()
    profiles = AwsProfiles.load(root, missing_ok=True)

    # `mfa_serial` in config wins over the registered device.
    try:
        serial = profiles.mfa_serial(name)
    except NotFound:
        serial = registry.get_arn(name)

    cred = get_session_token(
        profile=profile,
        duration_seconds=duration,
        serial_number=serial,
        token_code=make_totp(registry.get_secret(name)))

    target = target or f'{name}-mfa'
    profiles.set_session(name, target, cred).save()
    logger.info('Saved session credentials to profile "%s", expires at %s.',
                target, cred.expiration_text())


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    root = args.aws_home or default_aws_home()

    try:
        match args.command:
            case 'ls':
                run_ls(root)
            case 'set':
                run_set(root, args.device_profile, args.arn, args.secret)
            case 'rm':
                run_rm(root, args.device_profile)
            case 'otp':
                run_otp(root, args.device_profile or args.profile
                        or DEFAULT_PROFILE)
            case _:
                run_session(root, args.profile, args.target, args.duration)
    except ProfileError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
