# -*- encoding: utf-8 -*-
# @File   : sts.py
# @Time   : 2024/10/13 15:47:08
# @Author : Kariko Lin

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import CredentialFetchError

__all__ = ['StsCredential', 'get_session_token']

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class StsCredential:
    access_key_id: str
    secret_access_key: str
    session_token: str
    expiration: datetime | None = None

    def expiration_text(self) -> str:
        if self.expiration is None:
            return 'Unknown'
        return self.expiration.strftime('%Y-%m-%d %H:%M:%S')

    def to_pairs(self) -> dict[str, str]:
        """Lines of the `credentials` profile, in writing order."""
        ret = {
            'aws_access_key_id': self.access_key_id,
            'aws_secret_access_key': self.secret_access_key,
            'aws_session_token': self.session_token,
        }
        if self.expiration is not None:
            ret['expiration'] = self.expiration.isoformat()
        return ret

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> 'StsCredential':
        """Build from a `GetSessionToken` response dict."""
        cred = response.get('Credentials')
        if not cred:
            raise CredentialFetchError(
                f'Failed to get credentials from {response!r}')
        return cls(
            access_key_id=cred.get('AccessKeyId', ''),
            secret_access_key=cred.get('SecretAccessKey', ''),
            session_token=cred.get('SessionToken', ''),
            expiration=cred.get('Expiration'))


def get_session_token(
    profile: str | None = None,
    duration_seconds: int | None = None,
    serial_number: str | None = None,
    token_code: str | None = None
) -> StsCredential:
    """Ask STS for temporary credentials, signing with `profile`
    (or the default credential chain when `None`)."""
    # botocore rejects explicit `None`s, so only pass what is set.
    params: dict[str, Any] = {}
    if duration_seconds is not None:
        params['DurationSeconds'] = duration_seconds
    if serial_number is not None:
        params['SerialNumber'] = serial_number
    if token_code is not None:
        params['TokenCode'] = token_code

    try:
        session = boto3.Session(profile_name=profile)
        response = session.client('sts').get_session_token(**params)
    except (ClientError, BotoCoreError) as e:
        raise CredentialFetchError(
            f'GetSessionToken failed for profile '
            f'"{profile or "default"}". {e}') from e
    logger.debug('got session token for %s', profile or 'default')
    return StsCredential.from_response(response)
