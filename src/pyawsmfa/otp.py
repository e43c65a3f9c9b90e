# -*- encoding: utf-8 -*-
# @File   : otp.py
# @Time   : 2024/10/13 17:42:58
# @Author : Kariko Lin

"""TOTP (RFC 6238) codes, as shown by any virtual MFA app."""

import base64
import binascii
import hashlib
import hmac
import struct
import time

from .errors import OtpError

__all__ = ['make_totp']


def _decode_secret(secret: str) -> bytes:
    secret = secret.replace(' ', '').upper()
    secret += '=' * (-len(secret) % 8)
    try:
        return base64.b32decode(secret)
    except binascii.Error as e:
        raise OtpError(f'MFA secret is not valid base32. {e}') from e


def make_totp(
    secret: str,
    step: int = 30,
    t0: int = 0,
    digits: int = 6,
    now: float | None = None
) -> str:
    key = _decode_secret(secret)
    if now is None:
        now = time.time()
    counter = int((now - t0) // step)

    digest = hmac.new(key, struct.pack('>Q', counter), hashlib.sha1).digest()
    offset = digest[-1] & 0x0F
    code = struct.unpack('>I', digest[offset:offset + 4])[0] & 0x7FFFFFFF
    return str(code % 10 ** digits).zfill(digits)
