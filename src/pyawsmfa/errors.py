# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:17
# @Author : Kariko Lin

"""Every failure the profile engine reports.

`NotFound` is also a `KeyError`, so a `ProfileStore` behaves like
any read-only mapping (`in`, `.get()`) without extra glue.
"""


class ProfileError(Exception):
    """Base of all errors raised by this package."""
    pass


class NotFound(ProfileError, KeyError):
    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    # KeyError would repr() the message otherwise.
    def __str__(self) -> str:
        if self.source:
            return f'{self.message} ({self.source})'
        return self.message


class ProfileNotFound(NotFound):
    def __init__(self, name: str, source: str | None = None) -> None:
        super().__init__(f'Cannot find profile: {name}', source)
        self.name = name


class KeyNotFound(NotFound):
    def __init__(
        self, key: str, profile: str, source: str | None = None
    ) -> None:
        super().__init__(
            f'Not Found key: {key} in profile: {profile}', source)
        self.key = key
        self.profile = profile


class DeviceNotFound(NotFound):
    def __init__(self, profile: str, source: str | None = None) -> None:
        super().__init__(
            f'Cannot find mfa device for profile: {profile}', source)
        self.profile = profile


class ProfileIOError(ProfileError):
    """Wraps the `OSError` raised while reading or writing `path`."""
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ParseMisconfigured(ProfileError, ValueError):
    """A required `ParserOptions` field was left unset."""
    pass


class InvalidInput(ProfileError, ValueError):
    pass


class CredentialFetchError(ProfileError):
    """Raised when STS refuses (or never answers) `GetSessionToken`."""
    pass


class OtpError(ProfileError, ValueError):
    pass
