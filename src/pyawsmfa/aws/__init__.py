# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 15:40:12
# @Author : Kariko Lin

from .files import MFA_SERIAL, AwsProfiles, default_aws_home
from .sts import StsCredential, get_session_token

__all__ = [
    'AwsProfiles', 'default_aws_home', 'MFA_SERIAL',
    'StsCredential', 'get_session_token'
]
