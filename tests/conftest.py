"""
Shared test fixtures: sample `~/.aws` files written to a temp directory.
"""

import pytest

CONFIG_TEXT = """\
[default]
region = us-east-1
output = yaml

[profile test]
region = ap-northeast-1
output = json
"""

# same content as CONFIG_TEXT, other order
CONFIG_TEXT_REORDERED = """\
[profile test]
output = json
region = ap-northeast-1

[default]
output = yaml
region = us-east-1
"""

CREDENTIALS_TEXT = """\
[tanaka]
aws_access_key_id=ABCDEFGHIJKLMNOPQRST
aws_secret_access_key=abcdefghijklmnopqrstuvwxyz+-#$1234567890

[suzuki]
xxxxxxxxxxxxxxxx
yyyyyyyyyyyy
"""


@pytest.fixture
def aws_home(tmp_path):
    """A directory holding sample `config` and `credentials`."""
    (tmp_path / 'config').write_text(CONFIG_TEXT, encoding='utf-8')
    (tmp_path / 'credentials').write_text(CREDENTIALS_TEXT, encoding='utf-8')
    return tmp_path
