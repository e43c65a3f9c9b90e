import pytest

from pyawsmfa.profile.dialect import (
    CONFIG,
    CREDENTIALS,
    PROFILE_CONFIG,
    PROFILE_CREDENTIALS,
    capture,
    render_config,
    render_credentials,
)


@pytest.mark.parametrize('line, expected', [
    ('[default]', 'default'),
    ('[tanaka]', 'tanaka'),
    ('[suzuki]', 'suzuki'),
    (' [satoh]   ', 'satoh'),
    ('access_key_id = AAAAAAAAAAAAAAAAAA', None),
    ('session_token = abcde[fghijk]lmn', None),
    ('', None),
])
def test_capture_credentials_header(line, expected):
    assert capture(PROFILE_CREDENTIALS, line) == expected


@pytest.mark.parametrize('line, expected', [
    ('[default]', 'default'),
    ('  [default]  ', 'default'),
    ('[profile tanaka]', 'tanaka'),
    ('[profile suzuki]', 'suzuki'),
    (' [profile satoh]   ', 'satoh'),
    ('[profile\t  spaced]', 'spaced'),
    ('[tanaka]', None),
    ('[profiletanaka]', None),
    ('region = ap-northeast-1', None),
    ('foo = bar[profile baz]foobar', None),
])
def test_capture_config_header(line, expected):
    assert capture(PROFILE_CONFIG, line) == expected


def test_renderers():
    assert render_credentials('default') == '[default]'
    assert render_credentials('tanaka') == '[tanaka]'
    assert render_config('default') == '[default]'
    assert render_config('tanaka') == '[profile tanaka]'


def test_dialects(tmp_path):
    assert CREDENTIALS.capture('[tanaka]') == 'tanaka'
    assert CONFIG.capture('[tanaka]') is None
    assert CONFIG.render('tanaka') == '[profile tanaka]'
    assert CREDENTIALS.path(tmp_path) == tmp_path / 'credentials'
    assert CONFIG.path(tmp_path) == tmp_path / 'config'


@pytest.mark.parametrize('dialect', [CREDENTIALS, CONFIG])
@pytest.mark.parametrize('name', ['default', 'tanaka', 'my-profile.v2'])
def test_render_is_inverse_of_capture(dialect, name):
    assert dialect.capture(dialect.render(name)) == name
