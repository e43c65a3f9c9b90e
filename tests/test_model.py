import pytest

from pyawsmfa.errors import InvalidInput, KeyNotFound, ProfileNotFound
from pyawsmfa.profile import ProfileStore, Section
from pyawsmfa.profile.dialect import render_credentials


def build_section():
    return Section('test').set('region', 'us-east-1').set('output', 'json')


def build_store():
    return ProfileStore([
        Section('default', ['region = us-east-1', 'output = yaml']),
        Section('test', ['region = ap-northeast-1', 'output = json']),
    ], source='config')


class TestSection:
    def test_empty_name_is_rejected(self):
        with pytest.raises(InvalidInput):
            Section('')
        with pytest.raises(InvalidInput):
            build_section().rename('')

    def test_formats_to_string(self):
        assert (build_section().format(render_credentials)
                == '[test]\nregion = us-east-1\noutput = json')

    def test_gets_value_from_key(self):
        s = build_section()
        assert s['region'] == 'us-east-1'
        assert s.get('output') == 'json'
        assert s.get('unknown') is None
        with pytest.raises(KeyNotFound):
            s['unknown']

    def test_lookup_trims_keys_and_values(self):
        s = Section('test', ['  region   =  us-west-2  '])
        assert s['region'] == 'us-west-2'

    def test_first_duplicate_wins_on_lookup(self):
        s = Section('test', ['region = us-east-1', 'region = eu-west-1'])
        assert s['region'] == 'us-east-1'
        assert s.duplicated_keys() == ['region']

    def test_set_drops_every_duplicate(self):
        s = Section('test', [
            'region = us-east-1', 'output = json', 'region = eu-west-1'
        ]).set('region', 'ap-northeast-1')
        assert s.lines == ('output = json', 'region = ap-northeast-1')
        assert s['region'] == 'ap-northeast-1'

    def test_sets_value(self):
        s = build_section().set('foo', 'bar')
        assert s['foo'] == 'bar'
        s = s.set('foo', 'foobar')
        assert s['foo'] == 'foobar'
        assert [i for i in s.lines if i.startswith('foo')] == ['foo = foobar']

    def test_set_is_idempotent(self):
        once = build_section().set('foo', 'bar')
        assert once.set('foo', 'bar').lines == once.lines

    def test_set_returns_new_section(self):
        s = build_section()
        s.set('foo', 'bar')
        assert 'foo' not in s

    def test_removes_value(self):
        s = build_section().remove('region')
        assert s.get('region') is None
        assert s.lines == ('output = json',)

    def test_remove_missing_key_is_noop(self):
        s = build_section()
        assert s.remove('unknown').lines == s.lines

    def test_opaque_lines_survive_but_are_invisible(self):
        s = Section('suzuki', ['xxxxxxxx', 'region = us-east-1'])
        assert len(s) == 1
        assert list(s) == ['region']
        s = s.set('region', 'us-west-1')
        assert s.lines == ('xxxxxxxx', 'region = us-west-1')

    def test_rename_keeps_lines(self):
        s = build_section().rename('test_v2')
        assert s.name == 'test_v2'
        assert s.lines == build_section().lines

    def test_push_appends_raw_line(self):
        s = Section('test').push('region=us-east-1').push('garbage')
        assert s.lines == ('region=us-east-1', 'garbage')

    def test_equals_when_name_and_pairs_match(self):
        p0 = build_section()
        p1 = Section('test').set('output', 'json').set('region', 'us-east-1')

        # lines order differs, so does the text
        assert p0.format(render_credentials) != p1.format(render_credentials)
        assert p0 == p1

        assert p0 != p0.rename('test_v2')
        assert p0 != p1.set('foo', 'bar')
        assert p0 != p0.set('region', 'us-west-2')
        assert p0 == p0.push('# some comment')


class TestProfileStore:
    def test_lookup(self):
        store = build_store()
        assert list(store) == ['default', 'test']
        assert store.get_section('test')['region'] == 'ap-northeast-1'
        assert store.get_value('test', 'region') == 'ap-northeast-1'
        assert 'test' in store
        assert store.get('unknown') is None

    def test_lookup_failures_name_the_file(self):
        store = build_store()
        with pytest.raises(ProfileNotFound) as e:
            store.get_value('unknown', 'region')
        assert e.value.name == 'unknown'
        assert e.value.source == 'config'
        assert str(e.value) == 'Cannot find profile: unknown (config)'

        with pytest.raises(KeyNotFound) as e:
            store.get_value('test', 'unknown')
        assert e.value.key == 'unknown'
        assert e.value.profile == 'test'
        assert e.value.source == 'config'

    def test_adds_empty_profile(self):
        store = build_store().add('test_v2')
        assert len(store) == 3
        assert store.sections[2].name == 'test_v2'
        assert store.sections[2].lines == ()

    def test_add_clears_existing_profile(self):
        store = build_store().add('test')
        assert len(store) == 2
        assert list(store) == ['default', 'test']
        assert store['test'].lines == ()

    def test_set_overwrites_profile(self):
        store = build_store().set(
            Section('test', ['output = string', 'foo = bar']))
        assert len(store) == 2
        assert store.get_value('test', 'output') == 'string'
        assert store.get_value('test', 'foo') == 'bar'
        with pytest.raises(KeyNotFound):
            store.get_value('test', 'region')

    def test_set_moves_profile_to_the_end(self):
        store = build_store().set(Section('default', ['region = eu-west-1']))
        assert list(store) == ['test', 'default']

    def test_set_is_idempotent(self):
        section = Section('test_v2', ['region = us-west-2'])
        once = build_store().set(section)
        twice = once.set(section)
        assert once == twice
        assert once.format(render_credentials) == twice.format(
            render_credentials)

    def test_set_value_and_remove_value(self):
        store = build_store().set_value(
            'default', 'mfa_serial', 'ABCDEFGHIJKLMNOPQRST')
        assert store.get_value('default', 'mfa_serial') == \
            'ABCDEFGHIJKLMNOPQRST'

        store = store.remove_value('test', 'region')
        with pytest.raises(KeyNotFound):
            store.get_value('test', 'region')

        with pytest.raises(ProfileNotFound):
            store.set_value('unknown', 'region', 'us-east-1')

    def test_removes_profile(self):
        store = build_store().remove_section('test')
        assert list(store) == ['default']
        assert store.remove_section('unknown') == store

    def test_copies_profile(self):
        original = build_store()
        store = original.copy('test', 'test_v2')
        assert len(store) == 3
        assert store.sections[2].name == 'test_v2'
        assert store.sections[2].lines == (
            'region = ap-northeast-1', 'output = json')
        for k in store['test']:
            assert store.get_value('test_v2', k) == store.get_value('test', k)
        assert store['test'] == original['test']

    def test_copy_overwrites_destination(self):
        store = build_store().copy('test', 'default')
        assert len(store) == 2
        assert store.get_value('default', 'output') == 'json'

    def test_copy_requires_source(self):
        with pytest.raises(ProfileNotFound):
            build_store().copy('unknown', 'test_v2')

    def test_renames_profile(self):
        store = build_store().rename('test', 'prod')
        assert list(store) == ['default', 'prod']
        assert store.get_value('prod', 'region') == 'ap-northeast-1'
        with pytest.raises(ProfileNotFound):
            build_store().rename('unknown', 'prod')

    def test_mutations_leave_original_alone(self):
        store = build_store()
        store.add('x')
        store.remove_section('test')
        store.set_value('test', 'region', 'us-west-2')
        assert store == build_store()
        assert store.get_value('test', 'region') == 'ap-northeast-1'

    def test_empty_store_formats_to_empty_string(self):
        assert ProfileStore().format(render_credentials) == ''

    def test_format_joins_with_blank_line(self):
        store = ProfileStore([
            Section('a', ['k = 1']), Section('b'), Section('c', ['k = 3'])])
        assert store.format(render_credentials) == \
            '[a]\nk = 1\n\n[b]\n\n\n[c]\nk = 3'

    def test_equality_ignores_order(self):
        reordered = ProfileStore([
            Section('test', ['output = json', 'region = ap-northeast-1']),
            Section('default', ['output = yaml', 'region = us-east-1']),
        ])
        assert build_store() == reordered
        assert build_store() != reordered.add('x')
        assert build_store() != reordered.set_value('test', 'output', 'text')

    def test_duplicated_names_keep_the_later(self):
        with pytest.warns(UserWarning, match='declared more than once'):
            store = ProfileStore([
                Section('a', ['k = 1']),
                Section('b'),
                Section('a', ['k = 2']),
            ])
        assert list(store) == ['b', 'a']
        assert store.get_value('a', 'k') == '2'
