"""
Tests for theme_styles.store module.
"""

from unittest.mock import MagicMock

import pytest
from theme_styles.store import (
    CachedSettingsStore,
    MemorySettingsStore,
    RedisSettingsStore,
    SettingsStore,
)


class TestMemorySettingsStore:
    """Tests for MemorySettingsStore."""

    def test_get_missing_returns_default(self, store):
        assert store.get('missing') is None
        assert store.get('missing', 'fallback') == 'fallback'

    def test_set_and_get(self, store):
        store.set('theme_settings_library-theme', {'primary_color': '#1F3A5F'})
        assert store.get('theme_settings_library-theme') == {'primary_color': '#1F3A5F'}

    def test_delete(self, store):
        store.set('key', 'value')
        store.delete('key')
        assert store.get('key') is None

    def test_delete_missing_key_is_noop(self, store):
        store.delete('never-set')

    def test_initial_values_are_copied(self):
        initial = {'a': '1'}
        store = MemorySettingsStore(initial)
        store.set('b', '2')
        assert initial == {'a': '1'}
        assert sorted(store.keys()) == ['a', 'b']

    def test_base_store_is_abstract(self):
        with pytest.raises(NotImplementedError):
            SettingsStore().get('key')


class TestScopedSettingsStore:
    """Tests for per-site scoping."""

    def test_scoped_keys_are_prefixed(self, store):
        store.scoped('site_main:').set('theme_settings_library-theme', {'a': 'b'})

        assert store.get('site_main:theme_settings_library-theme') == {'a': 'b'}
        assert store.get('theme_settings_library-theme') is None

    def test_scopes_are_isolated(self, store):
        store.scoped('site_main:').set('k', 'main')
        store.scoped('site_archive:').set('k', 'archive')

        assert store.scoped('site_main:').get('k') == 'main'
        assert store.scoped('site_archive:').get('k') == 'archive'

    def test_scoped_delete(self, store):
        scoped = store.scoped('site_main:')
        scoped.set('k', 'v')
        scoped.delete('k')
        assert scoped.get('k', 'gone') == 'gone'


class TestRedisSettingsStore:
    """Tests for RedisSettingsStore with a mocked client."""

    @pytest.fixture
    def client(self):
        return MagicMock()

    def test_get_decodes_json(self, client):
        client.get.return_value = b'{"primary_color": "#1F3A5F"}'
        store = RedisSettingsStore(client)

        assert store.get('theme_settings_library-theme') == {'primary_color': '#1F3A5F'}
        client.get.assert_called_once_with('theme_styles:theme_settings_library-theme')

    def test_get_accepts_decoded_strings(self, client):
        client.get.return_value = '"modern"'
        assert RedisSettingsStore(client).get('k') == 'modern'

    def test_get_missing_returns_default(self, client):
        client.get.return_value = None
        assert RedisSettingsStore(client).get('k', 'fallback') == 'fallback'

    def test_get_undecodable_returns_default(self, client):
        client.get.return_value = b'not json'
        assert RedisSettingsStore(client).get('k', {}) == {}

    def test_set_encodes_json(self, client):
        RedisSettingsStore(client, key_prefix='lts:').set('k', {'a': '1'})
        client.set.assert_called_once_with('lts:k', '{"a": "1"}')

    def test_delete(self, client):
        RedisSettingsStore(client).delete('k')
        client.delete.assert_called_once_with('theme_styles:k')


class TestCachedSettingsStore:
    """Tests for the read-through cache."""

    def test_reads_are_cached(self, app_context):
        from theme_styles import cache

        inner = MemorySettingsStore({'k': {'a': '1'}})
        cached = CachedSettingsStore(inner, cache, timeout=60)

        assert cached.get('k') == {'a': '1'}
        inner.set('k', {'a': '2'})
        assert cached.get('k') == {'a': '1'}

    def test_writes_invalidate(self, app_context):
        from theme_styles import cache

        inner = MemorySettingsStore()
        cached = CachedSettingsStore(inner, cache, timeout=60)

        cached.set('k', {'a': '1'})
        assert cached.get('k') == {'a': '1'}
        cached.set('k', {'a': '3'})
        assert cached.get('k') == {'a': '3'}
        assert inner.get('k') == {'a': '3'}

    def test_delete_invalidates(self, app_context):
        from theme_styles import cache

        inner = MemorySettingsStore({'k': 'v'})
        cached = CachedSettingsStore(inner, cache, timeout=60)

        assert cached.get('k') == 'v'
        cached.delete('k')
        assert cached.get('k', 'gone') == 'gone'

    def test_missing_values_are_not_cached(self):
        cache = MagicMock()
        cache.get.return_value = None
        cached = CachedSettingsStore(MemorySettingsStore(), cache)

        assert cached.get('k', 'dflt') == 'dflt'
        cache.set.assert_not_called()
