"""
Tests for configuration loading and the app factory.
"""

from config import TestingConfig, config_dict, parse_site_themes
from theme_styles import create_app, create_settings_store
from theme_styles.store import CachedSettingsStore, MemorySettingsStore


class TestParseSiteThemes:
    """Tests for parse_site_themes function."""

    def test_unset(self):
        assert parse_site_themes(None) is None
        assert parse_site_themes('  ') is None

    def test_pairs(self):
        assert parse_site_themes('main:library-theme, archive:archive-theme') == {
            'main': 'library-theme',
            'archive': 'archive-theme',
        }

    def test_slug_without_theme(self):
        assert parse_site_themes('main,') == {'main': None}


class TestCreateApp:
    """Tests for the application factory."""

    def test_testing_config(self, app):
        assert app.config['TESTING'] is True
        assert app.config['THEME_SETTINGS_BACKEND'] == 'memory'
        assert 'theme' in app.cli.commands

    def test_config_names(self):
        assert set(config_dict) == {'development', 'production', 'testing'}
        assert config_dict['testing'] is TestingConfig

    def test_unknown_config_name_uses_development(self):
        app = create_app('staging')
        assert app.config['DEBUG'] is True

    def test_memory_store_without_cache(self, app):
        assert isinstance(app.extensions['theme_styles'].settings, MemorySettingsStore)

    def test_cached_store_when_timeout_set(self, app):
        app.config['THEME_SETTINGS_CACHE_TIMEOUT'] = 60
        assert isinstance(create_settings_store(app), CachedSettingsStore)

    def test_redis_backend_falls_back_to_memory(self, app):
        app.config['THEME_SETTINGS_BACKEND'] = 'redis'
        app.config['REDIS_URL'] = ''
        assert isinstance(create_settings_store(app), MemorySettingsStore)

    def test_site_map_is_passed_to_service(self, monkeypatch):
        monkeypatch.setattr(TestingConfig, 'THEME_SITES', {'main': 'library-theme'})
        app = create_app('testing')
        assert app.extensions['theme_styles'].sites == {'main': 'library-theme'}
