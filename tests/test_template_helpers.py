"""
Tests for theme_styles.template_helpers module.
"""

import pytest
from flask import g, render_template_string

from theme_styles.template_helpers import option_label, theme_setting


class TestFilters:
    """Tests for registered Jinja filters."""

    def test_font_family_filter(self, app):
        with app.test_request_context():
            assert render_template_string("{{ 'lora' | font_family }}") == 'Lora, Georgia, serif'
            assert render_template_string("{{ 'fira_code' | font_family }}") == 'Fira Code, Consolas, monospace'

    def test_font_family_filter_unknown_key(self, app):
        with app.test_request_context():
            rendered = render_template_string("{{ 'comic' | font_family }}")
        assert rendered.startswith('system-ui, -apple-system')

    def test_option_label_filter(self, app):
        with app.test_request_context():
            assert render_template_string("{{ 'logo_only' | option_label('header_layout') }}") == 'Logo Only'
            assert render_template_string("{{ 'sideways' | option_label('header_layout', 'Default') }}") == 'Default'

    def test_valid_color_filter(self, app):
        with app.test_request_context():
            assert render_template_string("{{ '#AABBCC' | valid_color }}") == 'True'
            assert render_template_string("{{ 'blue' | valid_color }}") == 'False'

    def test_option_label_function(self):
        assert option_label('600', 'font_weight') == 'Semi-Bold'
        assert option_label('900', 'font_weight') == ''


class TestGlobals:
    """Tests for registered Jinja globals."""

    def test_theme_settings_key(self, app):
        with app.test_request_context():
            assert render_template_string("{{ theme_settings_key('library-theme') }}") == 'theme_settings_library-theme'

    def test_color_palette(self, app):
        with app.test_request_context():
            assert render_template_string("{{ color_palette['charcoal'] }}") == '#36454F'

    def test_theme_defaults(self, app):
        with app.test_request_context():
            assert render_template_string("{{ theme_defaults['logo_height'] }}") == '100'

    def test_theme_setting_uses_current_site(self, app, app_service):
        app_service.apply_preset_to_theme_settings('main', 'traditional')

        with app.test_request_context():
            g.theme_site_slug = 'main'
            assert render_template_string("{{ theme_setting('h1_font_color') }}") == '#1F3A5F'

    def test_theme_setting_explicit_site(self, app, app_service):
        app_service.apply_preset_to_theme_settings('archive', 'modern')

        with app.test_request_context():
            assert render_template_string("{{ theme_setting('h1_font_color', site_slug='archive') }}") == '#b37c05'

    def test_theme_setting_default(self, app):
        with app.test_request_context():
            assert render_template_string("{{ theme_setting('no_such_setting', 'fallback') }}") == 'fallback'


class TestThemeSetting:

    def test_values_are_sanitized(self, app, app_service):
        app_service.settings.scoped('site_main:').set(
            'theme_settings_library-theme',
            {'footer_copyright_text': '<script>alert(1)</script> The Library'},
        )

        with app.app_context():
            value = theme_setting('footer_copyright_text', site_slug='main')

        assert '<script' not in value
        assert value.endswith('The Library')

    def test_falls_back_to_defaults_without_site(self, app):
        with app.app_context():
            assert theme_setting('header_height') == '100'


class TestThemeSettingUnknownSite:
    """theme_setting() falls back to defaults when the site cannot be resolved."""

    @pytest.fixture
    def site_app(self, monkeypatch):
        from config import TestingConfig
        from theme_styles import create_app

        monkeypatch.setattr(TestingConfig, 'THEME_SITES', {'main': 'library-theme'})
        return create_app('testing')

    def test_renders_palette_fallback(self, site_app):
        with site_app.test_request_context():
            g.theme_site_slug = 'gone'
            assert render_template_string("{{ theme_setting('primary_color') }}") == '#b37c05'

    def test_falls_back_to_defaults_then_default(self, site_app):
        with site_app.app_context():
            assert theme_setting('logo_height', site_slug='gone') == '100'
            assert theme_setting('no_such_setting', 'fallback', site_slug='gone') == 'fallback'

    def test_known_site_still_resolves(self, site_app):
        site_app.extensions['theme_styles'].apply_preset_to_theme_settings('main', 'traditional')

        with site_app.app_context():
            assert theme_setting('primary_color', site_slug='main') == '#1F3A5F'
