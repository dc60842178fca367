"""
Tests for theme_styles.security module.
"""

import pytest
from theme_styles.security import (
    generate_secure_id,
    sanitize_setting_value,
    sanitize_url,
    validate_input,
)


class TestSanitizeUrl:
    """Tests for sanitize_url function."""

    @pytest.mark.parametrize('url', ['https://example.org/catalog', 'http://example.org', '/about'])
    def test_safe_urls_unchanged(self, url):
        assert sanitize_url(url) == url

    @pytest.mark.parametrize('url', [
        'javascript:alert(1)',
        ' JavaScript:alert(1)',
        'data:text/html;base64,AAAA',
        'vbscript:msgbox',
        '//evil.example.com',
        'ftp://example.org/file',
        '/\\evil.example.com',
        '/\\/evil.example.com',
        'about',
        '',
        None,
        42,
    ])
    def test_unsafe_urls_replaced(self, url):
        assert sanitize_url(url) == '#'


class TestSanitizeSettingValue:

    def test_strips_script_openers(self):
        cleaned = sanitize_setting_value('<script>alert(1)</script> & <IFRAME src="x">')
        assert '<script' not in cleaned.lower()
        assert '<iframe' not in cleaned.lower()

    def test_plain_values_unchanged(self):
        assert sanitize_setting_value('#1F3A5F') == '#1F3A5F'
        assert sanitize_setting_value('<strong>Library</strong>') == '<strong>Library</strong>'

    def test_non_strings_pass_through(self):
        assert sanitize_setting_value(None) is None
        assert sanitize_setting_value({'a': 1}) == {'a': 1}


class TestValidateInput:
    """Tests for validate_input function."""

    def test_email(self):
        assert validate_input(' librarian@example.org ', 'email') == 'librarian@example.org'
        assert validate_input('not-an-email', 'email') is None

    def test_url(self):
        assert validate_input('https://example.org', 'url') == 'https://example.org'
        assert validate_input('example.org', 'url') is None

    def test_int(self):
        assert validate_input(' 42 ', 'int') == 42
        assert validate_input('4.2', 'int') is None

    def test_float(self):
        assert validate_input('1.125', 'float') == 1.125
        assert validate_input('large', 'float') is None

    def test_text_strips_control_characters(self):
        assert validate_input('  Reading\x00 Room\x07 ') == 'Reading Room'

    @pytest.mark.parametrize('kind', ['email', 'url', 'int', 'float', 'text'])
    def test_non_string_input(self, kind):
        assert validate_input(None, kind) is None
        assert validate_input(42, kind) is None


class TestGenerateSecureId:

    def test_length_and_charset(self):
        value = generate_secure_id()
        assert len(value) == 16
        int(value, 16)

    def test_custom_length(self):
        assert len(generate_secure_id(32)) == 32

    def test_unique(self):
        assert generate_secure_id() != generate_secure_id()
