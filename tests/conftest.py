"""
Pytest configuration and shared fixtures.
"""

import pytest
import os
import sys

# Add the project root to the path so `config` and `theme_styles` import without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from theme_styles.store import MemorySettingsStore
from theme_styles.service import ThemeSettingsService


@pytest.fixture
def app():
    """Create application for testing."""
    from theme_styles import create_app

    app = create_app('testing')
    app.config['TESTING'] = True
    return app


@pytest.fixture
def app_context(app):
    """Application context for testing."""
    with app.app_context():
        yield


@pytest.fixture
def app_service(app):
    """The ThemeSettingsService wired into the test app."""
    return app.extensions['theme_styles']


@pytest.fixture
def store():
    return MemorySettingsStore()


@pytest.fixture
def service(store):
    """Service with two registered sites using different themes."""
    return ThemeSettingsService(store, sites={
        'main': 'library-theme',
        'archive': 'archive-theme',
    })
