"""
Theme settings service.

Business logic behind the module configuration actions: applying presets to
a site's theme settings, saving a site's settings as a preset's defaults,
loading those defaults back, and inspecting/comparing what is stored.

Settings live in an external key/value store (see theme_styles.store). A
site's bundle is stored under ``theme_settings_<theme slug>`` inside the
site's namespace; saved preset defaults are stored as JSON in the global
namespace under ``LibraryThemeStyles_defaults_<preset>``.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from flask import current_app

from theme_styles.constants import (
    COLOR_PALETTE,
    DEFAULTS,
    FALLBACK_THEME_SLUG,
    THEME_SETTINGS_CONTAINER_KEY,
    get_defaults_key,
    get_error_message,
    get_site_settings_prefix,
    get_theme_settings_key,
    is_valid_preset,
)
from theme_styles.errors import (
    ErrorHandler,
    SiteNotFoundError,
    ThemeSettingsError,
    UnknownPresetError,
)
from theme_styles.presets import get_preset, has_preset
from theme_styles.store import SettingsStore

logger = logging.getLogger(__name__)


def get_theme_service() -> 'ThemeSettingsService':
    """Return the service wired into the current Flask app by create_app()."""
    return current_app.extensions['theme_styles']


class ThemeSettingsService:
    """
    Args:
        settings: Global settings store
        sites: Mapping of site slug -> theme slug. When None every site slug
            is accepted and uses FALLBACK_THEME_SLUG.
        error_handler: Shared ErrorHandler (one is created if omitted)
    """

    def __init__(self, settings: SettingsStore, sites: Optional[Mapping[str, str]] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self.settings = settings
        self.sites = sites
        self.error_handler = error_handler or ErrorHandler(logger)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def apply_preset_to_theme_settings(self, site_slug: Optional[str], preset: str,
                                       values: Optional[Mapping[str, Any]] = None) -> Tuple[int, Dict[str, Any]]:
        """
        Merge preset values into a site's theme settings.

        Args:
            site_slug: Site to update, or None for the global settings
            preset: Preset name
            values: Values to apply instead of the built-in preset (used when
                loading saved defaults)

        Returns:
            (number of keys applied, resulting settings bundle)
        """
        if values is None:
            if not has_preset(preset):
                raise ThemeSettingsError(get_error_message('unknown_preset', preset))
            values = get_preset(preset)

        validation_errors = self.error_handler.validate_theme_settings(dict(values))
        if validation_errors:
            raise ThemeSettingsError(f"Preset validation failed: {', '.join(validation_errors)}")

        store, theme_slug = self._resolve_site(site_slug)
        key = get_theme_settings_key(theme_slug)

        current = store.get(key, {})
        current = dict(current) if isinstance(current, dict) else {}
        current.update(values)
        store.set(key, current)

        self.error_handler.log_success(
            'Applied preset to theme settings',
            preset=preset, site_slug=site_slug, settings_count=len(values),
        )
        return len(values), current

    def save_settings_as_preset_defaults(self, site_slug: Optional[str], preset: str) -> Tuple[int, Dict[str, Any]]:
        """Store the site's current theme settings as ``preset``'s defaults."""
        if not is_valid_preset(preset):
            raise UnknownPresetError(get_error_message('unknown_preset', preset))

        store, theme_slug = self._resolve_site(site_slug)
        stored = self._current_theme_settings(store, theme_slug)

        if not stored:
            raise ThemeSettingsError(get_error_message('settings_not_found', site_slug or 'default'))

        validation_errors = self.error_handler.validate_theme_settings(stored)
        if validation_errors:
            raise ThemeSettingsError(f"Settings validation failed: {', '.join(validation_errors)}")

        self.settings.set(get_defaults_key(preset), json.dumps(stored))

        self.error_handler.log_success(
            'Saved settings as preset defaults',
            preset=preset, site_slug=site_slug, settings_count=len(stored),
        )
        return len(stored), stored

    def load_stored_defaults(self, site_slug: Optional[str], preset: str) -> Tuple[int, Dict[str, Any]]:
        """Apply the defaults previously saved for ``preset`` to a site."""
        stored_json = self.settings.get(get_defaults_key(preset))
        if not stored_json:
            raise ThemeSettingsError(f"No stored defaults found for preset: {preset}")

        try:
            stored_defaults = json.loads(stored_json) if isinstance(stored_json, str) else stored_json
        except json.JSONDecodeError:
            stored_defaults = None

        if not isinstance(stored_defaults, dict):
            raise ThemeSettingsError(f"Invalid stored defaults format for preset: {preset}")

        return self.apply_preset_to_theme_settings(site_slug, preset, values=stored_defaults)

    def inspect_theme_settings(self, site_slug: Optional[str]) -> Dict[str, Any]:
        store, theme_slug = self._resolve_site(site_slug)
        settings = self._current_theme_settings(store, theme_slug)

        return {
            'site_slug': site_slug,
            'theme_slug': theme_slug,
            'settings_count': len(settings),
            'settings': settings,
        }

    def compare_with_preset(self, site_slug: Optional[str], preset: str) -> Dict[str, Any]:
        """
        Compare a site's current settings with a built-in preset.

        Returns:
            Dict with counts plus 'matching_keys' (key -> value) and
            'different_keys' (key -> {'current', 'preset'})
        """
        current = self.inspect_theme_settings(site_slug)['settings']
        preset_values = get_preset(preset)

        matches = {}
        differences = {}
        for key, preset_value in preset_values.items():
            current_value = current.get(key)
            if current_value == preset_value:
                matches[key] = current_value
            else:
                differences[key] = {'current': current_value, 'preset': preset_value}

        return {
            'preset': preset,
            'total_preset_keys': len(preset_values),
            'matches': len(matches),
            'differences': len(differences),
            'matching_keys': matches,
            'different_keys': differences,
        }

    def inspect_key(self, site_slug: Optional[str], key: str) -> Any:
        return self.inspect_theme_settings(site_slug)['settings'].get(key)

    def get_theme_setting(self, site_slug: Optional[str], name: str, default: Any = None) -> Any:
        """
        Value of a single theme setting for templates.

        Falls back to DEFAULTS, then COLOR_PALETTE, then ``default``.
        """
        settings = self.inspect_theme_settings(site_slug)['settings']
        if name in settings:
            return settings[name]
        if name in DEFAULTS:
            return DEFAULTS[name]
        return COLOR_PALETTE.get(name, default)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _resolve_site(self, site_slug: Optional[str]) -> Tuple[SettingsStore, str]:
        """Return the settings store and theme slug for a site (global when no slug)."""
        if not site_slug:
            return self.settings, FALLBACK_THEME_SLUG

        if self.sites is None:
            theme_slug = FALLBACK_THEME_SLUG
        elif site_slug in self.sites:
            theme_slug = self.sites[site_slug]
        else:
            lookup_error = SiteNotFoundError(f"No site with slug '{site_slug}'")
            raise ThemeSettingsError(self.error_handler.handle_api_error(lookup_error, 'read site')) from lookup_error

        return self.settings.scoped(get_site_settings_prefix(site_slug)), theme_slug or FALLBACK_THEME_SLUG

    def _current_theme_settings(self, store: SettingsStore, theme_slug: str) -> Dict[str, Any]:
        """Namespaced bundle first, then the legacy 'theme_settings' container."""
        stored = store.get(get_theme_settings_key(theme_slug), {})

        if not isinstance(stored, dict) or not stored:
            container = store.get(THEME_SETTINGS_CONTAINER_KEY, {})
            if isinstance(container, dict):
                if isinstance(container.get(theme_slug), dict):
                    stored = container[theme_slug]
                elif container:
                    stored = container

        return dict(stored) if isinstance(stored, dict) else {}
