"""
Theme option registry.

Single source of truth for the option tables, default values, validation
patterns and message templates used by:
- Template helpers (font stacks, option labels, palette colors)
- Theme settings service (preset validation, settings-store keys)
- Module configuration actions (user-facing messages)

Every table is read-only; nothing in here is mutated at runtime.
"""

import logging
import re
from datetime import date
from types import MappingProxyType

logger = logging.getLogger(__name__)


# =============================================================================
# THEME & SETTINGS KEYS
# =============================================================================

DEFAULT_THEME_KEY = 'LibraryTheme'
FALLBACK_THEME_SLUG = 'library-theme'

# Settings-store key naming. The store itself is external, we only build keys.
THEME_SETTINGS_PREFIX = 'theme_settings_'
THEME_SETTINGS_CONTAINER_KEY = 'theme_settings'
DEFAULTS_KEY_PREFIX = 'LibraryThemeStyles_defaults_'
SITE_SETTINGS_PREFIX = 'site_'

# =============================================================================
# PRESETS
# =============================================================================

DEFAULT_PRESET = 'modern'
AVAILABLE_PRESETS = ('modern', 'traditional')

# =============================================================================
# OPTION TABLES
# =============================================================================

FONT_FAMILIES = MappingProxyType({
    'cormorant': 'Cormorant Garamond',
    'helvetica': 'Helvetica Neue',
    'georgia': 'Georgia',
    'times': 'Times New Roman',
    'arial': 'Arial',
    'verdana': 'Verdana',
})

FONT_WEIGHTS = MappingProxyType({
    '300': 'Light',
    '400': 'Normal',
    '500': 'Medium',
    '600': 'Semi-Bold',
    '700': 'Bold',
})

FONT_STYLES = MappingProxyType({
    'normal': 'Normal',
    'italic': 'Italic',
})

FONT_SIZES = MappingProxyType({
    'normal': 'Normal',
    'large': 'Large',
})

BUTTON_SIZES = MappingProxyType({
    'extra_small': 'Extra Small',
    'small': 'Small',
    'medium': 'Medium',
    'large': 'Large',
})

HEADER_LAYOUTS = MappingProxyType({
    'logo_with_tagline': 'Logo with Tagline',
    'logo_only': 'Logo Only',
    'tagline_only': 'Tagline Only',
})

FOOTER_BANNER_HEIGHTS = MappingProxyType({
    'compact': 'Compact',
    'standard': 'Standard',
    'tall': 'Tall',
})

COLOR_PALETTE = MappingProxyType({
    'primary_color': '#b37c05',
    'sacred_gold': '#D4AF37',
    'warm_earth': '#8B4513',
    'soft_sage': '#9CAF88',
    'warm_cream': '#F5F5DC',
    'gentle_lavender': '#E6E6FA',
    'sunset_orange': '#FF8C42',
    'deep_burgundy': '#800020',
    'charcoal': '#36454F',
    'light_gray': '#F8F9FA',
    'medium_gray': '#6C757D',
})

# Category name -> option table, for generic lookups (template filters, CLI)
OPTION_TABLES = MappingProxyType({
    'font_family': FONT_FAMILIES,
    'font_weight': FONT_WEIGHTS,
    'font_style': FONT_STYLES,
    'font_size': FONT_SIZES,
    'button_size': BUTTON_SIZES,
    'header_layout': HEADER_LAYOUTS,
    'footer_banner_height': FOOTER_BANNER_HEIGHTS,
    'color_palette': COLOR_PALETTE,
})

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULTS = MappingProxyType({
    'tagline_font_size': '1.2',
    'logo_height': '100',
    'header_height': '100',
    'pagination_font_size': '1rem',
    'footer_copyright_text': f'© {date.today().year} The Library. All rights reserved.',
    'footer_powered_by_text': 'Powered by Omeka S',
})

# =============================================================================
# VALIDATION
# =============================================================================

# Patterns are matched against the whole value (re.fullmatch)
VALIDATION_RULES = MappingProxyType({
    'font_size_pattern': re.compile(r'[0-9]+(\.[0-9]+)?(rem|px|em|%)'),
    'color_pattern': re.compile(r'#[0-9A-Fa-f]{6}'),
    'height_pattern': re.compile(r'[0-9]+'),
    'border_width_pattern': re.compile(r'[0-9]+(px)?'),
})

# =============================================================================
# MESSAGES
# =============================================================================

ERROR_MESSAGES = MappingProxyType({
    'unknown_preset': 'Unknown preset: %s',
    'missing_site_slug': 'Site slug is required for this operation',
    'invalid_theme_key': 'Invalid theme key: %s',
    'settings_not_found': 'No theme settings found for site: %s',
    'preset_validation_failed': 'Preset data validation failed',
    'api_error': 'API error occurred: %s',
})

SUCCESS_MESSAGES = MappingProxyType({
    'preset_applied': 'Loaded %d %s preset defaults into LibraryTheme settings.',
    'settings_saved': 'Saved current LibraryTheme settings as %s preset defaults (%d fields).',
    'defaults_loaded': 'Loaded stored defaults back into site settings.',
    'settings_inspected': 'Current theme settings retrieved successfully.',
})

UNKNOWN_ERROR_MESSAGE = 'Unknown error'
UNKNOWN_SUCCESS_MESSAGE = 'Operation completed'


def get_theme_settings_key(theme_slug: str) -> str:
    """Settings-store key holding a site's full theme-setting bundle."""
    return THEME_SETTINGS_PREFIX + theme_slug


def get_defaults_key(preset: str) -> str:
    """Settings-store key holding a preset's saved default values."""
    return DEFAULTS_KEY_PREFIX + preset


def get_site_settings_prefix(site_slug: str) -> str:
    """Namespace prefix for settings scoped to a single site."""
    return f"{SITE_SETTINGS_PREFIX}{site_slug}:"


def is_valid_preset(preset) -> bool:
    """Exact, case-sensitive membership in AVAILABLE_PRESETS."""
    return isinstance(preset, str) and preset in AVAILABLE_PRESETS


def _matches(rule: str, value) -> bool:
    if not isinstance(value, str):
        return False
    return VALIDATION_RULES[rule].fullmatch(value) is not None


def is_valid_color(color) -> bool:
    """Check for a 6-digit hex color such as '#AABBCC'."""
    return _matches('color_pattern', color)


def is_valid_font_size(font_size) -> bool:
    """Check for a number followed by rem, px, em or %, e.g. '1.2rem'."""
    return _matches('font_size_pattern', font_size)


def is_valid_height(height) -> bool:
    return _matches('height_pattern', height)


def is_valid_border_width(border_width) -> bool:
    return _matches('border_width_pattern', border_width)


def _format_message(templates, key: str, fallback: str, args: tuple) -> str:
    template = templates.get(key)
    if template is None:
        return fallback
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError) as e:
        logger.warning(f"Could not format message '{key}' with {args!r}: {e}")
        return template


def get_error_message(key: str, *args) -> str:
    """
    Look up an error template and interpolate positional arguments.

    Example:
        get_error_message('unknown_preset', 'xyz')  # 'Unknown preset: xyz'
        get_error_message('no_such_key')            # 'Unknown error'
    """
    return _format_message(ERROR_MESSAGES, key, UNKNOWN_ERROR_MESSAGE, args)


def get_success_message(key: str, *args) -> str:
    """Success counterpart of get_error_message()."""
    return _format_message(SUCCESS_MESSAGES, key, UNKNOWN_SUCCESS_MESSAGE, args)
