"""
Jinja helpers for theme templates.

Registered on the app by create_app(). In templates:

    <h1 style="font-family: {{ theme_setting('h1_font_family') | font_family }}">
    {{ 'logo_only' | option_label('header_layout') }}

theme_setting() reads the site in ``g.theme_site_slug`` unless a slug is
passed explicitly; values are sanitized before they reach the template.
"""
import logging
from typing import Any, Optional

from flask import g

from theme_styles.constants import COLOR_PALETTE, DEFAULTS, get_theme_settings_key, is_valid_color
from theme_styles.errors import ThemeStylesError
from theme_styles.fonts import resolve_font_family, resolve_option
from theme_styles.security import sanitize_setting_value
from theme_styles.service import get_theme_service

logger = logging.getLogger(__name__)


def theme_setting(name: str, default: Any = None, site_slug: Optional[str] = None) -> Any:
    if site_slug is None:
        site_slug = g.get('theme_site_slug')
    try:
        value = get_theme_service().get_theme_setting(site_slug, name, default)
    except ThemeStylesError as e:
        logger.warning(f"theme_setting({name!r}) for site {site_slug!r} failed: {e}, using defaults")
        value = DEFAULTS.get(name, COLOR_PALETTE.get(name, default))
    return sanitize_setting_value(value)


def option_label(key, category: str, default: str = '') -> str:
    return resolve_option(category, key, default)


def init_template_helpers(app):
    app.add_template_filter(resolve_font_family, 'font_family')
    app.add_template_filter(option_label, 'option_label')
    app.add_template_filter(is_valid_color, 'valid_color')

    app.add_template_global(theme_setting, 'theme_setting')
    app.add_template_global(get_theme_settings_key, 'theme_settings_key')
    app.add_template_global(DEFAULTS, 'theme_defaults')
    app.add_template_global(COLOR_PALETTE, 'color_palette')
