"""
Theme presets.

Named bundles of theme-setting values that can be loaded wholesale into a
site's settings. Values are strings exactly as the settings form stores them.
"""
from types import MappingProxyType
from typing import Any, List, Mapping

from theme_styles.errors import UnknownPresetError


# =============================================================================
# MODERN
# =============================================================================

_MODERN = {
    # Typography - headings
    'h1_font_family': 'cormorant',
    'h1_font_size': '2.5rem',
    'h1_font_color': '#b37c05',
    'h1_font_weight': '600',

    'h2_font_family': 'cormorant',
    'h2_font_size': '2rem',
    'h2_font_color': '#b37c05',
    'h2_font_weight': '600',

    'h3_font_family': 'georgia',
    'h3_font_size': '1.5rem',
    'h3_font_color': '#b37c05',
    'h3_font_weight': '500',

    # Typography - body
    'body_font_family': 'helvetica',
    'body_font_size': '1.125rem',
    'body_font_color': '#b37c05',
    'body_font_weight': '400',

    # Typography - tagline
    'tagline_font_family': 'georgia',
    'tagline_font_weight': '600',
    'tagline_font_style': 'italic',
    'tagline_font_color': '#b37c05',
    'tagline_hover_text_color': '#ffffff',
    'tagline_hover_background_color': '#f3d491',

    # Colors
    'primary_color': '#b37c05',
    'sacred_gold': '#D4AF37',

    # Table of contents
    'toc_font_family': 'georgia',
    'toc_font_size': 'normal',
    'toc_font_weight': '700',
    'toc_text_color': '#b37c05',
    'toc_hover_text_color': '#ffffff',
    'toc_hover_background_color': '#f3d491',
    'toc_background_color': '#ffffff',
    'toc_border_color': '#D4AF37',
    'toc_border_width': '2px',
    'toc_border_radius': '8px',
    'toc_pill_style': '1',
    'toc_font_size_rem': '',

    # Breadcrumbs
    'breadcrumbs_font_family': 'helvetica',
    'breadcrumbs_font_style': 'normal',
    'breadcrumbs_font_weight': '400',
    'breadcrumbs_font_size_rem': '1.125rem',
    'breadcrumbs_text_color': '#b37c05',
    'breadcrumbs_hover_text_color': '#ffffff',
    'breadcrumbs_hover_background_color': '#f3d491',
    'breadcrumbs_background_color': '#ffffff',
    'breadcrumbs_border_color': '#D4AF37',
    'breadcrumbs_border_width': '1px',
    'breadcrumbs_pill_style': '1',
    'breadcrumbs_include_current': '1',

    # Page title
    'page_title_pill_style': '1',
    'page_title_border_width': '1px',

    # Pagination
    'pagination_font_color': '#b37c05',
    'pagination_background_color': '#f3d491',
    'pagination_border_width': '1px',
    'pagination_hover_background_color': '#1a365d',
    'pagination_hover_text_color': '#ffffff',

    # Menu
    'menu_background_color': '#ffffff',
    'menu_text_color': '#b37c05',
    'menu_font_family': 'helvetica',

    # Footer
    'footer_background_color': '#ffffff',
    'footer_text_color': '#000000',

    # Layout
    'header_height': '100',
    'logo_height': '100',
}

# =============================================================================
# TRADITIONAL
# =============================================================================

_TRADITIONAL = {
    'h1_font_family': 'georgia',
    'h1_font_size': '2rem',
    'h1_font_color': '#1F3A5F',
    'h1_font_weight': '600',

    'h2_font_family': 'georgia',
    'h2_font_size': '1.5rem',
    'h2_font_color': '#1F3A5F',
    'h2_font_weight': '600',

    'h3_font_family': 'georgia',
    'h3_font_size': '1.25rem',
    'h3_font_color': '#1F3A5F',
    'h3_font_weight': '500',

    'body_font_family': 'helvetica',
    'body_font_size': '1rem',
    'body_font_color': '#2F3542',
    'body_font_weight': '400',

    'tagline_font_family': 'georgia',
    'tagline_font_weight': '400',
    'tagline_font_style': 'italic',
    'tagline_font_color': '#5A6470',
    'tagline_hover_text_color': '#ffffff',
    'tagline_hover_background_color': '#7A1E3A',

    'primary_color': '#1F3A5F',
    'sacred_gold': '#7A1E3A',

    'toc_font_family': 'helvetica',
    'toc_font_size': 'normal',
    'toc_font_weight': '400',
    'toc_text_color': '#1F3A5F',
    'toc_hover_text_color': '#ffffff',
    'toc_hover_background_color': '#7A1E3A',
    'toc_background_color': '#ffffff',
    'toc_border_color': '#7A1E3A',
    'toc_border_width': '2px',
    'toc_border_radius': '8px',
    'toc_pill_style': '1',

    'breadcrumbs_font_family': 'helvetica',
    'breadcrumbs_font_style': 'normal',
    'breadcrumbs_font_weight': '400',
    'breadcrumbs_font_size_rem': '1rem',
    'breadcrumbs_text_color': '#2F3542',
    'breadcrumbs_hover_text_color': '#ffffff',
    'breadcrumbs_hover_background_color': '#7A1E3A',
    'breadcrumbs_background_color': '#ffffff',
    'breadcrumbs_border_color': '#7A1E3A',
    'breadcrumbs_border_width': '1px',
    'breadcrumbs_pill_style': '1',
    'breadcrumbs_include_current': '1',

    'page_title_pill_style': '1',
    'page_title_border_width': '1px',

    'pagination_font_color': '#ffffff',
    'pagination_background_color': '#1F3A5F',
    'pagination_border_width': '1px',
    'pagination_hover_background_color': '#7A1E3A',
    'pagination_hover_text_color': '#ffffff',

    'menu_background_color': '#1F3A5F',
    'menu_text_color': '#ffffff',
    'menu_font_family': 'helvetica',

    'footer_background_color': '#f7f8fa',
    'footer_text_color': '#111111',

    'header_height': '100',
    'logo_height': '100',
}

PRESETS = MappingProxyType({
    'modern': MappingProxyType(_MODERN),
    'traditional': MappingProxyType(_TRADITIONAL),
})


def get_all_presets() -> Mapping[str, Mapping[str, str]]:
    return PRESETS


def get_preset(preset_name: str) -> Mapping[str, str]:
    """
    Return the values of a registered preset.

    Raises:
        UnknownPresetError: If no preset has that name
    """
    if preset_name not in PRESETS:
        raise UnknownPresetError(f"Unknown preset: {preset_name}")
    return PRESETS[preset_name]


def has_preset(preset_name: str) -> bool:
    return preset_name in PRESETS


def get_preset_names() -> List[str]:
    return list(PRESETS)


def validate_preset_data(preset_data: Mapping[Any, Any]) -> bool:
    """Check that every key and value in a preset bundle is a string."""
    return all(isinstance(key, str) and isinstance(value, str) for key, value in preset_data.items())
