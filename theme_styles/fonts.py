"""
Font key resolution.

Translates the short font keys stored in theme settings ('helvetica',
'fira_code', ...) into CSS font-family stacks for templates. Resolution is
total: empty, unknown or malformed keys degrade to the system font stack.

Usage:
    from theme_styles.fonts import resolve_font_family

    resolve_font_family('lora')     # 'Lora, Georgia, serif'
    resolve_font_family(None)       # SYSTEM_FONT_STACK
"""
import logging
from types import MappingProxyType
from typing import Optional

from theme_styles.constants import OPTION_TABLES

logger = logging.getLogger(__name__)


SYSTEM_FONT_STACK = 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif'

FONT_FAMILY_STACKS = MappingProxyType({
    # Sans-serif
    'helvetica': 'Helvetica Neue, Arial, sans-serif',
    'roboto': 'Roboto, Arial, sans-serif',
    'open_sans': 'Open Sans, Arial, sans-serif',
    'lato': 'Lato, Arial, sans-serif',
    'montserrat': 'Montserrat, Arial, sans-serif',
    'source_sans': 'Source Sans Pro, Arial, sans-serif',
    'nunito': 'Nunito, Arial, sans-serif',
    'poppins': 'Poppins, Arial, sans-serif',
    'inter': 'Inter, Arial, sans-serif',
    'work_sans': 'Work Sans, Arial, sans-serif',
    'fira_sans': 'Fira Sans, Arial, sans-serif',
    'arial': 'Arial, sans-serif',

    # Serif
    'merriweather': 'Merriweather, Georgia, serif',
    'playfair': 'Playfair Display, Georgia, serif',
    'crimson': 'Crimson Text, Georgia, serif',
    'libre_baskerville': 'Libre Baskerville, Georgia, serif',
    'lora': 'Lora, Georgia, serif',
    'pt_serif': 'PT Serif, Georgia, serif',
    'source_serif': 'Source Serif Pro, Georgia, serif',
    'georgia': 'Georgia, serif',
    'times': 'Times New Roman, serif',

    # Display
    'oswald': 'Oswald, Arial, sans-serif',
    'raleway': 'Raleway, Arial, sans-serif',
    'bebas_neue': 'Bebas Neue, Arial, sans-serif',
    'anton': 'Anton, Arial, sans-serif',
    'dancing_script': 'Dancing Script, cursive',
    'pacifico': 'Pacifico, cursive',

    # Monospace
    'fira_code': 'Fira Code, Consolas, monospace',
    'source_code': 'Source Code Pro, Consolas, monospace',
    'courier': 'Courier New, monospace',

    'system': SYSTEM_FONT_STACK,
})


def resolve_font_family(font_key, log: Optional[logging.Logger] = None) -> str:
    """
    Resolve a font key to a CSS font-family stack.

    Args:
        font_key: Key chosen in theme settings. May be None, empty or any
            other value; nothing here raises.
        log: Logger receiving DEBUG traces of the lookup. Defaults to
            this module's logger.

    Returns:
        The mapped stack, or the 'system' stack for empty/unknown keys.
    """
    log = log or logger
    log.debug(f"resolve_font_family() called with {font_key!r}")

    if not font_key:
        log.debug("resolve_font_family() empty input, using system font stack")
        return SYSTEM_FONT_STACK

    if not isinstance(font_key, str) or font_key not in FONT_FAMILY_STACKS:
        log.debug(f"resolve_font_family() unknown key {font_key!r}, using system font stack")
        return FONT_FAMILY_STACKS['system']

    result = FONT_FAMILY_STACKS[font_key]
    log.debug(f"resolve_font_family() mapped {font_key!r} to {result!r}")
    return result


def resolve_option(category: str, key, default: Optional[str] = None) -> Optional[str]:
    """
    Look up a display value in one of the registry's option tables.

    Same fallback shape as resolve_font_family(): an unknown category or key
    returns ``default`` instead of raising.
    """
    table = OPTION_TABLES.get(category)
    if table is None or not isinstance(key, str):
        return default
    return table.get(key, default)
