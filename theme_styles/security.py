"""
Security helpers for theme values rendered into templates.

Theme settings are entered by administrators but end up inside HTML and CSS,
so values read for templates are cleaned of script-capable markup and links
are restricted to http(s) or site-relative URLs.
"""
import re
import secrets
from typing import Optional, Union
from urllib.parse import urlparse

DANGEROUS_SCHEME_RE = re.compile(r'^\s*(javascript|data|vbscript):', re.IGNORECASE)
DANGEROUS_TAG_RE = re.compile(r'<(script|iframe|object|embed)', re.IGNORECASE)
CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def sanitize_url(url: str) -> str:
    """
    Make a URL safe for an href.

    Returns:
        The URL if it is an absolute http(s) URL or a root-relative path,
        otherwise '#'
    """
    if not url or not isinstance(url, str):
        return '#'

    url = DANGEROUS_SCHEME_RE.sub('', url)

    if url.startswith('/') and url[1:2] not in ('/', '\\'):
        return url

    parsed = urlparse(url)
    if parsed.scheme in ('http', 'https') and parsed.netloc:
        return url

    return '#'


def sanitize_setting_value(value):
    """Strip script-capable tag openers from string settings. Other types pass through."""
    if isinstance(value, str):
        return DANGEROUS_TAG_RE.sub('', value)
    return value


def validate_input(value: str, kind: str = 'text') -> Optional[Union[str, int, float]]:
    """
    Validate and normalize user input.

    Args:
        value: Raw input
        kind: One of 'email', 'url', 'int', 'float', 'text'

    Returns:
        The normalized value, or None if it is not valid for ``kind``
    """
    if not isinstance(value, str):
        return None

    if kind == 'email':
        value = value.strip()
        return value if EMAIL_RE.match(value) else None

    if kind == 'url':
        parsed = urlparse(value.strip())
        return value.strip() if parsed.scheme and parsed.netloc else None

    if kind == 'int':
        try:
            return int(value.strip())
        except ValueError:
            return None

    if kind == 'float':
        try:
            return float(value.strip())
        except ValueError:
            return None

    return CONTROL_CHARS_RE.sub('', value).strip()


def generate_secure_id(length: int = 16) -> str:
    """Random hex identifier of ``length`` characters."""
    return secrets.token_hex(length // 2)
