"""
Theme Styles Errors

Exception classes raised by the settings service, and ErrorHandler, which turns
those exceptions into logged, user-facing messages for the admin actions and
the CLI.

The registry and font resolver never raise; only the service layer does.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from theme_styles.constants import (
    FONT_SIZES,
    get_error_message,
    is_valid_color,
    is_valid_font_size,
    is_valid_preset,
)


class ThemeStylesError(Exception):
    """Base class for theme styles errors."""


class UnknownPresetError(ThemeStylesError, ValueError):
    """Raised when a preset name is not registered."""


class ThemeSettingsError(ThemeStylesError, RuntimeError):
    """Raised when a settings operation cannot be completed."""


class SiteNotFoundError(ThemeStylesError, LookupError):
    """Raised when a site slug does not resolve to a known site."""


class ErrorHandler:
    """
    Consistent error handling, logging and user-facing messages.

    Every exception handled here is logged with a generated error ID, and the
    same ID is included in the message returned for display so support can
    match a report to the log entry.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle_exception(self, exception: BaseException, context: str = '') -> str:
        """
        Log an exception and return a message suitable for end users.

        Args:
            exception: The caught exception
            context: Optional label (operation, component) included in the log

        Returns:
            User-facing message ending with "(Error ID: lts_error_...)"
        """
        error_id = f"lts_error_{uuid.uuid4().hex[:13]}"
        context_info = f" (Context: {context})" if context else ''

        self.logger.error(
            f"LibraryThemeStyles Error [{error_id}]: {exception}{context_info}",
            exc_info=(type(exception), exception, exception.__traceback__),
            extra={'error_id': error_id, 'error_context': context},
        )

        return self._user_friendly_message(exception, error_id)

    def validate_preset(self, preset: str) -> Optional[str]:
        """Return an error message for an unknown preset, None when valid."""
        if not is_valid_preset(preset):
            self.logger.warning(f"Invalid preset requested: {preset}")
            return get_error_message('unknown_preset', preset)
        return None

    def validate_site_slug(self, site_slug: Optional[str], required: bool = True) -> Optional[str]:
        if required and not site_slug:
            self.logger.warning("Missing required site slug")
            return get_error_message('missing_site_slug')
        return None

    def validate_theme_settings(self, settings: Dict[str, Any]) -> List[str]:
        """
        Validate a settings bundle.

        Every value must be a string. Keys containing '_color' must hold a
        '#RRGGBB' color and keys containing '_font_size' a valid CSS size,
        a named size from FONT_SIZES, or nothing (unset).

        Returns:
            List of error messages, empty when the bundle is valid
        """
        errors = []

        for key, value in settings.items():
            if not isinstance(value, str):
                errors.append(f"Setting '{key}' must be a string, got {type(value).__name__}")
                continue

            if '_color' in key and not is_valid_color(value):
                errors.append(f"Setting '{key}' has invalid color format: {value}")

            if ('_font_size' in key and value and value not in FONT_SIZES
                    and not is_valid_font_size(value)):
                errors.append(f"Setting '{key}' has invalid font size format: {value}")

        if errors:
            self.logger.warning(f"Theme settings validation failed: {errors}")

        return errors

    def handle_api_error(self, exception: BaseException, operation: str) -> str:
        """Log a failure talking to a collaborator and return the api_error message."""
        self.logger.error(
            f"API error during {operation}: {exception}",
            exc_info=(type(exception), exception, exception.__traceback__),
        )
        return get_error_message('api_error', str(exception))

    def log_success(self, operation: str, **context) -> None:
        if context:
            self.logger.info(f"LibraryThemeStyles: {operation} {context}")
        else:
            self.logger.info(f"LibraryThemeStyles: {operation}")

    def wrap_operation(self, operation: Callable[[], Any], context: str = '') -> Dict[str, Any]:
        """
        Run ``operation`` and return a standardized result dict.

        Returns:
            {'success': bool, 'data': result or None, 'error': message or None}
        """
        try:
            result = operation()
        except Exception as e:
            return {'success': False, 'data': None, 'error': self.handle_exception(e, context)}

        if context:
            self.log_success(context, result_type=type(result).__name__)

        return {'success': True, 'data': result, 'error': None}

    def create_error_response(self, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return {
            'success': False,
            'error': message,
            'details': details or {},
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }

    def create_success_response(self, data: Any, message: str = '') -> Dict[str, Any]:
        return {
            'success': True,
            'data': data,
            'message': message,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }

    def _user_friendly_message(self, exception: BaseException, error_id: str) -> str:
        base_message = "An error occurred while processing your request."

        if isinstance(exception, ValueError):
            base_message = f"Invalid input provided: {exception}"
        elif isinstance(exception, RuntimeError):
            base_message = f"Operation failed: {exception}"
        elif 'API' in str(exception):
            base_message = "Database operation failed. Please try again."

        return f"{base_message} (Error ID: {error_id})"
