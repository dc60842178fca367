"""
Module configuration actions.

Handles the administrator's theme-settings maintenance form: inspect a site's
settings, diff or verify them against a preset, load a preset (or previously
saved defaults) into a site, and save a site's settings as preset defaults.

Outcomes are reported through a Messenger rather than raised, so the same
handler serves the admin UI (FlashMessenger) and the CLI.
"""
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from flask import flash
from werkzeug.datastructures import MultiDict
from wtforms import BooleanField, Form, StringField
from wtforms.validators import Length, Optional as OptionalValidator, Regexp, ValidationError

from theme_styles.constants import DEFAULT_PRESET, get_error_message, get_success_message, is_valid_preset
from theme_styles.errors import ErrorHandler
from theme_styles.service import ThemeSettingsService

logger = logging.getLogger(__name__)


class ModuleConfigForm(Form):
    action = StringField('Action')
    target_preset = StringField('Target Preset', default=DEFAULT_PRESET)
    site = StringField('Site', validators=[
        OptionalValidator(),
        Regexp(r'^[A-Za-z0-9][A-Za-z0-9_-]*$', message='Site slug may only contain letters, digits, - and _'),
    ])
    debug = BooleanField('Debug', false_values=(False, 'false', 'False', '', '0', 'off'))
    inspect_key = StringField('Setting Key', validators=[OptionalValidator(), Length(max=190)])

    def validate_target_preset(self, field):
        if not is_valid_preset(field.data):
            raise ValidationError(get_error_message('unknown_preset', field.data))


class Messenger:
    """Collects (category, message) pairs."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def add(self, category: str, message: str) -> None:
        self.messages.append((category, message))

    def add_success(self, message: str) -> None:
        self.add('success', message)

    def add_error(self, message: str) -> None:
        self.add('error', message)

    def add_warning(self, message: str) -> None:
        self.add('warning', message)

    def by_category(self, category: str) -> List[str]:
        return [message for cat, message in self.messages if cat == category]


class FlashMessenger(Messenger):
    """
    Messenger that also flashes each message for the next rendered page.

    For the host application's admin view, which calls
    handle_config_form_submission(request.form, FlashMessenger()) inside a request.
    """

    def add(self, category, message):
        super().add(category, message)
        flash(message, category)


class ModuleConfigService:
    """Dispatches module configuration form submissions to ThemeSettingsService."""

    def __init__(self, theme_settings_service: ThemeSettingsService, error_handler: Optional[ErrorHandler] = None):
        self.theme_settings_service = theme_settings_service
        self.error_handler = error_handler or theme_settings_service.error_handler

        self._handlers = {
            'inspect_theme_settings': self._inspect_theme_settings,
            'verify_defaults_vs_settings': self._verify_defaults_vs_settings,
            'load_stored_defaults': self._load_stored_defaults,
            'inspect_key': self._inspect_key,
            'diff_vs_preset': self._diff_vs_preset,
            'load_defaults_into_settings': self._load_defaults_into_settings,
            'save_settings_as_defaults': self._save_settings_as_defaults,
        }

    def handle_config_form_submission(self, data: Mapping[str, Any], messenger: Messenger) -> Messenger:
        """
        Process one form submission.

        Args:
            data: Submitted form data (request.form or a plain dict)
            messenger: Receives the success/error/warning messages

        Returns:
            The messenger, for chaining
        """
        formdata = data if hasattr(data, 'getlist') else MultiDict(
            {key: str(value) for key, value in data.items() if value is not None}
        )
        form = ModuleConfigForm(formdata=formdata)

        handler = self._handlers.get(form.action.data)
        if handler is None:
            logger.info(f"Module config submission without a known action: {form.action.data!r}")
            messenger.add_warning('No action selected.')
            return messenger

        site_error = self.error_handler.validate_site_slug(form.site.data)
        if site_error:
            messenger.add_error(site_error)
            return messenger

        if not form.validate():
            for field_errors in form.errors.values():
                for error in field_errors:
                    messenger.add_error(error)
            return messenger

        try:
            handler(form, messenger)
        except Exception as e:
            messenger.add_error(self.error_handler.handle_exception(e, 'module_config_form_submission'))

        return messenger

    # -------------------------------------------------------------------------
    # Action handlers
    # -------------------------------------------------------------------------

    def _run(self, operation, context: str, messenger: Messenger) -> Optional[Dict[str, Any]]:
        result = self.error_handler.wrap_operation(operation, context)
        if not result['success']:
            messenger.add_error(result['error'])
            return None
        return result

    def _inspect_theme_settings(self, form, messenger):
        site_slug = form.site.data
        result = self._run(lambda: self.theme_settings_service.inspect_theme_settings(site_slug),
                           'inspect_theme_settings', messenger)
        if result is None:
            return

        data = result['data']
        messenger.add_success(
            f'Inspect: Site "{data["site_slug"] or "default"}" (theme: {data["theme_slug"]}) '
            f'has {data["settings_count"]} theme settings. '
            f'Sample keys: {", ".join(list(data["settings"])[:15])}'
        )

    def _verify_defaults_vs_settings(self, form, messenger):
        site_slug, preset = form.site.data, form.target_preset.data
        result = self._run(lambda: self.theme_settings_service.compare_with_preset(site_slug, preset),
                           'verify_defaults_vs_settings', messenger)
        if result is None:
            return

        data = result['data']
        messenger.add_success(
            f'Verify: {data["total_preset_keys"]} preset keys, {data["matches"]} matches, '
            f'{data["differences"]} differences. '
            f'Sample differences: {", ".join(list(data["different_keys"])[:10])}'
        )

    def _load_stored_defaults(self, form, messenger):
        site_slug, preset = form.site.data, form.target_preset.data
        result = self._run(lambda: self.theme_settings_service.load_stored_defaults(site_slug, preset),
                           'load_stored_defaults', messenger)
        if result is None:
            return

        count, _ = result['data']
        messenger.add_success(f'Loaded {count} stored default keys into settings.')
        messenger.add_success(get_success_message('defaults_loaded'))

    def _inspect_key(self, form, messenger):
        key = (form.inspect_key.data or '').strip()
        if not key:
            messenger.add_error('Provide a setting key to inspect.')
            return

        site_slug = form.site.data
        result = self._run(lambda: self.theme_settings_service.inspect_key(site_slug, key),
                           'inspect_single_key', messenger)
        if result is None:
            return

        messenger.add_success(f'Inspect key {key}: {json.dumps(result["data"])}')

    def _diff_vs_preset(self, form, messenger):
        site_slug, preset = form.site.data, form.target_preset.data
        result = self._run(lambda: self.theme_settings_service.compare_with_preset(site_slug, preset),
                           'diff_vs_preset', messenger)
        if result is None:
            return

        differences = list(result['data']['different_keys'].items())[:15]
        diff_strings = [
            f"{key}:{json.dumps(diff['current'])} -> {json.dumps(diff['preset'])}"
            for key, diff in differences
        ]
        messenger.add_success(f'Diff vs preset (first 15): {", ".join(diff_strings)}')

    def _load_defaults_into_settings(self, form, messenger):
        site_slug, preset, debug = form.site.data, form.target_preset.data, form.debug.data
        before = self._count_theme_settings(site_slug) if debug else None

        result = self._run(lambda: self.theme_settings_service.apply_preset_to_theme_settings(site_slug, preset),
                           'load_defaults_into_settings', messenger)
        if result is None:
            return

        count, _ = result['data']
        messenger.add_success(get_success_message('preset_applied', count, preset))

        if debug:
            after = self._count_theme_settings(site_slug)
            messenger.add_success(f'Debug: theme_settings count before={before} after={after}')

    def _save_settings_as_defaults(self, form, messenger):
        site_slug, preset, debug = form.site.data, form.target_preset.data, form.debug.data
        result = self._run(lambda: self.theme_settings_service.save_settings_as_preset_defaults(site_slug, preset),
                           'save_settings_as_defaults', messenger)
        if result is None:
            return

        count, current = result['data']
        messenger.add_success(get_success_message('settings_saved', preset, count))

        if debug:
            messenger.add_success(f'Debug: stored defaults sample: {json.dumps(current)[:300]}...')

    def _count_theme_settings(self, site_slug: Optional[str]) -> int:
        return self.theme_settings_service.inspect_theme_settings(site_slug)['settings_count']
