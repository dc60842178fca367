import click
from flask.cli import AppGroup

from theme_styles.admin import Messenger, ModuleConfigService
from theme_styles.constants import DEFAULT_PRESET
from theme_styles.fonts import resolve_font_family
from theme_styles.service import get_theme_service

theme_cli = AppGroup('theme', help='Inspect and maintain theme settings.')

MESSAGE_COLORS = {
    'success': 'green',
    'warning': 'yellow',
    'error': 'red',
}


class EchoMessenger(Messenger):
    """Messenger that prints each message as it is added."""

    def add(self, category, message):
        super().add(category, message)
        click.secho(message, fg=MESSAGE_COLORS.get(category), err=(category == 'error'))


def _submit(action, **fields):
    """Run a module configuration action and exit non-zero if it reported errors."""
    service = ModuleConfigService(get_theme_service())
    messenger = service.handle_config_form_submission({'action': action, **fields}, EchoMessenger())
    if messenger.by_category('error'):
        raise SystemExit(1)


site_option = click.option('--site', required=True, help='Site slug')
preset_option = click.option('--preset', default=DEFAULT_PRESET, show_default=True, help='Preset name')
debug_option = click.option('--debug', is_flag=True, help='Print before/after details')


@theme_cli.command('inspect')
@site_option
def inspect_settings(site):
    """Summarize a site's stored theme settings."""
    _submit('inspect_theme_settings', site=site)


@theme_cli.command('inspect-key')
@site_option
@click.argument('key')
def inspect_key(site, key):
    """Show the stored value of a single setting."""
    _submit('inspect_key', site=site, inspect_key=key)


@theme_cli.command('verify')
@site_option
@preset_option
def verify(site, preset):
    """Count matches and differences against a preset."""
    _submit('verify_defaults_vs_settings', site=site, target_preset=preset)


@theme_cli.command('diff')
@site_option
@preset_option
def diff(site, preset):
    """List settings that differ from a preset."""
    _submit('diff_vs_preset', site=site, target_preset=preset)


@theme_cli.command('apply-preset')
@site_option
@preset_option
@debug_option
def apply_preset(site, preset, debug):
    """Load a built-in preset into a site's theme settings."""
    _submit('load_defaults_into_settings', site=site, target_preset=preset, debug=debug)


@theme_cli.command('save-defaults')
@site_option
@preset_option
@debug_option
def save_defaults(site, preset, debug):
    """Save a site's current settings as a preset's defaults."""
    _submit('save_settings_as_defaults', site=site, target_preset=preset, debug=debug)


@theme_cli.command('load-defaults')
@site_option
@preset_option
def load_defaults(site, preset):
    """Load previously saved preset defaults into a site."""
    _submit('load_stored_defaults', site=site, target_preset=preset)


@theme_cli.command('resolve-font')
@click.argument('font_key', required=False, default='')
def resolve_font(font_key):
    """Print the CSS font-family stack for a font key."""
    click.echo(resolve_font_family(font_key))


def init_commands(app):
    app.cli.add_command(theme_cli)
