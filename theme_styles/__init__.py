from flask import Flask
from flask_caching import Cache
from config import config_dict
import os
from logging.config import dictConfig
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from theme_styles.store import CachedSettingsStore, MemorySettingsStore, RedisSettingsStore

cache = Cache()


def create_settings_store(app):
    """Build the settings store adapter configured for ``app``."""
    store = None

    if app.config.get('THEME_SETTINGS_BACKEND') == 'redis':
        redis_url = app.config.get('REDIS_URL')
        if redis_url and redis_url.strip():
            try:
                import redis
                client = redis.from_url(redis_url.strip())
                client.ping()
                store = RedisSettingsStore(client, key_prefix=app.config.get('THEME_SETTINGS_KEY_PREFIX', 'theme_styles:'))
                app.logger.info("Theme settings store configured with Redis")
            except Exception as e:
                app.logger.warning(f"Redis connection failed: {e}, using in-memory theme settings store")
        else:
            app.logger.warning("THEME_SETTINGS_BACKEND is redis but REDIS_URL is empty, using in-memory store")

    if store is None:
        store = MemorySettingsStore()
        if app.config.get('FLASK_ENV') == 'production':
            app.logger.error("In-memory theme settings store in production - settings will not be shared or persisted")

    timeout = app.config.get('THEME_SETTINGS_CACHE_TIMEOUT', 0)
    if timeout:
        store = CachedSettingsStore(store, cache, timeout=timeout)

    return store


def create_app(config_name=None):
    env = config_name or os.getenv('FLASK_ENV', 'development')
    config_class = config_dict.get(env, config_dict['development'])

    # Sentry in production only
    if env == 'production' and getattr(config_class, 'SENTRY_DSN', None):
        sentry_sdk.init(
            dsn=config_class.SENTRY_DSN,
            integrations=[FlaskIntegration()],
            traces_sample_rate=1.0,
        )

    app = Flask(__name__)

    dictConfig(config_class.LOGGING_CONFIG)

    app.config.from_object(config_class)

    # Redis-backed cache when available, simple in-process cache otherwise
    redis_url = app.config.get('REDIS_URL')
    if redis_url and redis_url.strip() and not app.config.get('TESTING'):
        try:
            cache.init_app(app, config={
                'CACHE_TYPE': 'RedisCache',
                'CACHE_REDIS_URL': redis_url,
                'CACHE_DEFAULT_TIMEOUT': app.config['CACHE_DEFAULT_TIMEOUT'],
                'CACHE_KEY_PREFIX': app.config['CACHE_KEY_PREFIX'],
            })
            app.logger.info("Cache initialized with Redis URL")
        except Exception as e:
            app.logger.warning(f"Redis cache initialization failed: {e}, falling back to simple cache")
            cache.init_app(app, config={'CACHE_TYPE': 'SimpleCache'})
    else:
        cache.init_app(app, config={'CACHE_TYPE': 'SimpleCache'})

    from theme_styles.errors import ErrorHandler
    from theme_styles.service import ThemeSettingsService
    app.extensions['theme_styles'] = ThemeSettingsService(
        create_settings_store(app),
        sites=app.config.get('THEME_SITES'),
        error_handler=ErrorHandler(),
    )

    from theme_styles.template_helpers import init_template_helpers
    init_template_helpers(app)

    from theme_styles.commands import init_commands
    init_commands(app)

    return app
