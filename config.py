from dotenv import load_dotenv
import os

load_dotenv()


def parse_site_themes(value):
    """Parse THEME_SITES ("main:library-theme,archive:library-theme") into a dict."""
    if not value or not value.strip():
        return None
    sites = {}
    for entry in value.split(','):
        entry = entry.strip()
        if not entry:
            continue
        slug, _, theme = entry.partition(':')
        sites[slug.strip()] = theme.strip() or None
    return sites


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev')

    LOGGING_CONFIG = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': 'INFO',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
        }
    }

    # Settings store: 'redis' when REDIS_URL is reachable, else process memory
    REDIS_URL = os.getenv('REDIS_URL')
    THEME_SETTINGS_BACKEND = os.getenv('THEME_SETTINGS_BACKEND', 'redis' if os.getenv('REDIS_URL') else 'memory')
    THEME_SETTINGS_KEY_PREFIX = os.getenv('THEME_SETTINGS_KEY_PREFIX', 'theme_styles:')
    THEME_SETTINGS_CACHE_TIMEOUT = int(os.getenv('THEME_SETTINGS_CACHE_TIMEOUT', '300'))  # seconds, 0 disables

    # Site slug -> theme slug. Unset accepts any site with the fallback theme.
    THEME_SITES = parse_site_themes(os.getenv('THEME_SITES'))

    CACHE_DEFAULT_TIMEOUT = 300
    CACHE_KEY_PREFIX = 'theme_styles_cache_'


class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True


class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False
    SENTRY_DSN = os.getenv('SENTRY_DSN')


class TestingConfig(Config):
    TESTING = True
    THEME_SETTINGS_BACKEND = 'memory'
    THEME_SETTINGS_CACHE_TIMEOUT = 0
    THEME_SITES = None


# Dictionary to easily access configurations
config_dict = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}
