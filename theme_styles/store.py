"""
Settings store adapters.

The host CMS owns theme-settings persistence; this package only needs
``get(key, default)`` / ``set(key, value)`` / ``delete(key)`` against it.
These adapters provide that interface over a process-local dict (tests,
development) or a Redis instance, plus per-site scoping and a read-through
cache built on Flask-Caching.

Usage:
    from theme_styles.store import RedisSettingsStore

    store = RedisSettingsStore(redis.from_url(REDIS_URL))
    site_store = store.scoped(get_site_settings_prefix('main'))
    site_store.set('theme_settings_library-theme', {'primary_color': '#1F3A5F'})
"""
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SettingsStore:
    """Key/value settings interface. Subclasses implement get/set/delete."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def scoped(self, prefix: str) -> 'ScopedSettingsStore':
        """Return a view of this store whose keys are namespaced by ``prefix``."""
        return ScopedSettingsStore(self, prefix)


class MemorySettingsStore(SettingsStore):
    """Process-local store. Values are kept as-is, not serialized."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def delete(self, key):
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class RedisSettingsStore(SettingsStore):
    """
    Settings stored as JSON strings in Redis.

    Args:
        client: A redis.Redis client
        key_prefix: Prepended to every key so theme settings share a Redis
            database with other data safely
    """

    def __init__(self, client, key_prefix: str = 'theme_styles:'):
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key, default=None):
        raw = self.client.get(self._key(key))
        if raw is None:
            return default
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8')
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding undecodable settings value for {key}: {e}")
            return default

    def set(self, key, value):
        self.client.set(self._key(key), json.dumps(value))

    def delete(self, key):
        self.client.delete(self._key(key))


class ScopedSettingsStore(SettingsStore):
    """Namespaced view over a parent store (per-site settings)."""

    def __init__(self, parent: SettingsStore, prefix: str):
        self.parent = parent
        self.prefix = prefix

    def get(self, key, default=None):
        return self.parent.get(f"{self.prefix}{key}", default)

    def set(self, key, value):
        self.parent.set(f"{self.prefix}{key}", value)

    def delete(self, key):
        self.parent.delete(f"{self.prefix}{key}")


class CachedSettingsStore(SettingsStore):
    """
    Read-through cache in front of another store.

    Args:
        inner: The store holding the authoritative values
        cache: A flask_caching.Cache (or anything with get/set/delete)
        timeout: Cache timeout in seconds
        cache_prefix: Namespace for cache keys
    """

    def __init__(self, inner: SettingsStore, cache, timeout: int = 300,
                 cache_prefix: str = 'theme_settings_cache:'):
        self.inner = inner
        self.cache = cache
        self.timeout = timeout
        self.cache_prefix = cache_prefix

    def _cache_key(self, key: str) -> str:
        return f"{self.cache_prefix}{key}"

    def get(self, key, default=None):
        cached = self.cache.get(self._cache_key(key))
        if cached is not None:
            return cached

        value = self.inner.get(key)
        if value is None:
            return default

        self.cache.set(self._cache_key(key), value, timeout=self.timeout)
        return value

    def set(self, key, value):
        self.inner.set(key, value)
        self.cache.delete(self._cache_key(key))

    def delete(self, key):
        self.inner.delete(key)
        self.cache.delete(self._cache_key(key))
