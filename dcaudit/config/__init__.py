"""Configuration loading for dcaudit.

Usage:
    from dcaudit.config import get_settings

    backend = get_settings().audit_ids.sequence_store.backend
"""

from functools import lru_cache

from dcaudit.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first call."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and load them again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
