"""Factories for sequence stores and configured generators.

Connection strings are read from configuration first, then from the
environment:
- REDIS_URL: Redis server URL (defaults to redis://localhost:6379/0)
"""

import os

from redis import Redis

from dcaudit.audit.generator import AuditIdGenerator
from dcaudit.audit.store import SequenceStore
from dcaudit.audit.stores.inmemory import InMemorySequenceStore
from dcaudit.audit.stores.redis import RedisSequenceStore
from dcaudit.config import get_settings
from dcaudit.config.models.audit_ids import SequenceStoreConfig
from dcaudit.config.settings import Settings
from dcaudit.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


def create_sequence_store(config: SequenceStoreConfig) -> SequenceStore:
    """Create a SequenceStore instance based on configuration.

    Raises:
        ValueError: If backend type is not supported
    """
    backend = config.backend

    if backend == "inmemory":
        logger.info("creating_sequence_store", backend="inmemory")
        return InMemorySequenceStore()

    elif backend == "redis":
        url = config.redis_url or os.environ.get("REDIS_URL", DEFAULT_REDIS_URL)

        logger.info(
            "creating_sequence_store",
            backend="redis",
            key_prefix=config.key_prefix,
        )

        return RedisSequenceStore(
            redis=Redis.from_url(url),
            key_prefix=config.key_prefix,
        )

    else:
        raise ValueError(f"Unsupported sequence store backend: {backend}")


def build_generator(settings: Settings | None = None) -> AuditIdGenerator:
    """Build an AuditIdGenerator wired to the configured sequence store."""
    if settings is None:
        settings = get_settings()

    audit_config = settings.audit_ids
    return AuditIdGenerator(
        store=create_sequence_store(audit_config.sequence_store),
        max_sequence=audit_config.max_sequence,
        record_metrics=settings.observability.metrics.enabled,
    )
