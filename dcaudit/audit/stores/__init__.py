"""Sequence stores for audit ID counters."""

from dcaudit.audit.store import SequenceStore
from dcaudit.audit.stores.inmemory import InMemorySequenceStore
from dcaudit.audit.stores.redis import RedisSequenceStore

__all__ = [
    "InMemorySequenceStore",
    "RedisSequenceStore",
    "SequenceStore",
]
