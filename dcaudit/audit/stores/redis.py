"""Redis-backed implementation of SequenceStore.

Shares counters across processes and restarts. The issue-and-advance
step runs as a single Lua script so concurrent callers never receive
the same sequence for a key within one wrap cycle.
"""

from redis import Redis, RedisError

from dcaudit.audit.store import DEFAULT_MAX_SEQUENCE, SequenceStore
from dcaudit.exceptions import SequenceStoreError
from dcaudit.observability.logging import get_logger

logger = get_logger(__name__)

# KEYS[1] = counter key
# ARGV[1] = max sequence, ARGV[2] = override ("" when absent)
NEXT_SEQUENCE_SCRIPT = """
local key = KEYS[1]
local max_sequence = tonumber(ARGV[1])
if ARGV[2] ~= '' then
    local override = tonumber(ARGV[2])
    redis.call('SET', key, override + 1)
    return override
end
local stored = redis.call('GET', key)
local sequence = 1
if stored then
    sequence = tonumber(stored)
end
if sequence >= max_sequence then
    redis.call('SET', key, 1)
else
    redis.call('SET', key, sequence + 1)
end
return sequence
"""


class RedisSequenceStore(SequenceStore):
    """Redis-backed counter table.

    Key format: {key_prefix}:{sequence_key}
    Value format: integer, the next sequence to issue
    """

    def __init__(self, redis: Redis, key_prefix: str = "audit_seq") -> None:
        """Initialize the store.

        Args:
            redis: Synchronous Redis client
            key_prefix: Namespace for counter keys
        """
        self._redis = redis
        self._key_prefix = key_prefix
        self._next_script = redis.register_script(NEXT_SEQUENCE_SCRIPT)

    def _make_key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}"

    def next_sequence(
        self,
        key: str,
        *,
        override: int | None = None,
        max_sequence: int = DEFAULT_MAX_SEQUENCE,
    ) -> int:
        redis_key = self._make_key(key)
        args = [max_sequence, "" if override is None else override]
        try:
            result = self._next_script(keys=[redis_key], args=args)
        except RedisError as exc:
            logger.error(
                "sequence_store_redis_error",
                key=redis_key,
                error=str(exc),
            )
            raise SequenceStoreError(
                f"Failed to issue sequence for {key}: {exc}"
            ) from exc
        return int(result)

    def peek(self, key: str) -> int | None:
        try:
            value = self._redis.get(self._make_key(key))
        except RedisError as exc:
            raise SequenceStoreError(f"Failed to read sequence for {key}: {exc}") from exc
        if value is None:
            return None
        return int(value.decode() if isinstance(value, bytes) else value)

    def clear(self) -> None:
        try:
            keys = list(self._redis.scan_iter(match=f"{self._key_prefix}:*"))
            if keys:
                self._redis.delete(*keys)
        except RedisError as exc:
            raise SequenceStoreError(f"Failed to clear sequence counters: {exc}") from exc

        logger.debug(
            "sequence_store_cleared",
            key_prefix=self._key_prefix,
            deleted=len(keys),
        )
