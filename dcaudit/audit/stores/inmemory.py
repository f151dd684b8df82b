"""In-memory implementation of SequenceStore."""

from dcaudit.audit.store import DEFAULT_MAX_SEQUENCE, SequenceStore


class InMemorySequenceStore(SequenceStore):
    """Process-local counter table backed by a dict.

    Not synchronized: counters are unique only within one process and one
    thread of control. Use RedisSequenceStore when several workers issue
    IDs for the same dates.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def next_sequence(
        self,
        key: str,
        *,
        override: int | None = None,
        max_sequence: int = DEFAULT_MAX_SEQUENCE,
    ) -> int:
        if override is not None:
            self._counters[key] = override + 1
            return override

        sequence = self._counters.get(key, 1)
        self._counters[key] = 1 if sequence >= max_sequence else sequence + 1
        return sequence

    def peek(self, key: str) -> int | None:
        return self._counters.get(key)

    def clear(self) -> None:
        self._counters.clear()
