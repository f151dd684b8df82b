"""SequenceStore abstract interface."""

from abc import ABC, abstractmethod

DEFAULT_MAX_SEQUENCE = 99


class SequenceStore(ABC):
    """Abstract interface for audit ID sequence counters.

    A store owns one counter table: a mapping from sequence key to the next
    sequence number to issue. Entries appear on first use and live until
    ``clear()``.
    """

    @abstractmethod
    def next_sequence(
        self,
        key: str,
        *,
        override: int | None = None,
        max_sequence: int = DEFAULT_MAX_SEQUENCE,
    ) -> int:
        """Issue the sequence number for ``key`` and advance its counter.

        With an override, the override is issued and the counter is set to
        ``override + 1``. Otherwise the stored value is issued (1 for an
        unseen key) and the counter advances, wrapping to 1 once the issued
        value reaches ``max_sequence``.
        """
        pass

    @abstractmethod
    def peek(self, key: str) -> int | None:
        """Return the next value that would be issued for ``key``, if tracked."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every counter held by this store."""
        pass
