"""Audit ID generation.

Audit IDs look like ``20250719-AUD-Q03-01``:

- ``20250719``: the calendar date, read off the supplied date object as-is
  (no timezone conversion)
- ``AUD``: fixed tag
- ``Q03``: quarter of the date's month, zero-padded
- ``01``: sequence within the (date, quarter), 01..99 then back to 01

Usage:
    from dcaudit.audit.generator import generate_audit_id

    audit_id = generate_audit_id(datetime.now(), location="Island 8")
"""

from collections.abc import Callable
from datetime import date as Date
from datetime import datetime

from dcaudit.audit.models import AuditId, SequenceKey
from dcaudit.audit.store import DEFAULT_MAX_SEQUENCE, SequenceStore
from dcaudit.audit.stores.inmemory import InMemorySequenceStore
from dcaudit.observability.logging import get_logger
from dcaudit.observability.metrics import (
    AUDIT_IDS_GENERATED,
    SEQUENCE_RESETS,
    SEQUENCE_ROLLOVERS,
)

logger = get_logger(__name__)


def _calendar_date(value: Date) -> Date:
    if isinstance(value, datetime):
        return value.date()
    return value


class AuditIdGenerator:
    """Issues audit IDs from a sequence store.

    Each generator owns its store; two generators over separate stores
    never affect each other's counters. The quarter always comes from the
    date. A location label is recorded in the log event only and never
    changes the ID.
    """

    def __init__(
        self,
        store: SequenceStore | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        max_sequence: int = DEFAULT_MAX_SEQUENCE,
        record_metrics: bool = True,
    ) -> None:
        """Initialize the generator.

        Args:
            store: Counter table (defaults to a fresh InMemorySequenceStore)
            clock: Source of "now" when no date is given (defaults to local time)
            max_sequence: Highest sequence issued before wrapping to 1
            record_metrics: Whether to update Prometheus counters
        """
        self._store = store if store is not None else InMemorySequenceStore()
        self._clock = clock or datetime.now
        self._max_sequence = max_sequence
        self._record_metrics = record_metrics

    @property
    def store(self) -> SequenceStore:
        return self._store

    def generate_id(
        self,
        date: Date | None = None,
        sequence: int | None = None,
        location: str | None = None,
    ) -> AuditId:
        """Issue the next audit ID and return it as a model.

        Args:
            date: Date or datetime to encode (defaults to the clock)
            sequence: Explicit sequence to issue instead of the counter's;
                the counter continues from ``sequence + 1``
            location: Optional data hall or site label, logged only
        """
        day = _calendar_date(date if date is not None else self._clock())
        key = SequenceKey.for_date(day)

        issued = self._store.next_sequence(
            key,
            override=sequence,
            max_sequence=self._max_sequence,
        )
        audit_id = AuditId(date=day, sequence=issued)

        source = "counter" if sequence is None else "override"
        rolled_over = sequence is None and issued >= self._max_sequence

        if self._record_metrics:
            AUDIT_IDS_GENERATED.labels(source=source).inc()
            if rolled_over:
                SEQUENCE_ROLLOVERS.inc()

        logger.debug(
            "audit_id_generated",
            audit_id=str(audit_id),
            sequence_key=key,
            source=source,
            location=location,
        )
        if rolled_over:
            logger.info(
                "audit_sequence_rolled_over",
                sequence_key=key,
                max_sequence=self._max_sequence,
            )

        return audit_id

    def generate(
        self,
        date: Date | None = None,
        sequence: int | None = None,
        location: str | None = None,
    ) -> str:
        """Issue the next audit ID string. See ``generate_id``."""
        return self.generate_id(date, sequence, location).render()

    def reset(self) -> None:
        """Clear every counter in this generator's store."""
        self._store.clear()
        if self._record_metrics:
            SEQUENCE_RESETS.inc()
        logger.info("audit_sequence_counter_reset")


_default_generator: AuditIdGenerator | None = None


def get_default_generator() -> AuditIdGenerator:
    """Return the process-wide generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = AuditIdGenerator()
    return _default_generator


def generate_audit_id(
    date: Date | None = None,
    sequence: int | None = None,
    location: str | None = None,
) -> str:
    """Generate an audit ID with the process-wide generator.

    Counters live in process memory: IDs are unique within this process
    only. Configure a Redis-backed generator via
    ``dcaudit.audit.factory.build_generator`` for cross-process uniqueness.
    """
    return get_default_generator().generate(date, sequence, location)


def reset_sequence_counter() -> None:
    """Clear every counter of the process-wide generator."""
    get_default_generator().reset()
