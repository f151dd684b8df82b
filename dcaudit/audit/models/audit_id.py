"""AuditId value model and sequence key helpers."""

import re
from datetime import date as Date
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from dcaudit.exceptions import InvalidAuditIdError

AUDIT_TAG = "AUD"

# Shape of every ID the counter can issue
CANONICAL_PATTERN = re.compile(r"^\d{8}-AUD-Q0[1-4]-\d{2}$")

# Overrides above 99 render wider than two digits, never with a leading zero
_PARSE_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})-AUD-Q(\d{2})-(\d{2}|[1-9]\d{2,})$")


def quarter_of(month: int) -> int:
    """Return the calendar quarter (1-4) of a 1-based month."""
    return (month - 1) // 3 + 1


def format_date(value: Date) -> str:
    """Render the YYYYMMDD portion of an audit ID."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def format_sequence(sequence: int) -> str:
    """Zero-pad a sequence number to at least two digits.

    Negative overrides keep their sign ahead of the padding, the way
    ``str(n).rjust(2, "0")`` would: -3 renders as ``-3``.
    """
    return str(sequence).rjust(2, "0")


class SequenceKey(str):
    """Counter scope for one (date, quarter) pair, e.g. ``20250719-Q3``."""

    @classmethod
    def for_date(cls, value: Date) -> "SequenceKey":
        return cls(f"{format_date(value)}-Q{quarter_of(value.month)}")


class AuditId(BaseModel):
    """A parsed audit identifier of the form ``YYYYMMDD-AUD-QXX-NN``.

    The quarter is always the quarter of ``date``. ``sequence`` is whatever
    value was issued; counter-issued values are 1..99, explicit overrides
    may fall outside that range and still render.
    """

    model_config = ConfigDict(frozen=True)

    date: Date = Field(..., description="Calendar date encoded in the ID")
    sequence: int = Field(..., description="Sequence number within the date's quarter")

    @property
    def quarter(self) -> int:
        return quarter_of(self.date.month)

    @property
    def sequence_key(self) -> SequenceKey:
        return SequenceKey.for_date(self.date)

    @property
    def is_canonical(self) -> bool:
        """True when the ID has the strict two-digit sequence form."""
        return 1 <= self.sequence <= 99

    def render(self) -> str:
        return (
            f"{format_date(self.date)}-{AUDIT_TAG}-Q{self.quarter:02d}"
            f"-{format_sequence(self.sequence)}"
        )

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse an audit ID string.

        Raises:
            InvalidAuditIdError: If the string is malformed, names an
                impossible date, or carries a quarter that does not match
                the date's month.
        """
        match = _PARSE_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidAuditIdError(f"Malformed audit ID: {value!r}", value=value)

        year, month, day, quarter, sequence = (int(part) for part in match.groups())
        try:
            parsed_date = Date(year, month, day)
        except ValueError as exc:
            raise InvalidAuditIdError(
                f"Audit ID has an invalid date: {value!r}", value=value
            ) from exc

        if quarter != quarter_of(month):
            raise InvalidAuditIdError(
                f"Audit ID quarter Q{quarter:02d} does not match month {month:02d}: {value!r}",
                value=value,
            )

        return cls(date=parsed_date, sequence=sequence)


def is_valid_audit_id(value: str) -> bool:
    """Check whether a string is a well-formed, canonical audit ID."""
    if not CANONICAL_PATTERN.fullmatch(value):
        return False
    try:
        return AuditId.parse(value).is_canonical
    except InvalidAuditIdError:
        return False
