"""Exception hierarchy for dcaudit.

All library exceptions inherit from DcauditError, which carries the
human-readable message on ``.message``.
"""


class DcauditError(Exception):
    """Base exception for all dcaudit errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidAuditIdError(DcauditError, ValueError):
    """Raised when a string cannot be parsed as an audit ID."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class SequenceStoreError(DcauditError):
    """Raised when a sequence store backend fails."""
