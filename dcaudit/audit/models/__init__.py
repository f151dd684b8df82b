"""Audit domain models."""

from dcaudit.audit.models.audit_id import (
    AUDIT_TAG,
    CANONICAL_PATTERN,
    AuditId,
    SequenceKey,
    format_date,
    format_sequence,
    is_valid_audit_id,
    quarter_of,
)

__all__ = [
    "AUDIT_TAG",
    "CANONICAL_PATTERN",
    "AuditId",
    "SequenceKey",
    "format_date",
    "format_sequence",
    "is_valid_audit_id",
    "quarter_of",
]
