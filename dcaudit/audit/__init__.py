"""Audit identifiers: ID models, sequence counters, generation.

Audit records are labelled with human-readable business identifiers
(``YYYYMMDD-AUD-QXX-NN``) before or after being persisted; the
persistence layer stores them as opaque text.
"""

from dcaudit.audit.generator import (
    AuditIdGenerator,
    generate_audit_id,
    get_default_generator,
    reset_sequence_counter,
)
from dcaudit.audit.models import AuditId, SequenceKey, is_valid_audit_id

__all__ = [
    "AuditId",
    "AuditIdGenerator",
    "SequenceKey",
    "generate_audit_id",
    "get_default_generator",
    "is_valid_audit_id",
    "reset_sequence_counter",
]
