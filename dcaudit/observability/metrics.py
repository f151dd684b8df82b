"""Prometheus metrics for audit ID generation."""

from prometheus_client import Counter

AUDIT_IDS_GENERATED = Counter(
    "dcaudit_audit_ids_generated_total",
    "Total number of audit IDs generated",
    labelnames=["source"],
)

SEQUENCE_ROLLOVERS = Counter(
    "dcaudit_sequence_rollovers_total",
    "Number of times a sequence key wrapped back to 1",
)

SEQUENCE_RESETS = Counter(
    "dcaudit_sequence_resets_total",
    "Number of times a sequence store was cleared",
)
