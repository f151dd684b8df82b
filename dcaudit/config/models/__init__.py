"""Configuration models for dcaudit."""

from dcaudit.config.models.audit_ids import AuditIdConfig, SequenceStoreConfig
from dcaudit.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "AuditIdConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "SequenceStoreConfig",
]
