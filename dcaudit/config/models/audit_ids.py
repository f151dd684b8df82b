"""Audit ID generation configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

SequenceBackendType = Literal["inmemory", "redis"]


class SequenceStoreConfig(BaseModel):
    """Configuration for the sequence counter backend."""

    backend: SequenceBackendType = Field(
        default="inmemory",
        description="Backend holding the per-(date, quarter) counters",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (falls back to REDIS_URL env var)",
    )
    key_prefix: str = Field(
        default="audit_seq",
        min_length=1,
        description="Namespace prefix for counter keys in Redis",
    )


class AuditIdConfig(BaseModel):
    """Audit ID generator configuration."""

    max_sequence: int = Field(
        default=99,
        ge=1,
        le=99,
        description="Highest sequence issued before wrapping back to 1",
    )
    sequence_store: SequenceStoreConfig = Field(
        default_factory=SequenceStoreConfig,
        description="Sequence counter storage",
    )
