"""One-call setup for services that issue audit IDs.

Applies the configured logging, then builds a generator over the
configured sequence store:

    from dcaudit.bootstrap import bootstrap

    generator = bootstrap()
    audit_id = generator.generate(location="Island 8")
"""

from dcaudit.audit.factory import build_generator
from dcaudit.audit.generator import AuditIdGenerator
from dcaudit.config import get_settings
from dcaudit.config.models.observability import LoggingConfig
from dcaudit.config.settings import Settings
from dcaudit.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def configure_logging(config: LoggingConfig) -> None:
    """Apply a LoggingConfig to structlog."""
    setup_logging(
        level=config.level,
        format=config.format,
        redact_pii=config.redact_pii,
    )


def bootstrap(settings: Settings | None = None) -> AuditIdGenerator:
    """Configure logging and return a generator built from settings."""
    if settings is None:
        settings = get_settings()

    configure_logging(settings.observability.logging)
    generator = build_generator(settings)

    logger.info(
        "dcaudit_bootstrapped",
        backend=settings.audit_ids.sequence_store.backend,
        max_sequence=settings.audit_ids.max_sequence,
        log_format=settings.observability.logging.format,
    )
    return generator
