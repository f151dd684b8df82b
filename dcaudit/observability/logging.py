"""Structured logging for dcaudit.

JSON lines in production, coloured console output in development. Location
labels and bound request context may carry auditor contact details, so
events pass through PIIRedactor unless redaction is switched off.
"""

import logging
import re
import sys
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
    "credentials",
    "email",
    "phone",
    "access_token",
    "refresh_token",
    "redis_url",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
# Requires a leading "+" so digit runs in audit IDs are left alone
PHONE_PATTERN = re.compile(r"\+\d[\d\s\-\(\)]{9,}")

REDACTED = "[REDACTED]"


class PIIRedactor:
    """structlog processor masking secrets and contact details.

    Values under a sensitive key are replaced outright. Strings anywhere
    else, including inside nested dicts and lists, have e-mail addresses
    and phone numbers masked in place.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._scrub(event_dict))

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, str):
            return PHONE_PATTERN.sub("[PHONE]", EMAIL_PATTERN.sub("[EMAIL]", value))
        if isinstance(value, dict):
            return {
                key: REDACTED if key.lower() in SENSITIVE_KEYS else self._scrub(item)
                for key, item in value.items()
            }
        if isinstance(value, list):
            return [self._scrub(item) for item in value]
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" or "console"
        redact_pii: Whether to run PIIRedactor before rendering
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if redact_pii:
        processors.append(PIIRedactor())
    processors.append(
        structlog.processors.JSONRenderer()
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for a module (pass ``__name__``)."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
