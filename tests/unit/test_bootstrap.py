"""Tests for bootstrap and configure_logging."""

import json
from datetime import date

import pytest
import structlog

from dcaudit.audit import AuditIdGenerator
from dcaudit.audit.stores import InMemorySequenceStore
from dcaudit.bootstrap import bootstrap, configure_logging
from dcaudit.config.models import LoggingConfig
from dcaudit.config.settings import Settings
from dcaudit.observability.logging import get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def _events(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level_and_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingConfig(level="WARNING", format="json", redact_pii=False))
        logger = get_logger("test")
        logger.info("hidden")
        logger.warning("shown")

        assert [entry["event"] for entry in _events(capsys.readouterr().err)] == ["shown"]

    def test_console_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingConfig(level="INFO", format="console", redact_pii=False))
        get_logger("test").info("console_message")

        err = capsys.readouterr().err
        assert "console_message" in err
        with pytest.raises(json.JSONDecodeError):
            json.loads(err.splitlines()[-1])

    def test_redaction_follows_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingConfig(level="INFO", format="json", redact_pii=True))
        get_logger("test").info("auditor_assigned", email="tech@example.com")

        assert _events(capsys.readouterr().err)[-1]["email"] == "[REDACTED]"


class TestBootstrap:
    """Tests for bootstrap."""

    def test_returns_configured_generator(self) -> None:
        settings = Settings(audit_ids={"max_sequence": 2})
        generator = bootstrap(settings)

        assert isinstance(generator, AuditIdGenerator)
        assert isinstance(generator.store, InMemorySequenceStore)
        issued = [generator.generate(date=date(2025, 7, 19)) for _ in range(3)]
        assert issued == [
            "20250719-AUD-Q03-01",
            "20250719-AUD-Q03-02",
            "20250719-AUD-Q03-01",
        ]

    def test_logs_bootstrap_event(self, capsys: pytest.CaptureFixture[str]) -> None:
        settings = Settings(
            observability={"logging": {"level": "INFO", "format": "json", "redact_pii": False}}
        )
        bootstrap(settings)

        entry = _events(capsys.readouterr().err)[-1]
        assert entry["event"] == "dcaudit_bootstrapped"
        assert entry["backend"] == "inmemory"
        assert entry["max_sequence"] == 99
        assert entry["log_format"] == "json"

    def test_warning_level_silences_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        settings = Settings(
            observability={"logging": {"level": "WARNING", "format": "json", "redact_pii": False}}
        )
        bootstrap(settings).generate(date=date(2025, 7, 19))

        assert capsys.readouterr().err == ""

    def test_reads_settings_when_omitted(
        self,
        mock_toml_files,
        test_config_dir,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_toml_files({
            "default.toml": (
                "[audit_ids]\nmax_sequence = 4\n\n"
                "[observability.logging]\nlevel = 'INFO'\nformat = 'json'\n"
            ),
        })
        monkeypatch.setenv("DCAUDIT_CONFIG_DIR", str(test_config_dir))

        bootstrap()

        entry = _events(capsys.readouterr().err)[-1]
        assert entry["max_sequence"] == 4
