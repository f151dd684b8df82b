"""Root settings model for dcaudit configuration."""

from typing import Any

from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from dcaudit.config.loader import load_config
from dcaudit.config.models.audit_ids import AuditIdConfig
from dcaudit.config.models.observability import ObservabilityConfig


class TomlLayersSource(PydanticBaseSettingsSource):
    """Settings source over the merged ``config/*.toml`` layers.

    Only top-level tables naming a Settings field are passed on, so the
    same files can carry tables for other tools.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._tables = {
            name: table
            for name, table in load_config().items()
            if name in settings_cls.model_fields
        }

    def get_field_value(
        self, field: FieldInfo, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = self._tables.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return dict(self._tables)


class Settings(BaseSettings):
    """dcaudit configuration.

    Precedence, highest first: constructor arguments, DCAUDIT_* variables
    (``__`` separates nesting, e.g. DCAUDIT_AUDIT_IDS__MAX_SEQUENCE),
    config/{DCAUDIT_ENV}.toml, config/default.toml, model defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DCAUDIT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    audit_ids: AuditIdConfig = Field(
        default_factory=AuditIdConfig,
        description="Audit ID generator configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging and metrics configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlLayersSource(settings_cls))
