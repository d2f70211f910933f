from contextvars import ContextVar
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

LOG_LEVELS = ('CRITICAL', 'FATAL', 'ERROR', 'WARN', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


class ApplicationConfiguration(BaseSettings):
    """The configuration for the mdadf CLI tool."""

    log_file: str | None = None
    """The filename of the log file to use. If this is not set logging to a file is disabled."""
    log_level: str = 'WARNING'
    """The log level to use. Use Python's `logging` names: `CRITICAL`, `FATAL`, `ERROR`, `WARN`, `WARNING`, `INFO`,
    `DEBUG` and `NOTSET`."""
    json_indent: int | None = Field(default=None, ge=0)
    """Number of spaces used to indent the JSON document written by the CLI. When this is not set the document is
    written on a single line."""
    ensure_ascii: bool = False
    """If True non-ASCII characters in the JSON document are escaped. Default is False."""

    model_config = SettingsConfigDict(
        extra='ignore',
        validate_assignment=True,
        env_prefix='MDADF_',
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        if not isinstance(v, str) or v.upper() not in LOG_LEVELS:
            raise ValueError(f'Unknown log level {v!r}, expected one of: {", ".join(LOG_LEVELS)}')
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        if mdadf_config_file := os.getenv('MDADF_CONFIG_FILE'):
            conf_file = Path(mdadf_config_file).resolve()
            if not conf_file.exists():
                raise FileNotFoundError(f'Configuration file not found: {conf_file}')
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                YamlConfigSettingsSource(settings_cls, yaml_file=conf_file),
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
        )


CONFIGURATION: ContextVar[ApplicationConfiguration] = ContextVar('configuration')
