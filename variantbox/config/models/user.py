"""User configuration models."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_OUTPUT_FORMATS = ["table", "json"]


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (highest)
    2. Constructor arguments (file data)
    3. .env file
    4. Default values (lowest)
    """

    model_config = SettingsConfigDict(
        env_prefix="VARIANTBOX_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    log_level: str = Field(default="WARNING", description="Default log level")
    log_json: bool = Field(default=False, description="Render console logs as JSON")
    registry_file: Path | None = Field(
        default=None,
        description="Signing identity registry used when --registry is not given",
    )
    include_debug_identity: bool = Field(
        default=True,
        description="Make the standard Android debug identity available",
    )
    output_format: str = Field(
        default="table", description="Output format: 'table' (default) or 'json'"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        lower_v = v.strip().lower()
        if lower_v not in VALID_OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {VALID_OUTPUT_FORMATS}")
        return lower_v

    @field_validator("registry_file", mode="before")
    @classmethod
    def expand_registry_file(cls, v: Any) -> Path | None:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return Path(v).expanduser()
