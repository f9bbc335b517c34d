"""Configuration file loading and validation."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import (
    CONFIG_FILE_DEFAULT,
    DEFAULT_MAX_DEPTH,
    ENV_NESTED_DELIMITER,
    ENV_PREFIX,
)
from .errors import ConfigException
from .overrides import FieldConfig

logger = logging.getLogger(__name__)


class InferenceConfig(BaseModel):
    """Schema inference configuration."""

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)


class WebConfig(BaseModel):
    """HTTP API configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)


class Config(BaseSettings):
    """Application configuration."""

    log_file: Optional[str] = None

    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    overrides: dict[str, FieldConfig] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter=ENV_NESTED_DELIMITER,
            )

        try:
            return _Config()
        except ValidationError as e:
            error_lines = ["Configuration validation failed:"]
            for error in e.errors():
                loc = " -> ".join(str(item) for item in error["loc"])
                error_lines.append(f"  - {loc}: {error['msg']}")
            raise ConfigException("\n".join(error_lines)) from e
        except ValueError as e:
            raise ConfigException(f"Invalid TOML syntax in {config_path}: {e}") from e

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load ``config_path``, or the default file when it exists.

        Without an explicit path a missing default file is not an error: the
        built-in defaults and the environment are used instead.
        """
        if config_path is not None:
            return cls.load_from_file(config_path)

        if Path(CONFIG_FILE_DEFAULT).is_file():
            return cls.load_from_file(CONFIG_FILE_DEFAULT)

        logger.debug(f"No {CONFIG_FILE_DEFAULT} found, using defaults")
        try:
            return cls()
        except ValidationError as e:
            raise ConfigException(f"Configuration validation failed: {e}") from e
