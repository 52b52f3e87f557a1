"""Configuration management for the font manifest system."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidLogLevelError,
    InvalidYamlError,
)

DEFAULT_MANIFEST_PATH = Path("/etc/fonts.xml")
DEFAULT_FONT_DIR = "/system/fonts/"


class ManifestConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTMANIFEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Where to find the manifest and how to turn its entries into paths."""

    manifest_path: Path = Field(DEFAULT_MANIFEST_PATH, description="Font manifest XML file")
    font_dir: str = Field(
        DEFAULT_FONT_DIR, description="Directory prefix for font file names in the manifest"
    )
    log_level: str = Field("INFO", description="Logging level")

    @field_validator("font_dir")
    @classmethod
    def ensure_trailing_separator(cls, v: str) -> str:
        if v and not v.endswith("/"):
            return v + "/"
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "ManifestConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "ManifestConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # YAML values win; skip the .env file for this instance
        if issubclass(config_class, BaseSettings):

            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
