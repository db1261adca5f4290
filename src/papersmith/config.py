"""Configuration management using pydantic-settings."""

import tomllib
from datetime import date
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError
from .domain.naming import (
    DEFAULT_FALLBACK_DATE,
    DEFAULT_FALLBACK_LABEL,
    DEFAULT_MAX_SLUG_LENGTH,
)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = 120.0
CONFIG_PATH = Path("~/.config/papersmith/config.toml").expanduser()


class LLMConfig(BaseSettings):
    """Inference endpoint configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PAPERSMITH_LLM_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("PAPERSMITH_API_KEY", "OPENAI_API_KEY"),
    )


class NamingConfig(BaseSettings):
    """Values used when the model leaves a field out."""

    model_config = SettingsConfigDict(
        env_prefix="PAPERSMITH_NAMING_", env_file=".env", extra="ignore"
    )

    fallback_date: date = DEFAULT_FALLBACK_DATE
    fallback_label: str = DEFAULT_FALLBACK_LABEL
    max_slug_length: int = Field(default=DEFAULT_MAX_SLUG_LENGTH, ge=8)

    @field_validator("fallback_label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("fallback_label must not be blank")
        return v.strip()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAPERSMITH_", env_file=".env", extra="ignore"
    )

    glob_pattern: str | None = None
    llm: LLMConfig = Field(default_factory=LLMConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)

    @field_validator("glob_pattern")
    @classmethod
    def blank_as_none(cls, v: str | None) -> str | None:
        return v if v and v.strip() else None


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to environment and defaults.

    Raises ConfigurationError if the file or any value is invalid.
    """
    path = config_path or CONFIG_PATH

    try:
        if path.exists():
            with open(path, "rb") as f:
                data = tomllib.load(f)

            llm = LLMConfig(**data.get("llm", {}))
            naming = NamingConfig(**data.get("naming", {}))
            if data.get("glob_pattern"):
                return Settings(glob_pattern=data["glob_pattern"], llm=llm, naming=naming)
            return Settings(llm=llm, naming=naming)

        return Settings()
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e
