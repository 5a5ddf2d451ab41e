"""Runtime configuration for lcstarter components."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lcstarter.errors import ConfigurationError


class LogLevel(str, Enum):
    """Ordered log severities, lowest first."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return list(LogLevel).index(self)


class OpenAISettings(BaseSettings):
    """Chat model settings read from ``OPENAI_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="openai_",
        env_file=".env",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    max_tokens: int = 1000


class EmbeddingSettings(BaseSettings):
    """Embedding model and chunking settings."""

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, case_sensitive=False, extra="ignore")

    embedding_model: str = "text-embedding-ada-002"
    chunk_size: int = Field(default=1000, gt=0)
    # Accepted for parity with real splitters; split_text does not apply it.
    chunk_overlap: int = Field(default=200, ge=0)


class LoggingSettings(BaseSettings):
    """Console logging settings, shared and mutated in place by the logger."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    log_level: LogLevel = LogLevel.INFO
    enable_console_logging: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("enable_console_logging", mode="before")
    @classmethod
    def _parse_console_flag(cls, value: Any) -> Any:
        # Only the literal string "false" disables the console.
        if isinstance(value, str):
            return value != "false"
        return value


class RuntimeSettings(BaseSettings):
    """Process start-up switches that are not part of the shared config."""

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, case_sensitive=False, extra="ignore")

    run_examples: bool = False

    @field_validator("run_examples", mode="before")
    @classmethod
    def _parse_examples_flag(cls, value: Any) -> Any:
        # Only the literal string "true" turns the examples on.
        if isinstance(value, str):
            return value == "true"
        return value


class AppConfig(BaseModel):
    """Model, embedding and logging settings for one process."""

    openai: OpenAISettings
    embeddings: EmbeddingSettings
    logging: LoggingSettings


_SECTIONS: Mapping[str, type[BaseSettings]] = {
    "openai": OpenAISettings,
    "embeddings": EmbeddingSettings,
    "logging": LoggingSettings,
}


def _build_section(name: str, value: object) -> BaseSettings:
    section_cls = _SECTIONS.get(name)
    if section_cls is None:
        raise ConfigurationError(f"Unknown configuration section: {name}")
    if isinstance(value, section_cls):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section {name!r} must be a mapping or {section_cls.__name__}")
    try:
        return section_cls(**value)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {name} configuration: {exc}") from exc


def validate_config(config: AppConfig) -> None:
    if not config.openai.api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is required")


def load_config(**sections: object) -> AppConfig:
    """Build and validate a config from the environment plus explicit section overrides."""

    unknown = set(sections) - set(_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration section: {', '.join(sorted(unknown))}")
    values = {name: _build_section(name, sections.get(name, {})) for name in _SECTIONS}
    config = AppConfig(**values)
    validate_config(config)
    return config


class ConfigManager:
    """Process-wide holder of the current configuration snapshot."""

    _instance: ClassVar[ConfigManager | None] = None

    def __init__(self, config: AppConfig | None = None) -> None:
        if config is None:
            config = load_config()
        else:
            validate_config(config)
        self._config = config

    @classmethod
    def get_instance(cls) -> ConfigManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def get_config(self) -> AppConfig:
        return self._config

    def update_config(self, partial: Mapping[str, object]) -> AppConfig:
        """Shallow-merge ``partial`` by section and swap in the validated result.

        The previous ``AppConfig`` object is left untouched, so references
        obtained earlier keep the old values; call ``get_config`` again.
        """

        merged: dict[str, object] = {name: getattr(self._config, name) for name in _SECTIONS}
        for name, value in partial.items():
            merged[name] = _build_section(name, value)
        config = AppConfig(**merged)
        validate_config(config)
        self._config = config
        return config


__all__ = [
    "AppConfig",
    "ConfigManager",
    "EmbeddingSettings",
    "LogLevel",
    "LoggingSettings",
    "OpenAISettings",
    "RuntimeSettings",
    "load_config",
    "validate_config",
]
