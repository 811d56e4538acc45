"""Configuration loading utilities for filesig."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError
from .paths import runtime_config_dir

LOG_LEVEL_ENV = "FILESIG_LOG_LEVEL"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")
    json_output: bool = Field(default=True, description="Emit JSON lines instead of console output")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class TaskConfig(BaseModel):
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Upper bound for background generate/sign/verify tasks; unset means unbounded",
    )


class OutputConfig(BaseModel):
    public_key_name: str = Field(default="public.pem")
    signature_name: str = Field(default="signature.txt")


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tasks: TaskConfig = Field(default_factory=TaskConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".filesig" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def _apply_env(config: AppConfig) -> AppConfig:
    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        try:
            config.logging = LoggingConfig(level=level, json_output=config.logging.json_output)
        except ValidationError as exc:
            raise ConfigError(f"Invalid {LOG_LEVEL_ENV}: {level}") from exc
    return config


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return _apply_env(AppConfig.model_validate(data))
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return _apply_env(DEFAULT_CONFIG.model_copy(deep=True))


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "OutputConfig",
    "TaskConfig",
    "config_search_paths",
    "dump_default_config",
    "load_config",
]
