from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ConfigDict, Field, ValidationError, field_validator

from atc_commands.common.exceptions import ConfigurationError
from atc_commands.common.logging import LogFormat
from atc_commands.domain.base import DomainModel
from atc_commands.domain.presets.atc_trainer import NAME as ATC_TRAINER_NAME

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CustomSchemeConfig(DomainModel):
    """A user scheme derived from a built-in one with some verbs replaced."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: str = ATC_TRAINER_NAME
    verbs: dict[str, list[str]] = Field(default_factory=dict)


class EngineConfig(DomainModel):
    """Settings of the command scheme engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_scheme: str = ATC_TRAINER_NAME
    max_suggestions: int = Field(default=10, ge=1, le=100)
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE
    custom_schemes: dict[str, CustomSchemeConfig] = Field(default_factory=dict)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _load_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            {"path": str(path)},
        )
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {path}: {e}", {"path": str(path)}
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping", {"path": str(path)}
        )
    return data


def _from_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if "ATC_SCHEME" in env:
        values["default_scheme"] = env["ATC_SCHEME"]
    if "ATC_MAX_SUGGESTIONS" in env:
        values["max_suggestions"] = env["ATC_MAX_SUGGESTIONS"]
    if "ATC_LOG_LEVEL" in env:
        values["log_level"] = env["ATC_LOG_LEVEL"]
    if "ATC_LOG_FORMAT" in env:
        values["log_format"] = env["ATC_LOG_FORMAT"].strip().lower()
    return values


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> EngineConfig:
    """
    Load configuration from file and environment.

    Defaults are overlaid by the YAML file, then by ``ATC_*`` environment
    variables. A ``.env`` file is read first when ``environ`` is not given.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment mapping to use instead of ``os.environ``

    Returns:
        EngineConfig instance

    Raises:
        ConfigurationError: If the file is missing or malformed, or a value is invalid
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    config_data: dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}", {"path": str(path)}
            )
        _merge_dicts(config_data, _load_file(path))
        logger.debug("Loaded configuration file %s", path)

    _merge_dicts(config_data, _from_env(environ))

    try:
        return EngineConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}", {"errors": e.errors(include_url=False)}
        ) from e
