"""
Configuration management for the fastaseq package.

This module exposes :class:`FastaSettings`, which merges settings from several
sources in the following precedence:

1. Keyword arguments passed to the constructor (highest priority).
2. Environment variables prefixed with ``FASTASEQ_``.
3. User configuration file (``~/.fastaseq/config.json`` by default, or the
   path named by ``FASTASEQ_CONFIG_PATH``).
4. Defaults bundled with the package (``data/default_settings.json``).
"""
from __future__ import annotations

import codecs
import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple, Type

from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "default_settings.json"
DEFAULT_USER_CONFIG_PATH = Path.home() / ".fastaseq" / "config.json"
CONFIG_PATH_ENV = "FASTASEQ_CONFIG_PATH"


def user_config_path() -> Path:
    override = os.environ.get(CONFIG_PATH_ENV)
    return Path(override) if override else DEFAULT_USER_CONFIG_PATH


class JsonFileSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a JSON object on disk; missing files contribute nothing."""

    def __init__(self, settings_cls: Type[BaseSettings], path: Path):
        super().__init__(settings_cls)
        self.path = path
        self._data: Dict[str, Any] = _load_json_settings(path) if path.exists() else {}

    def get_field_value(self, field: FieldInfo, field_name: str) -> Tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        return dict(self._data)


class FastaSettings(BaseSettings):
    """Defaults applied when reading and writing FASTA files."""

    model_config = SettingsConfigDict(env_prefix="FASTASEQ_", case_sensitive=False, extra="ignore")

    line_width: int = Field(80, ge=0, description="Residues per body line when writing; 0 disables wrapping")
    allow_duplicates: bool = Field(True, description="Keep every record that shares an identifier")
    encoding: str = Field("utf-8", description="Text encoding of FASTA files")
    log_level: str = Field("INFO", description="Level used by setup_default_logging")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unsupported log level '{value}'")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            JsonFileSettingsSource(settings_cls, user_config_path()),
            JsonFileSettingsSource(settings_cls, DEFAULT_SETTINGS_PATH),
        )


@lru_cache(maxsize=1)
def get_settings() -> FastaSettings:
    """Return the process-wide settings, loading them on first use."""
    return FastaSettings()


def _load_json_settings(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in settings file '{path}'") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Settings file '{path}' must contain a JSON object")
    return data
