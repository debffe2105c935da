"""Configuration loading for the utf-core command line tool."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import local_config_path, runtime_config_dir

_BYTE_ORDERS = ("little", "big")
_UNIT_FORMATS = ("hex", "dec")
_LOG_FORMATS = ("json", "console")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")
    format: str = Field(default="json", description="Log rendering: json|console")

    @field_validator("format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        value = value.lower()
        if value not in _LOG_FORMATS:
            raise ValueError(f"format must be one of {', '.join(_LOG_FORMATS)}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class OutputConfig(BaseModel):
    byteorder: str = Field(default="little", description="Byte order of raw UTF-16 files: little|big")
    unit_format: str = Field(default="hex", description="How code units are printed: hex|dec")

    @field_validator("byteorder")
    @classmethod
    def _validate_byteorder(cls, value: str) -> str:
        value = value.lower()
        if value not in _BYTE_ORDERS:
            raise ValueError(f"byteorder must be one of {', '.join(_BYTE_ORDERS)}")
        return value

    @field_validator("unit_format")
    @classmethod
    def _validate_unit_format(cls, value: str) -> str:
        value = value.lower()
        if value not in _UNIT_FORMATS:
            raise ValueError(f"unit_format must be one of {', '.join(_UNIT_FORMATS)}")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
