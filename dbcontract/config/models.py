"""Typed configuration models for the client contract layer.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the rest of the runtime.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LoggingConfig(BaseModel):
    """Logging switches consumed by :func:`dbcontract.telemetry.configure_logging`.

    When ``log_dir`` is unset only the stream handler is attached.
    """

    level: str = Field("INFO")
    log_dir: Optional[str] = None
    logger_name: str = Field("dbcontract", min_length=1)

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level


class StoreConfig(BaseModel):
    """Store registry settings.

    ``extra_modules`` lists dotted import paths of slices registered after the
    built-in ones. Collisions with built-in names fail the startup.
    """

    extra_modules: List[str] = Field(default_factory=list)

    @field_validator("extra_modules")
    @classmethod
    def _reject_blank_paths(cls, value: List[str]) -> List[str]:
        for path in value:
            if not path or not path.strip():
                raise ValueError("extra_modules entries must be non-empty import paths")
        return [path.strip() for path in value]


class ClientConfig(BaseModel):
    """Top-level config composed of logging and store sections."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    model_config = ConfigDict(frozen=True)
