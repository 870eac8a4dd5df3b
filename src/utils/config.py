"""Configuration helpers for hashcheck."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .hashing import DEFAULT_CHUNK_SIZE


class AppConfig(BaseModel):
    """Application level configuration."""

    hash: Union[str, List[str]] = Field(default_factory=list)
    algorithm: str = "sha1"
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    log_level: str = "INFO"
    messages: Dict[str, str] = Field(default_factory=dict)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        value = value.upper()
        if value not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}; got {value!r}")
        return value


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
