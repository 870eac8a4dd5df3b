"""Utility helpers shared across the hashcheck codebase."""

from .config import AppConfig, load_config
from .hashing import DEFAULT_CHUNK_SIZE, file_digest, file_sha1
from .logging import configure_logging, get_logger
from .paths import normalise_path

__all__ = [
    "AppConfig",
    "load_config",
    "DEFAULT_CHUNK_SIZE",
    "file_digest",
    "file_sha1",
    "configure_logging",
    "get_logger",
    "normalise_path",
]
