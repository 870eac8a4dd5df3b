"""Hashing helpers for large files."""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Union

DEFAULT_CHUNK_SIZE = 2**20


def file_digest(path: Union[str, os.PathLike], algorithm: str = "sha1", chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Compute a streaming ``algorithm`` checksum for ``path`` as lowercase hex."""

    digest = hashlib.new(algorithm)
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest().lower()


def file_sha1(path: Union[str, os.PathLike], chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Compute a streaming SHA1 checksum for ``path``."""

    return file_digest(path, "sha1", chunk_size)
