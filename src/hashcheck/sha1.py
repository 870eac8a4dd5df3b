"""Validator checking that a file matches one of a set of SHA1 digests."""
from __future__ import annotations

import warnings
from typing import Any, ClassVar, Dict

from utils.hashing import DEFAULT_CHUNK_SIZE

from .base import HashValidator


class Sha1Validator(HashValidator):
    """Validate uploaded or local files against expected SHA1 digests.

    >>> validator = Sha1Validator(["b2a5334847b4328e7d19d9b41fd874dffa911c98"])
    >>> validator.get_hash()
    {'b2a5334847b4328e7d19d9b41fd874dffa911c98': 'sha1'}
    """

    DOES_NOT_MATCH: ClassVar[str] = "fileSha1DoesNotMatch"
    NOT_FOUND: ClassVar[str] = "fileSha1NotFound"

    default_algorithm: ClassVar[str] = "sha1"
    message_templates: ClassVar[Dict[str, str]] = {
        DOES_NOT_MATCH: "File '%value%' does not match the given sha1 hashes: %hash%",
        NOT_FOUND: "File '%value%' is not readable or does not exist",
    }

    def __init__(self, options: Any = None, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__(options, algorithm="sha1", chunk_size=chunk_size)

    def get_sha1(self) -> Dict[str, str]:
        """Deprecated alias of :meth:`get_hash`."""

        _deprecated("get_sha1", "get_hash")
        return self.get_hash()

    def set_sha1(self, digests: Any) -> "Sha1Validator":
        """Deprecated alias of :meth:`set_hash`."""

        _deprecated("set_sha1", "set_hash")
        self.set_hash(digests)
        return self

    def add_sha1(self, digests: Any) -> "Sha1Validator":
        """Deprecated alias of :meth:`add_hash`."""

        _deprecated("add_sha1", "add_hash")
        self.add_hash(digests)
        return self


def _deprecated(name: str, replacement: str, stacklevel: int = 3) -> None:
    warnings.warn(
        f"Sha1Validator.{name}() is deprecated; use {replacement}() instead",
        DeprecationWarning,
        stacklevel=stacklevel,
    )
