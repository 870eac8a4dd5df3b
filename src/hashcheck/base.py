"""Generic file digest validator with keyed failure messages."""
from __future__ import annotations

import hashlib
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Optional

from utils.hashing import DEFAULT_CHUNK_SIZE, file_digest
from utils.logging import get_logger

from .exceptions import InvalidArgumentError
from .upload import FileInfo, resolve_file_info


LOGGER = get_logger(__name__)
_PLACEHOLDER = re.compile(r"%(value|hash)%")


@dataclass(slots=True)
class ValidationResult:
    """Outcome of the most recent ``is_valid`` call."""

    valid: bool = False
    messages: Dict[str, str] = field(default_factory=dict)


def _normalise_digest(value: object) -> str:
    return str(value).strip().lower()


def _option(options: Any, name: str) -> Any:
    if isinstance(options, Mapping):
        return options.get(name)
    return getattr(options, name, None)


class HashValidator:
    """Validate that a file's digest is one of a configured set of digests.

    ``options`` may be a digest string, a sequence of digest strings, or a
    configuration structure (mapping or object) with a ``hash`` field and
    optional ``algorithm`` and ``messages`` fields.
    """

    DOES_NOT_MATCH: ClassVar[str] = "fileHashDoesNotMatch"
    NOT_FOUND: ClassVar[str] = "fileHashNotFound"

    default_algorithm: ClassVar[str] = "sha256"
    message_templates: ClassVar[Dict[str, str]] = {
        "fileHashDoesNotMatch": "File '%value%' does not match the given hashes: %hash%",
        "fileHashNotFound": "File '%value%' is not readable or does not exist",
    }

    def __init__(self, options: Any = None, algorithm: Optional[str] = None, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._hash: Dict[str, str] = {}
        self._templates: Dict[str, str] = dict(self.message_templates)
        self._result = ValidationResult()
        self._value = ""
        self.chunk_size = chunk_size

        digests: Any = None
        if isinstance(options, str) or self._is_sequence(options):
            digests = options
        elif options is not None:
            digests = _option(options, "hash")
            algorithm = algorithm or _option(options, "algorithm")
            self.chunk_size = _option(options, "chunk_size") or chunk_size
            messages = _option(options, "messages")
            if messages:
                self.set_messages(messages)

        self.algorithm = self._check_algorithm(algorithm or self.default_algorithm)
        if isinstance(digests, str) or self._is_sequence(digests):
            self.add_hash(digests)
        elif options is not None:
            LOGGER.debug("No digests found in validator options %r", options)

    def __call__(self, value: Any, context: Optional[Any] = None) -> bool:
        return self.is_valid(value, context)

    @staticmethod
    def _is_sequence(value: Any) -> bool:
        return isinstance(value, (list, tuple, set, frozenset))

    def _check_algorithm(self, algorithm: str) -> str:
        algorithm = algorithm.lower()
        if algorithm not in hashlib.algorithms_available:
            raise InvalidArgumentError(f"Unknown algorithm '{algorithm}'")
        return algorithm

    # ------------------------------------------------------------------
    # expected digests
    # ------------------------------------------------------------------
    def get_hash(self) -> Dict[str, str]:
        """Return the expected digests mapped to their algorithm tag."""

        return dict(self._hash)

    def set_hash(self, digests: Any) -> "HashValidator":
        """Replace the expected digests."""

        self._hash = {}
        return self.add_hash(digests)

    def add_hash(self, digests: Any) -> "HashValidator":
        """Merge ``digests`` into the expected digests."""

        if isinstance(digests, str):
            digests = [digests]
        elif not self._is_sequence(digests):
            raise InvalidArgumentError(f"Invalid hash options provided: {digests!r}")
        for digest in digests:
            self._hash[_normalise_digest(digest)] = self.algorithm
        return self

    # ------------------------------------------------------------------
    # messages
    # ------------------------------------------------------------------
    def get_message_templates(self) -> Dict[str, str]:
        return dict(self._templates)

    def set_message(self, template: str, key: Optional[str] = None) -> "HashValidator":
        """Override the template for ``key``, or for every key when ``key`` is ``None``."""

        if key is None:
            for name in self._templates:
                self._templates[name] = template
            return self
        if key not in self._templates:
            raise InvalidArgumentError(f"No message template exists for key '{key}'")
        self._templates[key] = template
        return self

    def set_messages(self, messages: Mapping[str, str]) -> "HashValidator":
        for key, template in messages.items():
            self.set_message(template, key)
        return self

    def get_messages(self) -> Dict[str, str]:
        """Return the failure messages recorded by the last ``is_valid`` call."""

        return dict(self._result.messages)

    @property
    def result(self) -> ValidationResult:
        return self._result

    def _render(self, key: str) -> str:
        variables = {"value": self._value, "hash": ", ".join(self._hash)}
        return _PLACEHOLDER.sub(lambda match: variables[match.group(1)], self._templates[key])

    def _error(self, key: str) -> bool:
        self._result.messages[key] = self._render(key)
        LOGGER.debug("Validation of %s failed: %s", self._value or "<empty>", key)
        return False

    # ------------------------------------------------------------------
    # validation
    # ------------------------------------------------------------------
    @staticmethod
    def _is_readable(info: FileInfo) -> bool:
        if info.no_file or not info.file:
            return False
        path = Path(info.file)
        return path.is_file() and os.access(path, os.R_OK)

    def is_valid(self, value: Any, context: Optional[Any] = None) -> bool:
        """Return ``True`` when the file behind ``value`` matches an expected digest.

        ``value`` is a path, an upload descriptor, or (legacy form) a path with
        the upload descriptor passed as ``context``. Failures are reported via
        :meth:`get_messages`; a mapping without descriptor fields raises
        :class:`InvalidArgumentError`.
        """

        self._result = ValidationResult()
        info = resolve_file_info(value, context)
        self._value = info.file

        if not self._is_readable(info):
            return self._error(self.NOT_FOUND)

        try:
            digest = file_digest(info.file, self.algorithm, self.chunk_size)
        except OSError as exc:
            LOGGER.warning("Unable to read %s: %s", info.file, exc)
            return self._error(self.NOT_FOUND)

        if digest not in self._hash:
            return self._error(self.DOES_NOT_MATCH)

        LOGGER.debug("Digest %s of %s matched", digest, info.file)
        self._result.valid = True
        return True
