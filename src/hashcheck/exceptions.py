"""Exceptions raised for caller-contract violations."""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a validator is called or configured with an unsupported shape."""
