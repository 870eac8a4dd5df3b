"""File digest validation for uploaded and local files."""

from .base import HashValidator, ValidationResult
from .exceptions import InvalidArgumentError
from .sha1 import Sha1Validator
from .upload import FileInfo, UploadDescriptor, UploadError, resolve_file_info

__all__ = [
    "HashValidator",
    "ValidationResult",
    "InvalidArgumentError",
    "Sha1Validator",
    "FileInfo",
    "UploadDescriptor",
    "UploadError",
    "resolve_file_info",
]
