"""Upload descriptor model and resolution of validator input into a file path."""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from utils.logging import get_logger

from .exceptions import InvalidArgumentError


LOGGER = get_logger(__name__)
DESCRIPTOR_FIELDS = ("tmp_name", "name")


class UploadError(IntEnum):
    """Error codes reported by an HTTP multipart upload handler."""

    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


class UploadDescriptor(BaseModel):
    """One uploaded file as described by the upload handler."""

    tmp_name: str
    name: str
    size: int = Field(default=0, ge=0)
    error: int = UploadError.OK
    type: str = ""


@dataclass(slots=True)
class FileInfo:
    """Path and upload context resolved from validator input."""

    file: str
    filename: str
    error: int = UploadError.OK

    @property
    def no_file(self) -> bool:
        return self.error == UploadError.NO_FILE


def is_descriptor(value: Any) -> bool:
    """Return ``True`` if ``value`` carries the fields of an upload descriptor."""

    if isinstance(value, UploadDescriptor):
        return True
    return isinstance(value, Mapping) and all(field in value for field in DESCRIPTOR_FIELDS)


def _from_descriptor(value: Any) -> FileInfo:
    if isinstance(value, UploadDescriptor):
        descriptor = value
    else:
        try:
            descriptor = UploadDescriptor.model_validate(dict(value))
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid upload descriptor: {exc}") from exc
    return FileInfo(file=descriptor.tmp_name, filename=descriptor.name, error=descriptor.error)


def resolve_file_info(value: Any, context: Optional[Any] = None) -> FileInfo:
    """Resolve a path string, upload descriptor or legacy pair into a :class:`FileInfo`.

    A list, tuple or mapping that lacks the descriptor fields is a programming
    error and raises :class:`InvalidArgumentError`. Values of any other type
    resolve to an empty path so that the caller reports them as not found.
    """

    if isinstance(value, (str, os.PathLike)) and context is not None:
        if is_descriptor(context):
            return _from_descriptor(context)
        LOGGER.debug("Ignoring context without upload descriptor fields: %r", context)

    if isinstance(value, (Mapping, UploadDescriptor, list, tuple)):
        if not is_descriptor(value):
            raise InvalidArgumentError("Value array must be in upload-descriptor format")
        return _from_descriptor(value)

    if isinstance(value, (str, os.PathLike)):
        path = os.fsdecode(value)
        return FileInfo(file=path, filename=Path(path).name if path else "")

    LOGGER.debug("Unsupported validator input %r resolved to an empty path", value)
    return FileInfo(file="", filename="")
