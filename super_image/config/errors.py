"""Errors raised while loading a partition configuration."""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError


class LoadErrorKind(Enum):
    """Classification of a failed load."""
    IO = "io"
    PARSE = "parse"


class DuplicateFieldError(ValueError):
    """Raised when a JSON object repeats a key."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"duplicate field `{field}`")


class ConfigLoadError(Exception):
    """
    Raised when a partition configuration cannot be loaded.

    Attributes:
        kind: LoadErrorKind.IO if the file could not be opened or read,
            LoadErrorKind.PARSE if its contents are not valid JSON or do not
            match the configuration schema
        cause: Underlying OSError, ValueError or pydantic ValidationError
        path: File being loaded, or None when parsing in-memory data
    """

    _PREFIXES = {
        LoadErrorKind.IO: "File operation error",
        LoadErrorKind.PARSE: "JSON parsing error",
    }

    def __init__(self, kind: LoadErrorKind, cause: Exception, path: Optional[Path] = None):
        self.kind = kind
        self.cause = cause
        self.path = path
        super().__init__(f"{self._PREFIXES[kind]}: {cause}")

    @property
    def is_io(self) -> bool:
        """Whether the file could not be opened or read."""
        return self.kind is LoadErrorKind.IO

    @property
    def is_parse(self) -> bool:
        """Whether the contents failed to decode or match the schema."""
        return self.kind is LoadErrorKind.PARSE

    @property
    def details(self) -> List[str]:
        """Parser diagnostics as "location: message" lines."""
        if self.is_io:
            return []

        cause = self.cause
        if isinstance(cause, ValidationError):
            lines = []
            for error in cause.errors():
                location = ".".join(str(part) for part in error["loc"]) or "<root>"
                lines.append(f"{location}: {error['msg']}")
            return lines
        if isinstance(cause, json.JSONDecodeError):
            return [f"line {cause.lineno} column {cause.colno}: {cause.msg}"]
        if isinstance(cause, DuplicateFieldError):
            return [f"{cause.field}: duplicate field"]
        if isinstance(cause, UnicodeDecodeError):
            return [f"byte {cause.start}: {cause.reason}"]
        return [str(cause)]
