"""Loading of the two input documents.

Reading, hashing and parsing all happen before any comparison starts.
Failures raise DocumentError subclasses; the CLI treats them as fatal.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from .core.digest import stream_sha256_hex

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Base exception for document loading errors."""

    pass


class DocumentReadError(DocumentError):
    """Raised when a document cannot be opened, read or decoded as UTF-8."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"could not read {self.path}: {self.args[0]}"


class DocumentParseError(DocumentError):
    """Raised when a document is not well-formed JSON."""

    def __init__(
        self,
        message: str,
        path: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.path = path
        self.line = line
        self.column = column

    def __str__(self) -> str:
        location = self.path
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"invalid JSON in {location}: {self.args[0]}"


@dataclass(frozen=True)
class Document:
    """A parsed document together with its raw text."""

    path: str
    text: str
    value: Any


def file_digest(path: str) -> str:
    """SHA-256 hex digest of a file's bytes."""
    try:
        with open(path, "rb") as f:
            return stream_sha256_hex(f)
    except OSError as exc:
        raise DocumentReadError(exc.strerror or str(exc), path) from exc


def same_content(path_a: str, path_b: str) -> bool:
    """True when both files hash to the same SHA-256 digest."""
    digest_a = file_digest(path_a)
    digest_b = file_digest(path_b)
    logger.debug("sha256 %s = %s", path_a, digest_a)
    logger.debug("sha256 %s = %s", path_b, digest_b)
    return digest_a == digest_b


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard constant {name}")


def load_document(path: str) -> Document:
    """Read and parse one JSON document."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise DocumentReadError(exc.strerror or str(exc), path) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(f"not valid UTF-8 ({exc.reason})", path) from exc

    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DocumentParseError(
            getattr(exc, "msg", str(exc)),
            path,
            getattr(exc, "lineno", None),
            getattr(exc, "colno", None),
        ) from exc

    logger.info("loaded %s (%d bytes)", path, len(raw))
    return Document(path=path, text=text, value=value)
