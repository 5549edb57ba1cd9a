"""Per-message extraction failures."""

from __future__ import annotations


class ExtractionError(Exception):
    """Raised when a timestamp cannot be extracted from one message."""


class DecodeError(ExtractionError):
    """Raised for malformed, truncated or overflowing payload bytes."""


class FieldNotFoundError(ExtractionError):
    """Raised when a field path step does not resolve to a field."""


class TypeMismatchError(ExtractionError):
    """Raised when the timestamp field is not an unsigned 64-bit integer."""
