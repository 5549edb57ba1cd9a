"""Timestamp field path parsing."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SEPARATOR = "."


class FieldPathError(ValueError):
    """Raised when a configured field path cannot be parsed."""


@dataclass(frozen=True)
class FieldPath:
    """Ordered, non-empty sequence of field names."""

    names: tuple[str, ...]
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if not self.names:
            raise FieldPathError("Field path must contain at least one field name.")

    @property
    def parents(self) -> tuple[str, ...]:
        """Names walked as sub-messages."""
        return self.names[:-1]

    @property
    def leaf(self) -> str:
        """Name of the timestamp field itself."""
        return self.names[-1]

    def __str__(self) -> str:
        return self.separator.join(self.names)


def parse_field_path(raw_path: str | None, separator: str | None = None) -> FieldPath:
    """Split ``raw_path`` on ``separator`` into a FieldPath.

    No escaping is supported, so a field name containing the separator cannot
    be expressed. An empty separator falls back to the default ``.``.

    Raises:
      FieldPathError: If the path is missing or contains an empty segment.
    """
    resolved_separator = separator or DEFAULT_SEPARATOR
    if not raw_path:
        raise FieldPathError("Timestamp field path must not be empty.")
    names = tuple(raw_path.split(resolved_separator))
    if any(not name for name in names):
        raise FieldPathError(
            f"Timestamp field path '{raw_path}' contains an empty segment "
            f"for separator '{resolved_separator}'."
        )
    return FieldPath(names=names, separator=resolved_separator)
