"""Walk a decoded message tree to the timestamp field."""

from __future__ import annotations

from proto_timestamp_extractor.extraction_errors import FieldNotFoundError, TypeMismatchError

from .decoded_nodes import DecodedNode
from .field_path import FieldPath

MAX_UINT64 = (1 << 64) - 1


def navigate_to_timestamp(root: DecodedNode, path: FieldPath) -> int:
    """Descend through ``path.parents`` and return the unsigned integer at ``path.leaf``.

    A single-element path resolves directly on ``root``. Missing fields are
    never replaced by a default value.

    Raises:
      FieldNotFoundError: If a step is absent or a parent is not a sub-message.
      TypeMismatchError: If the leaf is not an unsigned 64-bit integer.
    """
    node = root
    walked: list[str] = []
    for name in path.parents:
        walked.append(name)
        child = node.message_field(name)
        if child is None:
            raise FieldNotFoundError(
                f"Message field '{path.separator.join(walked)}' not found in decoded message."
            )
        node = child

    walked.append(path.leaf)
    location = path.separator.join(walked)
    value = node.scalar_field(path.leaf)
    if value is None:
        raise FieldNotFoundError(f"Timestamp field '{location}' not found in decoded message.")
    return _require_uint64(value, location)


def _require_uint64(value: object, location: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(
            f"Timestamp field '{location}' must be an integer, got {type(value).__name__}."
        )
    if value < 0 or value > MAX_UINT64:
        raise TypeMismatchError(
            f"Timestamp field '{location}' value {value} is not an unsigned 64-bit integer."
        )
    return value
