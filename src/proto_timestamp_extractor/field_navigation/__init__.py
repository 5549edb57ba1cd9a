"""Field path navigation exports."""

from .decoded_nodes import DecodedNode, MappingDecodedNode, ProtobufDecodedNode
from .field_path import DEFAULT_SEPARATOR, FieldPath, FieldPathError, parse_field_path
from .path_navigator import MAX_UINT64, navigate_to_timestamp

__all__ = [
    "DEFAULT_SEPARATOR",
    "DecodedNode",
    "FieldPath",
    "FieldPathError",
    "MAX_UINT64",
    "MappingDecodedNode",
    "ProtobufDecodedNode",
    "navigate_to_timestamp",
    "parse_field_path",
]
