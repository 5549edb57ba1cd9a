"""Field-addressable views over decoded messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from google.protobuf.message import Message as ProtobufMessage


class DecodedNode(Protocol):
    """Decoded message instance addressable by field name.

    Both lookups return ``None`` when the field is absent.
    """

    def message_field(self, name: str) -> DecodedNode | None: ...

    def scalar_field(self, name: str) -> object | None: ...


class ProtobufDecodedNode:
    """Adapter over a ``google.protobuf`` message instance."""

    def __init__(self, message: ProtobufMessage) -> None:
        self._message = message

    def message_field(self, name: str) -> ProtobufDecodedNode | None:
        if name not in self._message.DESCRIPTOR.fields_by_name:
            return None
        value = getattr(self._message, name)
        # Repeated message fields come back as containers, not messages.
        if not isinstance(value, ProtobufMessage):
            return None
        return ProtobufDecodedNode(value)

    def scalar_field(self, name: str) -> object | None:
        field = self._message.DESCRIPTOR.fields_by_name.get(name)
        if field is None:
            return None
        value = getattr(self._message, name)
        if field.enum_type is not None:
            enum_value = field.enum_type.values_by_number.get(value)
            return enum_value.name if enum_value is not None else f"{field.enum_type.name}({value})"
        return value


class MappingDecodedNode:
    """Adapter over a decoded JSON-like object."""

    def __init__(self, payload: Mapping[str, Any]) -> None:
        self._payload = payload

    def message_field(self, name: str) -> MappingDecodedNode | None:
        value = self._payload.get(name)
        if not isinstance(value, Mapping):
            return None
        return MappingDecodedNode(value)

    def scalar_field(self, name: str) -> object | None:
        return self._payload.get(name)
