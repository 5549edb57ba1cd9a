"""Shared fixtures: protobuf message classes built from descriptors at test time."""

from __future__ import annotations

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_FIELD = descriptor_pb2.FieldDescriptorProto
_PACKAGE = "extractor_tests"


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    *,
    type_name: str | None = None,
    repeated: bool = False,
) -> None:
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = field_type
    field.label = _FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL
    if type_name is not None:
        field.type_name = type_name


def _build_event_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = "extractor_test_events.proto"
    file_proto.package = _PACKAGE
    file_proto.syntax = "proto3"

    status = file_proto.enum_type.add()
    status.name = "Status"
    for number, value_name in enumerate(("STATUS_UNKNOWN", "STATUS_ACTIVE")):
        value = status.value.add()
        value.name = value_name
        value.number = number

    level2 = file_proto.message_type.add()
    level2.name = "Level2"
    _add_field(level2, "ts", 1, _FIELD.TYPE_UINT64)
    _add_field(level2, "label", 2, _FIELD.TYPE_STRING)
    _add_field(level2, "delta", 3, _FIELD.TYPE_INT64)
    _add_field(level2, "status", 4, _FIELD.TYPE_ENUM, type_name=f".{_PACKAGE}.Status")
    _add_field(level2, "ratio", 5, _FIELD.TYPE_DOUBLE)

    level1 = file_proto.message_type.add()
    level1.name = "Level1"
    _add_field(level1, "level2", 1, _FIELD.TYPE_MESSAGE, type_name=f".{_PACKAGE}.Level2")
    _add_field(
        level1, "samples", 2, _FIELD.TYPE_MESSAGE, type_name=f".{_PACKAGE}.Level2", repeated=True
    )

    root = file_proto.message_type.add()
    root.name = "Root"
    _add_field(root, "created_at", 1, _FIELD.TYPE_UINT64)
    _add_field(root, "level1", 2, _FIELD.TYPE_MESSAGE, type_name=f".{_PACKAGE}.Level1")
    _add_field(root, "name", 3, _FIELD.TYPE_STRING)
    return file_proto


@pytest.fixture(scope="session")
def event_classes() -> dict[str, type]:
    """Root -> Level1 -> Level2 message classes keyed by short name."""
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(_build_event_file().SerializeToString())
    return {
        name: message_factory.GetMessageClass(pool.FindMessageTypeByName(f"{_PACKAGE}.{name}"))
        for name in ("Root", "Level1", "Level2")
    }
