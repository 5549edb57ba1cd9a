"""Field path navigator tests."""

from __future__ import annotations

import pytest
from proto_timestamp_extractor.extraction_errors import FieldNotFoundError, TypeMismatchError
from proto_timestamp_extractor.field_navigation import (
    MappingDecodedNode,
    ProtobufDecodedNode,
    navigate_to_timestamp,
    parse_field_path,
)


def _nested(leaf: object) -> MappingDecodedNode:
    return MappingDecodedNode({"level1": {"level2": {"ts": leaf}}})


def test_walks_nested_mapping_to_leaf() -> None:
    assert navigate_to_timestamp(_nested(42), parse_field_path("level1.level2.ts")) == 42


def test_walks_nested_protobuf_message_to_leaf(event_classes) -> None:
    root = event_classes["Root"]()
    root.level1.level2.ts = 1_714_570_000_123
    path = parse_field_path("level1/level2/ts", "/")

    value = navigate_to_timestamp(ProtobufDecodedNode(root), path)

    assert value == 1_714_570_000_123


def test_single_element_path_reads_root_field(event_classes) -> None:
    root = ProtobufDecodedNode(event_classes["Root"](created_at=99))

    assert navigate_to_timestamp(root, parse_field_path("created_at")) == 99


def test_unset_proto3_scalar_reads_as_zero(event_classes) -> None:
    root = ProtobufDecodedNode(event_classes["Root"]())

    assert navigate_to_timestamp(root, parse_field_path("level1.level2.ts")) == 0


@pytest.mark.parametrize(
    "raw_path",
    ["missing.level2.ts", "level1.missing.ts", "level1.level2.missing", "level1.level2.ts.deeper"],
)
def test_missing_steps_raise_field_not_found(raw_path: str) -> None:
    with pytest.raises(FieldNotFoundError):
        navigate_to_timestamp(_nested(42), parse_field_path(raw_path))


def test_field_not_found_message_names_the_walked_path() -> None:
    with pytest.raises(FieldNotFoundError, match="'level1/missing'"):
        navigate_to_timestamp(_nested(42), parse_field_path("level1/missing/ts", "/"))


def test_unknown_protobuf_field_raises_field_not_found(event_classes) -> None:
    root = ProtobufDecodedNode(event_classes["Root"]())

    with pytest.raises(FieldNotFoundError):
        navigate_to_timestamp(root, parse_field_path("level1.level2.created"))


def test_scalar_used_as_parent_raises_field_not_found(event_classes) -> None:
    root = ProtobufDecodedNode(event_classes["Root"](created_at=5))

    with pytest.raises(FieldNotFoundError):
        navigate_to_timestamp(root, parse_field_path("created_at.seconds"))


@pytest.mark.parametrize("leaf", ["1714570000", 1.5, True, -1, 2**64, {"nested": 1}])
def test_non_uint64_leaf_raises_type_mismatch(leaf: object) -> None:
    path = parse_field_path("level1.level2.ts")
    node = MappingDecodedNode({"level1": {"level2": {"ts": leaf}}})

    with pytest.raises(TypeMismatchError):
        navigate_to_timestamp(node, path)


def test_negative_int64_protobuf_leaf_raises_type_mismatch(event_classes) -> None:
    root = event_classes["Root"]()
    root.level1.level2.delta = -10

    with pytest.raises(TypeMismatchError):
        navigate_to_timestamp(ProtobufDecodedNode(root), parse_field_path("level1.level2.delta"))


@pytest.mark.parametrize("leaf_name", ["label", "status", "ratio"])
def test_non_integer_protobuf_leaf_raises_type_mismatch(event_classes, leaf_name: str) -> None:
    root = event_classes["Root"]()
    root.level1.level2.label = "x"

    with pytest.raises(TypeMismatchError):
        navigate_to_timestamp(
            ProtobufDecodedNode(root), parse_field_path(f"level1.level2.{leaf_name}")
        )


def test_message_field_as_leaf_raises_type_mismatch(event_classes) -> None:
    root = ProtobufDecodedNode(event_classes["Root"]())

    with pytest.raises(TypeMismatchError):
        navigate_to_timestamp(root, parse_field_path("level1"))
