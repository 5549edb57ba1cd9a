"""Timestamp extraction entities."""

from __future__ import annotations

from dataclasses import dataclass

from proto_timestamp_extractor.field_navigation.field_path import FieldPath
from proto_timestamp_extractor.schema_resolution.resolution_outcomes import DecodeCapability


@dataclass(frozen=True)
class Message:
    """Serialized record handed to the extractor.

    Kafka coordinates are carried for reporting and never read by extraction.
    """

    payload: bytes
    topic: str | None = None
    kafka_partition: int | None = None
    offset: int | None = None


@dataclass(frozen=True)
class SchemaGuided:
    """Decode the whole payload and walk ``path`` to the timestamp."""

    decode: DecodeCapability
    path: FieldPath


@dataclass(frozen=True)
class RawFallback:
    """Read the first field of the payload as a uint64 varint."""


ExtractionMode = SchemaGuided | RawFallback
