"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExtractorSettings:
    """Timestamp extraction settings consumed once at extractor construction."""

    message_class: str | None
    timestamp_field: str | None
    timestamp_separator: str
    timestamp_unit: str
    strict: bool


@dataclass(frozen=True)
class PartitioningSettings:
    """Time bucket layout derived from extracted timestamps."""

    granularity: str
    prefix: str


@dataclass(frozen=True)
class KafkaSettings:
    """Kafka consumer configuration."""

    bootstrap_servers: tuple[str, ...]
    topic: str
    group_id: str | None
    security: Mapping[str, object]
    timeout_seconds: int
    poll_interval_ms: int
    auto_offset_reset: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    extractor: ExtractorSettings
    partitioning: PartitioningSettings
    kafka: KafkaSettings | None
