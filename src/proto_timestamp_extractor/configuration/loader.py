"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from proto_timestamp_extractor.field_navigation.field_path import (
    DEFAULT_SEPARATOR,
    FieldPathError,
    parse_field_path,
)
from proto_timestamp_extractor.partitioning.time_partitions import (
    DEFAULT_PARTITION_PREFIX,
    SUPPORTED_GRANULARITIES,
)
from proto_timestamp_extractor.timestamp_conversion.millisecond_converters import (
    SUPPORTED_TIME_UNITS,
)

from .runtime_settings import Configuration, ExtractorSettings, KafkaSettings, PartitioningSettings


class ConfigurationError(Exception):
    """Raised when the configuration file or extractor settings are invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    extractor = _parse_extractor_section(parsed.get("extractor"))
    partitioning = _parse_partitioning_section(parsed.get("partitioning"))
    kafka_section = parsed.get("kafka")
    kafka = None if kafka_section is None else _parse_kafka_section(kafka_section)

    return Configuration(path=path, extractor=extractor, partitioning=partitioning, kafka=kafka)


def _parse_extractor_section(value: Any) -> ExtractorSettings:
    section = _optional_mapping(value, "extractor")
    message_class = _optional_string(section.get("message_class"), "extractor.message_class")
    timestamp_field = _optional_string(
        section.get("timestamp_field"), "extractor.timestamp_field"
    )
    separator = section.get("timestamp_separator")
    if separator is None or separator == "":
        separator = DEFAULT_SEPARATOR
    if not isinstance(separator, str):
        raise ConfigurationError("extractor.timestamp_separator must be a string.")
    timestamp_unit = _require_choice(
        section.get("timestamp_unit", "auto"), "extractor.timestamp_unit", SUPPORTED_TIME_UNITS
    )
    strict = section.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigurationError("extractor.strict must be a boolean.")

    if message_class is not None:
        if timestamp_field is None:
            raise ConfigurationError(
                "extractor.timestamp_field is required when extractor.message_class is set."
            )
        try:
            parse_field_path(timestamp_field, separator)
        except FieldPathError as exc:
            raise ConfigurationError(f"extractor.timestamp_field is invalid: {exc}") from exc

    return ExtractorSettings(
        message_class=message_class,
        timestamp_field=timestamp_field,
        timestamp_separator=separator,
        timestamp_unit=timestamp_unit,
        strict=strict,
    )


def _parse_partitioning_section(value: Any) -> PartitioningSettings:
    section = _optional_mapping(value, "partitioning")
    granularity = _require_choice(
        section.get("granularity", "daily"), "partitioning.granularity", SUPPORTED_GRANULARITIES
    )
    prefix = _require_non_empty_string(
        section.get("prefix", DEFAULT_PARTITION_PREFIX), "partitioning.prefix"
    )
    return PartitioningSettings(granularity=granularity, prefix=prefix)


def _parse_kafka_section(value: Any) -> KafkaSettings:
    section = _require_mapping(value, "kafka")
    bootstrap_servers = _normalize_bootstrap_servers(section.get("bootstrap_servers"))
    topic = _require_non_empty_string(section.get("topic"), "kafka.topic")
    group_id = _optional_string(section.get("group_id"), "kafka.group_id")
    security = section.get("security") or {}
    if not isinstance(security, Mapping):
        raise ConfigurationError("kafka.security must be a mapping.")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "kafka.timeout_seconds"
    )
    poll_interval_ms = _require_positive_int(
        section.get("poll_interval_ms", 500), "kafka.poll_interval_ms"
    )
    auto_offset_reset = _require_non_empty_string(
        section.get("auto_offset_reset", "earliest"), "kafka.auto_offset_reset"
    ).lower()
    return KafkaSettings(
        bootstrap_servers=bootstrap_servers,
        topic=topic,
        group_id=group_id,
        security=dict(security),
        timeout_seconds=timeout_seconds,
        poll_interval_ms=poll_interval_ms,
        auto_offset_reset=auto_offset_reset,
    )


def _normalize_bootstrap_servers(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("kafka.bootstrap_servers is required.")
    servers: list[str] = []
    if isinstance(value, str):
        servers = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("kafka.bootstrap_servers entries must be strings.")
            stripped = item.strip()
            if stripped:
                servers.append(stripped)
    else:
        raise ConfigurationError("kafka.bootstrap_servers must be a string or list of strings.")
    if not servers:
        raise ConfigurationError("kafka.bootstrap_servers must contain at least one server.")
    return tuple(servers)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_choice(value: Any, field_name: str, choices: Sequence[str]) -> str:
    normalized = _require_non_empty_string(value, field_name).lower()
    if normalized not in choices:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(choices)}.")
    return normalized


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
