"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for proto-timestamp-extractor.
# Without extractor.message_class the timestamp is read from the first field
# of every payload as a raw uint64 varint.

extractor:
  # Importable protobuf message class (module.path.MessageName) or registered decoder name.
  # message_class: "my_events_pb2.Event"
  # Field path to the timestamp inside the decoded message.
  # timestamp_field: "header.created_at"
  timestamp_separator: "."
  # One of: auto, seconds, milliseconds, microseconds, nanoseconds.
  timestamp_unit: "auto"
  # Fail instead of falling back to the first-field varint when message_class cannot be resolved.
  strict: false

partitioning:
  # One of: daily, hourly.
  granularity: "daily"
  prefix: "dt"

# The kafka section is only needed by the scan command.
# kafka:
#   bootstrap_servers:
#     - "localhost:9092"
#   topic: "events"
#   group_id: "proto-timestamp-extractor"
#   security:
#     security.protocol: "SASL_SSL"
#   timeout_seconds: 30
#   poll_interval_ms: 500
#   auto_offset_reset: "earliest"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
