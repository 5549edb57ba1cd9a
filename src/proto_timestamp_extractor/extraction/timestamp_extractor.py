"""Protobuf message timestamp extractor.

Without a message class the very first field of every payload is assumed to
be the timestamp, encoded as a uint64 varint. With a message class the payload
is fully decoded and the configured field path leads to the timestamp field.
"""

from __future__ import annotations

import logging

from proto_timestamp_extractor.configuration.loader import ConfigurationError
from proto_timestamp_extractor.configuration.runtime_settings import ExtractorSettings
from proto_timestamp_extractor.field_navigation.field_path import (
    FieldPathError,
    parse_field_path,
)
from proto_timestamp_extractor.field_navigation.path_navigator import navigate_to_timestamp
from proto_timestamp_extractor.schema_resolution.resolution_outcomes import ResolutionFailure
from proto_timestamp_extractor.schema_resolution.schema_resolver import SchemaResolver
from proto_timestamp_extractor.timestamp_conversion.millisecond_converters import (
    MillisConverter,
    auto_scaled_millis,
    converter_for_unit,
)
from proto_timestamp_extractor.wire_decoding.varint_reader import VarintReader
from proto_timestamp_extractor.wire_decoding.wire_skipper import skip_field_tag

from .extraction_modes import ExtractionMode, Message, RawFallback, SchemaGuided

logger = logging.getLogger(__name__)


class TimestampExtractor:
    """Extract epoch-millisecond timestamps from serialized protobuf messages.

    The extraction mode is chosen once here. An unresolvable ``schema_class_id``
    is logged and degrades to the first-field varint mode, unless ``strict`` is
    set, in which case the ConfigurationError is raised.
    """

    def __init__(
        self,
        schema_class_id: str | None = None,
        field_path: str | None = None,
        separator: str | None = None,
        *,
        to_millis: MillisConverter = auto_scaled_millis,
        resolver: SchemaResolver | None = None,
        strict: bool = False,
    ) -> None:
        self._to_millis = to_millis
        self._mode = _select_mode(
            schema_class_id,
            field_path,
            separator,
            resolver=resolver or SchemaResolver(),
            strict=strict,
        )

    @property
    def mode(self) -> ExtractionMode:
        return self._mode

    def extract_timestamp_millis(self, message: Message) -> int:
        """Return the message timestamp in epoch milliseconds.

        Raises:
          DecodeError: If the payload bytes are malformed, truncated or overflow.
          FieldNotFoundError: If a field path step does not exist.
          TypeMismatchError: If the timestamp field is not an unsigned 64-bit integer.
        """
        mode = self._mode
        if isinstance(mode, SchemaGuided):
            decoded = mode.decode(message.payload)
            raw_value = navigate_to_timestamp(decoded, mode.path)
        else:
            raw_value = _read_first_field_varint(message.payload)
        return self._to_millis(raw_value)


def create_timestamp_extractor(
    settings: ExtractorSettings, *, resolver: SchemaResolver | None = None
) -> TimestampExtractor:
    """Build an extractor from loaded configuration settings."""
    try:
        to_millis = converter_for_unit(settings.timestamp_unit)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    return TimestampExtractor(
        settings.message_class,
        settings.timestamp_field,
        settings.timestamp_separator,
        to_millis=to_millis,
        resolver=resolver,
        strict=settings.strict,
    )


def _select_mode(
    schema_class_id: str | None,
    field_path: str | None,
    separator: str | None,
    *,
    resolver: SchemaResolver,
    strict: bool,
) -> ExtractionMode:
    if not schema_class_id:
        logger.info("No protobuf message class configured, reading the first field as timestamp.")
        return RawFallback()

    resolution = resolver.resolve(schema_class_id)
    if isinstance(resolution, ResolutionFailure):
        if strict:
            raise resolution.error
        logger.error(
            "Unable to resolve protobuf message class %s, falling back to the first field.",
            schema_class_id,
            exc_info=resolution.error,
        )
        return RawFallback()

    try:
        path = parse_field_path(field_path, separator)
    except FieldPathError as exc:
        raise ConfigurationError(str(exc)) from exc
    logger.info(
        "Using protobuf timestamp field path: %s with separator: %s", field_path, path.separator
    )
    return SchemaGuided(decode=resolution.decode, path=path)


def _read_first_field_varint(payload: bytes) -> int:
    # Field number and wire type of the leading tag are assumed, not checked.
    reader = VarintReader(payload)
    skip_field_tag(reader)
    return reader.read_uint64()
