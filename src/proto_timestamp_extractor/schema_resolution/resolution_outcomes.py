"""Schema resolution entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from proto_timestamp_extractor.configuration.loader import ConfigurationError
from proto_timestamp_extractor.field_navigation.decoded_nodes import DecodedNode

DecodeCapability = Callable[[bytes], DecodedNode]


class SchemaResolutionError(ConfigurationError):
    """Raised when a schema identifier cannot be turned into a decoder."""


@dataclass(frozen=True)
class ResolvedDecoder:
    """Decode capability found for a schema identifier."""

    identifier: str
    decode: DecodeCapability


@dataclass(frozen=True)
class ResolutionFailure:
    """Reason a schema identifier could not be resolved."""

    identifier: str
    error: SchemaResolutionError


DecoderResolution = ResolvedDecoder | ResolutionFailure
