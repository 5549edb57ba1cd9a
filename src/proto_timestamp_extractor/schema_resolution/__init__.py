"""Schema resolution exports."""

from .resolution_outcomes import (
    DecodeCapability,
    DecoderResolution,
    ResolutionFailure,
    ResolvedDecoder,
    SchemaResolutionError,
)
from .schema_resolver import BUILTIN_DECODERS, SchemaResolver, json_decoder, protobuf_decoder

__all__ = [
    "BUILTIN_DECODERS",
    "DecodeCapability",
    "DecoderResolution",
    "ResolutionFailure",
    "ResolvedDecoder",
    "SchemaResolutionError",
    "SchemaResolver",
    "json_decoder",
    "protobuf_decoder",
]
