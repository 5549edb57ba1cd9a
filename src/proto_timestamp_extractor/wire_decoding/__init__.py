"""Protobuf wire-format decoding exports."""

from .varint_reader import MAX_VARINT_BYTES, VarintReader
from .wire_skipper import skip_field_tag

__all__ = ["MAX_VARINT_BYTES", "VarintReader", "skip_field_tag"]
