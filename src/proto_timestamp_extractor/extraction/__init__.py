"""Timestamp extraction exports."""

from .extraction_modes import ExtractionMode, Message, RawFallback, SchemaGuided
from .timestamp_extractor import TimestampExtractor, create_timestamp_extractor

__all__ = [
    "ExtractionMode",
    "Message",
    "RawFallback",
    "SchemaGuided",
    "TimestampExtractor",
    "create_timestamp_extractor",
]
