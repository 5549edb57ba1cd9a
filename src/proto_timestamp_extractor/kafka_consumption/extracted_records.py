"""Kafka consumption entities."""

from __future__ import annotations

from dataclasses import dataclass

from proto_timestamp_extractor.extraction.extraction_modes import Message
from proto_timestamp_extractor.extraction_errors import ExtractionError


@dataclass(frozen=True)
class ExtractedRecord:
    """Extraction outcome for one consumed record."""

    message: Message
    timestamp_millis: int | None
    error: ExtractionError | None

    @property
    def ok(self) -> bool:
        return self.error is None
