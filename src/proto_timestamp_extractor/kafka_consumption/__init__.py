"""Kafka consumption exports."""

from .extracted_records import ExtractedRecord
from .record_timestamp_reader import KafkaConsumerProtocol, KafkaReadError, RecordTimestampReader

__all__ = ["ExtractedRecord", "KafkaConsumerProtocol", "KafkaReadError", "RecordTimestampReader"]
