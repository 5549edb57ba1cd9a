"""Kafka consumer wrapper that extracts a timestamp per record."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol, cast

from confluent_kafka import Consumer, KafkaError

from proto_timestamp_extractor.configuration.runtime_settings import KafkaSettings
from proto_timestamp_extractor.extraction.extraction_modes import Message
from proto_timestamp_extractor.extraction.timestamp_extractor import TimestampExtractor
from proto_timestamp_extractor.extraction_errors import DecodeError, ExtractionError

from .extracted_records import ExtractedRecord

_KAFKA_CLIENT_LOGGER = logging.getLogger("proto_timestamp_extractor.kafka.client")
_KAFKA_CLIENT_LOGGER.addHandler(logging.NullHandler())
_KAFKA_CLIENT_LOGGER.propagate = False
_KAFKA_CLIENT_LOGGER.setLevel(logging.CRITICAL + 1)

logger = logging.getLogger(__name__)


class KafkaReadError(Exception):
    """Raised when the broker reports an error other than partition EOF."""


class KafkaConsumerProtocol(Protocol):
    """Protocol implemented by both real and fake consumers."""

    def subscribe(
        self,
        topics: list[str],
        on_assign: Any = None,
        on_revoke: Any = None,
        on_lost: Any = None,
    ) -> None: ...

    def poll(self, timeout: float) -> _KafkaRawMessage | None: ...

    def close(self) -> None: ...


class _KafkaRawMessage(Protocol):
    """Subset of Kafka message API required by the reader."""

    def error(self) -> Any: ...

    def topic(self) -> str | None: ...

    def partition(self) -> int | None: ...

    def offset(self) -> int | None: ...

    def value(self) -> bytes | None: ...


class RecordTimestampReader:
    """Consume a topic and extract one timestamp per record.

    An extraction failure is reported on its own record and never stops the
    stream.
    """

    def __init__(
        self,
        kafka_settings: KafkaSettings,
        extractor: TimestampExtractor,
        consumer: KafkaConsumerProtocol | None = None,
    ) -> None:
        self._settings = kafka_settings
        self._extractor = extractor
        self._consumer = consumer or self._create_consumer()

    def read(self, max_messages: int | None = None) -> Iterator[ExtractedRecord]:
        """Yield records until ``max_messages`` were seen or the timeout elapsed."""
        self._consumer.subscribe([self._settings.topic])
        end_time = datetime.now(UTC) + timedelta(seconds=self._settings.timeout_seconds)
        seen = 0
        try:
            while datetime.now(UTC) < end_time:
                if max_messages is not None and seen >= max_messages:
                    break
                raw = self._consumer.poll(timeout=self._settings.poll_interval_ms / 1000.0)
                if raw is None:
                    continue
                if raw.error():
                    partition_eof_code = getattr(KafkaError, "_PARTITION_EOF", None)
                    if partition_eof_code is not None and raw.error().code() == partition_eof_code:
                        continue
                    raise KafkaReadError(f"Kafka error: {raw.error()}")
                seen += 1
                yield self._extract(raw)
        finally:
            self._consumer.close()

    def _extract(self, raw: _KafkaRawMessage) -> ExtractedRecord:
        payload = raw.value()
        message = Message(
            payload=b"" if payload is None else bytes(payload),
            topic=raw.topic(),
            kafka_partition=raw.partition(),
            offset=raw.offset(),
        )
        if payload is None:
            return ExtractedRecord(
                message=message,
                timestamp_millis=None,
                error=DecodeError("Received empty message payload."),
            )
        try:
            timestamp_millis = self._extractor.extract_timestamp_millis(message)
        except ExtractionError as exc:
            logger.debug(
                "Timestamp extraction failed for %s[%s]@%s: %s",
                message.topic,
                message.kafka_partition,
                message.offset,
                exc,
            )
            return ExtractedRecord(message=message, timestamp_millis=None, error=exc)
        return ExtractedRecord(message=message, timestamp_millis=timestamp_millis, error=None)

    def _create_consumer(self) -> KafkaConsumerProtocol:
        config: dict[str, str | int | float | bool | None] = {
            "bootstrap.servers": ",".join(self._settings.bootstrap_servers),
            "group.id": self._settings.group_id or "proto-timestamp-extractor",
            "enable.auto.commit": False,
            "auto.offset.reset": self._settings.auto_offset_reset,
        }
        for key, value in self._settings.security.items():
            if isinstance(value, str | int | float | bool) or value is None:
                config[key] = value
        try:
            return cast(
                KafkaConsumerProtocol,
                Consumer(config, logger=_KAFKA_CLIENT_LOGGER),  # type: ignore[call-arg]
            )
        except TypeError:
            # Older/mock Consumer implementations may not support the logger kwarg.
            return cast(KafkaConsumerProtocol, Consumer(config))
