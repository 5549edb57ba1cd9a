"""Base-128 varint reader over raw protobuf wire bytes."""

from __future__ import annotations

from proto_timestamp_extractor.extraction_errors import DecodeError

MAX_VARINT_BYTES = 10
_LAST_BYTE_VALUE_MASK = 0x01


class VarintReader:
    """Byte cursor that decodes unsigned 64-bit varints."""

    def __init__(self, payload: bytes) -> None:
        self._data = payload
        self._offset = 0

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._offset

    def read_uint64(self) -> int:
        """Read one varint, least-significant 7-bit group first.

        Raises:
          DecodeError: If the payload ends before the final byte, or the value
            does not fit into 64 bits.
        """
        value = 0
        for index in range(MAX_VARINT_BYTES):
            byte = self._read_byte()
            if index == MAX_VARINT_BYTES - 1 and (byte & 0x7F) > _LAST_BYTE_VALUE_MASK:
                raise DecodeError("Varint overflows 64 bits.")
            value |= (byte & 0x7F) << (7 * index)
            if (byte & 0x80) == 0:
                return value
        raise DecodeError(f"Varint is longer than {MAX_VARINT_BYTES} bytes.")

    def _read_byte(self) -> int:
        if self._offset >= len(self._data):
            raise DecodeError(f"Truncated varint at byte offset {self._offset}.")
        byte = self._data[self._offset]
        self._offset += 1
        return byte
