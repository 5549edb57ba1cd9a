"""Wire tag skipping tests."""

from __future__ import annotations

import pytest
from proto_timestamp_extractor.extraction_errors import DecodeError
from proto_timestamp_extractor.wire_decoding import VarintReader, skip_field_tag


def test_skips_single_byte_tag() -> None:
    reader = VarintReader(b"\x08\x2a")

    skip_field_tag(reader)

    assert reader.position == 1
    assert reader.read_uint64() == 42


def test_skips_multi_byte_tag_for_high_field_numbers() -> None:
    # Field 16, wire type 0 -> tag 128 -> 0x80 0x01.
    reader = VarintReader(b"\x80\x01\x07")

    skip_field_tag(reader)

    assert reader.read_uint64() == 7


def test_does_not_validate_wire_type() -> None:
    # Field 1, wire type 2 (length-delimited): the length byte is read as the value.
    reader = VarintReader(b"\x0a\x03abc")

    skip_field_tag(reader)

    assert reader.read_uint64() == 3


def test_raises_when_tag_is_truncated() -> None:
    with pytest.raises(DecodeError):
        skip_field_tag(VarintReader(b"\x80"))
