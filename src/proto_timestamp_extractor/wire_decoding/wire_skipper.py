"""Field tag skipping for the schema-less extraction mode."""

from __future__ import annotations

from .varint_reader import VarintReader


def skip_field_tag(reader: VarintReader) -> None:
    """Consume the leading field tag so the reader sits on the field value.

    Field number and wire type are not checked, and no length-delimited or
    group value is skipped: the caller assumes the first field is a varint.
    """
    reader.read_uint64()
