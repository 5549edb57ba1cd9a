"""Millisecond conversion exports."""

from .millisecond_converters import (
    SUPPORTED_TIME_UNITS,
    MillisConverter,
    auto_scaled_millis,
    converter_for_unit,
)

__all__ = ["SUPPORTED_TIME_UNITS", "MillisConverter", "auto_scaled_millis", "converter_for_unit"]
