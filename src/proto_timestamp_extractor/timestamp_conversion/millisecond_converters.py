"""Raw epoch value to epoch-millisecond converters."""

from __future__ import annotations

from collections.abc import Callable

MillisConverter = Callable[[int], int]

SUPPORTED_TIME_UNITS = ("auto", "seconds", "milliseconds", "microseconds", "nanoseconds")

_NANOSECOND_FLOOR = 10**18
_MICROSECOND_FLOOR = 10**15
_MILLISECOND_FLOOR = 10**12


def auto_scaled_millis(raw_value: int) -> int:
    """Guess the unit from the magnitude of ``raw_value`` and scale to milliseconds.

    Values below 10**12 are treated as seconds, which covers epochs up to the
    year 33658.
    """
    if raw_value >= _NANOSECOND_FLOOR:
        return raw_value // 10**6
    if raw_value >= _MICROSECOND_FLOOR:
        return raw_value // 10**3
    if raw_value >= _MILLISECOND_FLOOR:
        return raw_value
    return raw_value * 1000


def _seconds_to_millis(raw_value: int) -> int:
    return raw_value * 1000


def _millis_to_millis(raw_value: int) -> int:
    return raw_value


def _micros_to_millis(raw_value: int) -> int:
    return raw_value // 10**3


def _nanos_to_millis(raw_value: int) -> int:
    return raw_value // 10**6


_CONVERTERS: dict[str, MillisConverter] = {
    "auto": auto_scaled_millis,
    "seconds": _seconds_to_millis,
    "milliseconds": _millis_to_millis,
    "microseconds": _micros_to_millis,
    "nanoseconds": _nanos_to_millis,
}


def converter_for_unit(unit: str) -> MillisConverter:
    """Return the converter registered for ``unit``.

    Raises:
      ValueError: If the unit is not one of SUPPORTED_TIME_UNITS.
    """
    try:
        return _CONVERTERS[unit.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unsupported timestamp unit '{unit}'. Expected one of: "
            f"{', '.join(SUPPORTED_TIME_UNITS)}."
        ) from exc
