"""Map extracted timestamps to output partition paths."""

from __future__ import annotations

from datetime import UTC, datetime

DEFAULT_PARTITION_PREFIX = "dt"
SUPPORTED_GRANULARITIES = ("daily", "hourly")


def partition_path(
    timestamp_millis: int, granularity: str = "daily", prefix: str = DEFAULT_PARTITION_PREFIX
) -> str:
    """Return the UTC partition path for a timestamp, e.g. ``dt=2024-05-01/hr=13``."""
    if granularity not in SUPPORTED_GRANULARITIES:
        raise ValueError(
            f"Unsupported partition granularity '{granularity}'. Expected one of: "
            f"{', '.join(SUPPORTED_GRANULARITIES)}."
        )
    try:
        moment = datetime.fromtimestamp(timestamp_millis // 1000, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(
            f"Timestamp {timestamp_millis} ms is outside the supported date range."
        ) from exc
    day_segment = f"{prefix}={moment:%Y-%m-%d}"
    if granularity == "hourly":
        return f"{day_segment}/hr={moment:%H}"
    return day_segment
