"""Time partition path tests."""

from __future__ import annotations

import pytest
from proto_timestamp_extractor.partitioning import partition_path

# 2024-05-01T13:26:40.123Z
_MILLIS = 1_714_570_000_123


def test_daily_partition_is_default() -> None:
    assert partition_path(_MILLIS) == "dt=2024-05-01"


def test_hourly_partition_appends_hour() -> None:
    assert partition_path(_MILLIS, "hourly") == "dt=2024-05-01/hr=13"


def test_custom_prefix() -> None:
    assert partition_path(0, "daily", "day") == "day=1970-01-01"


def test_last_millisecond_of_hour_stays_in_that_hour() -> None:
    assert partition_path(1_714_575_599_999, "hourly") == "dt=2024-05-01/hr=14"


def test_unknown_granularity_raises() -> None:
    with pytest.raises(ValueError, match="weekly"):
        partition_path(_MILLIS, "weekly")


def test_out_of_range_timestamp_raises_value_error() -> None:
    with pytest.raises(ValueError, match="outside the supported date range"):
        partition_path(2**64 - 1)
