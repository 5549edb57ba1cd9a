"""Time partitioning exports."""

from .time_partitions import DEFAULT_PARTITION_PREFIX, SUPPORTED_GRANULARITIES, partition_path

__all__ = ["DEFAULT_PARTITION_PREFIX", "SUPPORTED_GRANULARITIES", "partition_path"]
