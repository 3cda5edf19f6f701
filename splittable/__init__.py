"""Split a horizontal row of items into several rows on narrow containers.

Usage:
    from splittable import ByStride, SplitPolicy, partition

    partition(["a", "b", "c", "d", "e"], ByStride(2), SplitPolicy.EXCLUDE)
    # [["a"], ["c"], ["e"]]
"""

from splittable.config import DEFAULT_SPLIT_WIDTH, ConfigError, trigger_from_options
from splittable.engine import RowPartitioner, partition
from splittable.layout import (
    CrossAxisAlignment,
    MainAxisAlignment,
    MainAxisSize,
    Row,
    RowOptions,
    TextBaseline,
    TextDirection,
    VerticalDirection,
    flexible_row,
)
from splittable.protocols import (
    ByIndices,
    ByStride,
    ByType,
    ByWidthTable,
    PartitionResult,
    RowGroup,
    SplitDecision,
    SplitPolicy,
    SplitTrigger,
    default_kind,
)
from splittable.settings import SplitSettings
from splittable.triggers import resolve_width_table

__all__ = [
    "DEFAULT_SPLIT_WIDTH",
    "ConfigError",
    "trigger_from_options",
    "RowPartitioner",
    "partition",
    "Row",
    "RowOptions",
    "MainAxisAlignment",
    "MainAxisSize",
    "CrossAxisAlignment",
    "TextDirection",
    "VerticalDirection",
    "TextBaseline",
    "flexible_row",
    "ByType",
    "ByStride",
    "ByIndices",
    "ByWidthTable",
    "SplitTrigger",
    "SplitPolicy",
    "SplitDecision",
    "RowGroup",
    "PartitionResult",
    "default_kind",
    "SplitSettings",
    "resolve_width_table",
]
