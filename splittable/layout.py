"""Row containers and the flexible_row convenience.

The alignment options on a Row are carried through untouched for the
rendering layer; nothing here interprets them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from splittable.config import DEFAULT_SPLIT_WIDTH, trigger_from_options
from splittable.engine import RowPartitioner
from splittable.protocols import Item, KindFn, SplitPolicy


class MainAxisAlignment(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space_between"
    SPACE_AROUND = "space_around"
    SPACE_EVENLY = "space_evenly"


class MainAxisSize(str, Enum):
    MIN = "min"
    MAX = "max"


class CrossAxisAlignment(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    STRETCH = "stretch"
    BASELINE = "baseline"


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class VerticalDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class TextBaseline(str, Enum):
    ALPHABETIC = "alphabetic"
    IDEOGRAPHIC = "ideographic"


@dataclass(frozen=True)
class RowOptions:
    """Standard row arguments passed on to every produced row."""

    main_axis_alignment: MainAxisAlignment = MainAxisAlignment.START
    main_axis_size: MainAxisSize = MainAxisSize.MAX
    cross_axis_alignment: CrossAxisAlignment = CrossAxisAlignment.CENTER
    text_direction: TextDirection | None = None
    vertical_direction: VerticalDirection = VerticalDirection.DOWN
    text_baseline: TextBaseline | None = None


@dataclass
class Row:
    """One horizontal row of items ready for rendering."""

    children: list[Item]
    options: RowOptions = field(default_factory=RowOptions)

    def __len__(self) -> int:
        return len(self.children)


def flexible_row(
    children: Sequence[Item],
    width: float,
    *,
    split_on: Any = None,
    split_every_n: int | None = None,
    split_at_indices: Iterable[int] | None = None,
    split_at_indices_by_width: Mapping[float, Iterable[int]] | None = None,
    policy: SplitPolicy = SplitPolicy.EXCLUDE,
    force_split: bool | None = None,
    split_width: float = DEFAULT_SPLIT_WIDTH,
    kind_of: KindFn | None = None,
    options: RowOptions | None = None,
) -> list[Row]:
    """Lay out ``children`` as one row, or several rows on a narrow container.

    Example splitting on spacer items and dropping them:

        rows = flexible_row(children, width=420, split_on="spacer")

    Example with a width table, where 480 picks the 500 entry:

        rows = flexible_row(
            children,
            width=480,
            split_at_indices_by_width={500: [1, 3], 600: [2, 4]},
            policy=SplitPolicy.INCLUDE_IN_CURRENT,
        )

    Returns:
        One Row per row group, all sharing ``options``

    Raises:
        ConfigError: If the split options are missing or conflicting
    """
    trigger = trigger_from_options(
        split_on=split_on,
        split_every_n=split_every_n,
        split_at_indices=split_at_indices,
        split_at_indices_by_width=split_at_indices_by_width,
        kind_of=kind_of,
    )
    options = options or RowOptions()
    partitioner = RowPartitioner(split_width)
    groups = partitioner.partition_for_width(
        children, trigger, width, policy=policy, force_split=force_split
    )
    return [Row(children=group, options=options) for group in groups]
