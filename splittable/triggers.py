"""Split trigger matching and width-table resolution."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from splittable.config import ConfigError
from splittable.protocols import (
    TRIGGER_TYPES,
    ByIndices,
    ByStride,
    ByType,
    ByWidthTable,
    Item,
    SplitTrigger,
)


def validate_trigger(trigger: SplitTrigger) -> None:
    """Check a trigger before any items are scanned.

    Args:
        trigger: The trigger to check

    Raises:
        ConfigError: If the trigger is not a known form or is malformed
    """
    if not isinstance(trigger, TRIGGER_TYPES):
        raise ConfigError(
            f"Unsupported split trigger: {trigger!r}. "
            "Expected ByType, ByStride, ByIndices or ByWidthTable"
        )

    if isinstance(trigger, ByStride):
        if not _is_int(trigger.n):
            raise ConfigError(
                f"split_every_n must be an integer, got {trigger.n!r}",
                option="split_every_n",
            )
        if trigger.n < 1:
            raise ConfigError(
                f"split_every_n must be >= 1, got {trigger.n}",
                option="split_every_n",
            )
    elif isinstance(trigger, ByIndices):
        _check_indices(trigger.indices, "split_at_indices")
    elif isinstance(trigger, ByWidthTable):
        for width, indices in trigger.table.items():
            if isinstance(width, bool) or not isinstance(width, (int, float)):
                raise ConfigError(
                    f"Width-table keys must be numbers, got {width!r}",
                    option="split_at_indices_by_width",
                )
            _check_indices(indices, "split_at_indices_by_width")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_indices(indices: Iterable[int], option: str) -> None:
    for index in indices:
        if not _is_int(index):
            raise ConfigError(
                f"Split indices must be integers, got {index!r}", option=option
            )


def matches(trigger: ByType | ByStride | ByIndices, item: Item, position: int) -> bool:
    """Check whether the item at ``position`` is a split point.

    Args:
        trigger: A resolved (non-table) trigger
        item: The item being scanned
        position: 0-based position of the item

    Returns:
        True if the row should split on this item
    """
    if isinstance(trigger, ByType):
        return trigger.kind_of(item) == trigger.kind
    if isinstance(trigger, ByStride):
        return (position + 1) % trigger.n == 0
    return position in trigger.indices


def resolve_width_table(
    table: Mapping[float, frozenset[int]],
    width: float,
) -> tuple[float, frozenset[int]] | None:
    """Find the width-table entry that applies at ``width``.

    Keys are scanned in ascending order and the first key with
    ``width <= key`` wins.

    Returns:
        The winning ``(key, indices)`` pair, or None when ``width`` is
        larger than every key
    """
    for key in sorted(table):
        if width <= key:
            return key, table[key]
    return None
