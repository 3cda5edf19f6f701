"""Protocols and data structures for the row splitting system."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Union, runtime_checkable

Item = Any
"""An opaque row child. Only its kind is ever inspected."""

RowGroup = list[Item]
"""One contiguous run of items that will be rendered as a single row."""

PartitionResult = list[RowGroup]
"""Ordered row groups, always at least one."""

KindFn = Callable[[Item], Any]


@runtime_checkable
class HasKind(Protocol):
    """An item that advertises the kind used for type-based splitting."""

    @property
    def kind(self) -> Any:
        """Return the discriminant compared by ByType triggers."""
        ...


def default_kind(item: Item) -> Any:
    """Read the kind of an item.

    Looks at a ``kind`` attribute first, then a ``"kind"`` key for
    mappings. Items without either have no kind.
    """
    if isinstance(item, HasKind):
        return item.kind
    if isinstance(item, Mapping):
        return item.get("kind")
    return None


class SplitPolicy(str, Enum):
    """What happens to the item a row is split on."""

    EXCLUDE = "exclude"  # dropped from the output
    INCLUDE_IN_CURRENT = "include_in_current"  # last item of the closed row
    INCLUDE_IN_NEXT = "include_in_next"  # first item of the next row


@dataclass(frozen=True)
class ByType:
    """Split on every item whose kind equals ``kind``."""

    kind: Any
    """The kind that marks a split point."""

    kind_of: KindFn = field(default=default_kind, compare=False)
    """Function reading the kind of an item."""


@dataclass(frozen=True)
class ByStride:
    """Split on every ``n``-th item (1-based position a multiple of ``n``)."""

    n: int


@dataclass(frozen=True)
class ByIndices:
    """Split on the items at the given 0-based positions."""

    indices: frozenset[int]

    def __init__(self, indices: Iterable[int]) -> None:
        object.__setattr__(self, "indices", frozenset(indices))


@dataclass(frozen=True)
class ByWidthTable:
    """Pick split indices by container width.

    Keys are the largest width an entry applies to. The smallest key that
    is still >= the measured width wins; when the width exceeds every key
    no split takes place.
    """

    table: Mapping[float, frozenset[int]]

    def __init__(self, table: Mapping[float, Iterable[int]]) -> None:
        object.__setattr__(
            self,
            "table",
            {width: frozenset(indices) for width, indices in table.items()},
        )

    def __hash__(self) -> int:
        return hash(frozenset(self.table.items()))


SplitTrigger = Union[ByType, ByStride, ByIndices, ByWidthTable]

TRIGGER_TYPES: tuple[type, ...] = (ByType, ByStride, ByIndices, ByWidthTable)


@dataclass(frozen=True)
class SplitDecision:
    """Outcome of resolving whether and how a row splits at a given width."""

    trigger: ByType | ByStride | ByIndices
    """Trigger to scan with. Width tables are already resolved to indices."""

    splitting: bool
    """Whether the row is split at all."""

    width_key: float | None = None
    """Width-table key that selected the indices, if any."""
