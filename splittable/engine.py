"""Row partitioner that groups items into rows at split points."""

from __future__ import annotations

from collections.abc import Sequence

from splittable.config import DEFAULT_SPLIT_WIDTH, ConfigError
from splittable.logging_config import logger
from splittable.protocols import (
    ByIndices,
    ByWidthTable,
    Item,
    PartitionResult,
    RowGroup,
    SplitDecision,
    SplitPolicy,
    SplitTrigger,
)
from splittable.triggers import matches, resolve_width_table, validate_trigger

__all__ = ["ConfigError", "RowPartitioner", "partition"]


class RowPartitioner:
    """Partitioner for splitting a row of items into several rows.

    Holds only the split width threshold; every call is independent and
    never mutates the items it is given.
    """

    def __init__(self, split_width: float = DEFAULT_SPLIT_WIDTH) -> None:
        """Initialize the partitioner.

        Args:
            split_width: Rows split when the width is at most this value
        """
        self.split_width = split_width

    def will_split(self, width: float) -> bool:
        """Return True if a row of the given width splits by default."""
        return width <= self.split_width

    def resolve(
        self,
        trigger: SplitTrigger,
        width: float,
        force_split: bool | None = None,
    ) -> SplitDecision:
        """Decide whether a row splits at ``width`` and with which trigger.

        A width table decides on its own, ignoring ``force_split`` and the
        split width. Any other trigger splits when ``force_split`` says so
        or, if it is None, when ``width`` is at most the split width.

        Args:
            trigger: The configured trigger
            width: Measured container width
            force_split: Override for the width threshold

        Returns:
            The split decision, with width tables resolved to indices

        Raises:
            ConfigError: If the trigger is malformed
        """
        validate_trigger(trigger)

        if isinstance(trigger, ByWidthTable):
            entry = resolve_width_table(trigger.table, width)
            if entry is None:
                logger.debug(f"width {width} exceeds every width-table key, no split")
                return SplitDecision(trigger=ByIndices(()), splitting=False)
            key, indices = entry
            logger.debug(f"width {width} selects width-table key {key}")
            return SplitDecision(
                trigger=ByIndices(indices), splitting=True, width_key=key
            )

        splitting = force_split if force_split is not None else self.will_split(width)
        return SplitDecision(trigger=trigger, splitting=splitting)

    def partition(
        self,
        items: Sequence[Item],
        trigger: SplitTrigger,
        policy: SplitPolicy = SplitPolicy.EXCLUDE,
        splitting: bool = True,
    ) -> PartitionResult:
        """Split items into row groups.

        Args:
            items: The items of the row, in order
            trigger: Which items are split points
            policy: What to do with a split point item
            splitting: When False, return all items as one row

        Returns:
            Row groups in order; never empty

        Raises:
            ConfigError: If the configuration is invalid
        """
        validate_trigger(trigger)
        policy = _coerce_policy(policy)

        if not splitting:
            return [list(items)]

        if isinstance(trigger, ByWidthTable):
            raise ConfigError(
                "A width table must be resolved against a width before "
                "partitioning; use partition_for_width()",
                option="split_at_indices_by_width",
            )

        rows: PartitionResult = []
        current: RowGroup = []

        with logger.indent_block(f"partitioning {len(items)} items ({policy.value})"):
            for position, item in enumerate(items):
                if not matches(trigger, item, position):
                    current.append(item)
                    continue

                if policy is SplitPolicy.INCLUDE_IN_CURRENT:
                    current.append(item)
                # Interior rows are kept even when empty
                rows.append(current)
                logger.debug(f"row {len(rows)} closed at position {position}")
                current = []
                if policy is SplitPolicy.INCLUDE_IN_NEXT:
                    current.append(item)

            if current:
                rows.append(current)

            if not rows:
                rows.append([])

            logger.debug(f"{len(rows)} rows")

        return rows

    def partition_for_width(
        self,
        items: Sequence[Item],
        trigger: SplitTrigger,
        width: float,
        policy: SplitPolicy = SplitPolicy.EXCLUDE,
        force_split: bool | None = None,
    ) -> PartitionResult:
        """Resolve the split decision at ``width`` and partition items."""
        decision = self.resolve(trigger, width, force_split)
        return self.partition(items, decision.trigger, policy, decision.splitting)


def _coerce_policy(policy: SplitPolicy | str) -> SplitPolicy:
    try:
        return SplitPolicy(policy)
    except ValueError as e:
        choices = ", ".join(p.value for p in SplitPolicy)
        raise ConfigError(
            f"Invalid split policy: {policy!r}. Expected one of {choices}",
            option="policy",
        ) from e


_default = RowPartitioner()


def partition(
    items: Sequence[Item],
    trigger: SplitTrigger,
    policy: SplitPolicy = SplitPolicy.EXCLUDE,
    splitting: bool = True,
) -> PartitionResult:
    """Split items into row groups with a default partitioner."""
    return _default.partition(items, trigger, policy, splitting)
