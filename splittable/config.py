"""Shared configuration for row splitting."""

from collections.abc import Iterable, Mapping
from typing import Any

from splittable.protocols import (
    ByIndices,
    ByStride,
    ByType,
    ByWidthTable,
    KindFn,
    SplitTrigger,
    default_kind,
)

# Rows split when the container is at most this wide (a common narrow breakpoint)
DEFAULT_SPLIT_WIDTH = 500

TRIGGER_OPTIONS = (
    "split_on",
    "split_every_n",
    "split_at_indices",
    "split_at_indices_by_width",
)


class ConfigError(ValueError):
    """Raised for invalid or conflicting split configuration."""

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the problem
            option: Name of the offending option, if a single one is to blame
        """
        self.option = option
        super().__init__(message)


def trigger_from_options(
    split_on: Any = None,
    split_every_n: int | None = None,
    split_at_indices: Iterable[int] | None = None,
    split_at_indices_by_width: Mapping[float, Iterable[int]] | None = None,
    kind_of: KindFn | None = None,
) -> SplitTrigger:
    """Build a split trigger from keyword options.

    Exactly one of the options must be given.

    Args:
        split_on: Kind of item to split on
        split_every_n: Split on every n-th item
        split_at_indices: 0-based positions to split on
        split_at_indices_by_width: Map of max width to positions to split on
        kind_of: Custom kind reader used with ``split_on``

    Returns:
        The matching trigger

    Raises:
        ConfigError: If no option or more than one option is supplied
    """
    supplied = {
        name: value
        for name, value in zip(
            TRIGGER_OPTIONS,
            (split_on, split_every_n, split_at_indices, split_at_indices_by_width),
        )
        if value is not None
    }

    if not supplied:
        raise ConfigError(
            "Must supply either split_on, split_every_n, split_at_indices "
            "or split_at_indices_by_width"
        )
    if "split_at_indices" in supplied and "split_at_indices_by_width" in supplied:
        raise ConfigError(
            "Cannot supply both split_at_indices and split_at_indices_by_width",
            option="split_at_indices_by_width",
        )
    if len(supplied) > 1:
        raise ConfigError(
            f"Only one split option may be supplied, got: {', '.join(supplied)}"
        )

    if split_on is not None:
        return ByType(split_on, kind_of or default_kind)
    if split_every_n is not None:
        return ByStride(split_every_n)
    if split_at_indices is not None:
        return ByIndices(split_at_indices)
    assert split_at_indices_by_width is not None
    return ByWidthTable(split_at_indices_by_width)
