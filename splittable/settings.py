"""
Pydantic settings model for row splitting.

Lets a split configuration live in YAML next to the layout that uses it:

    split_width: 600
    policy: include_in_next
    split_on: spacer
    row:
      main_axis_alignment: center
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from splittable.config import DEFAULT_SPLIT_WIDTH, ConfigError, trigger_from_options
from splittable.engine import RowPartitioner
from splittable.layout import Row, RowOptions
from splittable.protocols import Item, PartitionResult, SplitPolicy, SplitTrigger
from splittable.triggers import validate_trigger


class SplitSettings(BaseModel):
    """
    Complete split configuration for one row.

    Attributes:
        split_width: Rows split when the width is at most this value
        policy: What to do with the item a row is split on
        split_on: Kind of item to split on
        split_every_n: Split on every n-th item
        split_at_indices: 0-based positions to split on
        split_at_indices_by_width: Map of max width to positions to split on
        force_split: Overrides the split width when set
        row: Row options passed on to every produced row
    """

    model_config = ConfigDict(extra="forbid")

    split_width: float = DEFAULT_SPLIT_WIDTH
    policy: SplitPolicy = SplitPolicy.EXCLUDE
    split_on: str | None = None
    split_every_n: int | None = None
    split_at_indices: list[int] | None = None
    split_at_indices_by_width: dict[int, list[int]] | None = None
    force_split: bool | None = None
    row: RowOptions = RowOptions()

    @model_validator(mode="after")
    def _check_trigger(self) -> Self:
        validate_trigger(self.trigger())
        return self

    def trigger(self) -> SplitTrigger:
        """Build the split trigger described by these settings."""
        return trigger_from_options(
            split_on=self.split_on,
            split_every_n=self.split_every_n,
            split_at_indices=self.split_at_indices,
            split_at_indices_by_width=self.split_at_indices_by_width,
        )

    def partitioner(self) -> RowPartitioner:
        return RowPartitioner(self.split_width)

    def partition(self, items: Sequence[Item], width: float) -> PartitionResult:
        """Partition items at the given container width."""
        return self.partitioner().partition_for_width(
            items,
            self.trigger(),
            width,
            policy=self.policy,
            force_split=self.force_split,
        )

    def rows(self, items: Sequence[Item], width: float) -> list[Row]:
        """Partition items and wrap each group in a Row."""
        return [
            Row(children=group, options=self.row)
            for group in self.partition(items, width)
        ]

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """Load settings from YAML text."""
        try:
            data = yaml.safe_load(yaml_text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid split settings YAML: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> Self:
        """Load settings from a YAML file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_yaml(f.read())

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Validate a plain mapping, reporting every problem as ConfigError."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Split settings must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid split settings: {e}") from e
