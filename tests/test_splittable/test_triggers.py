"""Tests for split triggers."""

from dataclasses import dataclass

import pytest

from splittable import ByIndices, ByStride, ByType, ByWidthTable, ConfigError
from splittable.protocols import default_kind
from splittable.triggers import matches, resolve_width_table, validate_trigger


@dataclass
class Widget:
    name: str
    kind: str


class TestDefaultKind:
    """Tests for reading the kind of an item."""

    def test_reads_kind_attribute(self) -> None:
        assert default_kind(Widget("gap", "spacer")) == "spacer"

    def test_reads_kind_key(self) -> None:
        assert default_kind({"name": "gap", "kind": "spacer"}) == "spacer"

    def test_plain_values_have_no_kind(self) -> None:
        assert default_kind("gap") is None
        assert default_kind(3) is None


class TestMatches:
    """Tests for matching items against a trigger."""

    def test_by_type_matches_equal_kind(self) -> None:
        trigger = ByType("spacer")

        assert matches(trigger, Widget("gap", "spacer"), 0) is True
        assert matches(trigger, Widget("ok", "button"), 0) is False

    def test_by_type_ignores_items_without_kind(self) -> None:
        """A kind of None never matches a real kind."""
        assert matches(ByType("spacer"), "gap", 3) is False

    def test_by_stride_uses_one_based_positions(self) -> None:
        trigger = ByStride(3)

        result = [position for position in range(9) if matches(trigger, None, position)]

        assert result == [2, 5, 8]

    def test_by_indices_uses_zero_based_positions(self) -> None:
        trigger = ByIndices([0, 4])

        result = [position for position in range(6) if matches(trigger, None, position)]

        assert result == [0, 4]


class TestTriggerTypes:
    def test_indices_are_normalized_to_frozenset(self) -> None:
        assert ByIndices([3, 1, 3]).indices == frozenset({1, 3})

    def test_width_table_values_are_normalized(self) -> None:
        trigger = ByWidthTable({500: [1, 3], 600: (2, 4)})

        assert trigger.table == {500: frozenset({1, 3}), 600: frozenset({2, 4})}

    def test_triggers_compare_by_value(self) -> None:
        assert ByIndices([1, 3]) == ByIndices({3, 1})
        assert ByWidthTable({500: [1]}) == ByWidthTable({500: {1}})
        assert hash(ByWidthTable({500: [1]})) == hash(ByWidthTable({500: {1}}))

    def test_by_type_compares_by_kind(self) -> None:
        assert ByType("spacer") == ByType("spacer", kind_of=lambda item: item)


class TestValidateTrigger:
    def test_valid_triggers_pass(self) -> None:
        for trigger in (
            ByType("spacer"),
            ByStride(1),
            ByIndices([]),
            ByWidthTable({}),
            ByWidthTable({480.5: [1]}),
        ):
            validate_trigger(trigger)

    def test_stride_zero_rejected(self) -> None:
        with pytest.raises(ConfigError, match=">= 1"):
            validate_trigger(ByStride(0))

    @pytest.mark.parametrize("n", [2.0, "2", True])
    def test_stride_must_be_integer(self, n) -> None:
        with pytest.raises(ConfigError, match="must be an integer"):
            validate_trigger(ByStride(n))

    def test_indices_must_be_integers(self) -> None:
        with pytest.raises(ConfigError, match="must be integers") as exc:
            validate_trigger(ByIndices(["1"]))

        assert exc.value.option == "split_at_indices"

    def test_width_table_keys_must_be_numbers(self) -> None:
        with pytest.raises(ConfigError, match="keys must be numbers") as exc:
            validate_trigger(ByWidthTable({"narrow": [1]}))

        assert exc.value.option == "split_at_indices_by_width"

    def test_width_table_indices_must_be_integers(self) -> None:
        with pytest.raises(ConfigError, match="must be integers"):
            validate_trigger(ByWidthTable({500: [1.5]}))

    def test_unknown_trigger_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported split trigger"):
            validate_trigger({"split_every_n": 2})


class TestResolveWidthTable:
    """Tests for picking the width-table entry."""

    TABLE = {600: frozenset({2, 4}), 500: frozenset({1, 3})}

    @pytest.mark.parametrize(
        "width, expected",
        [
            (0, (500, frozenset({1, 3}))),
            (480, (500, frozenset({1, 3}))),
            (500, (500, frozenset({1, 3}))),
            (500.5, (600, frozenset({2, 4}))),
            (600, (600, frozenset({2, 4}))),
        ],
    )
    def test_first_ascending_key_not_below_width(self, width, expected) -> None:
        assert resolve_width_table(self.TABLE, width) == expected

    def test_width_beyond_every_key(self) -> None:
        """No fallback to the largest entry."""
        assert resolve_width_table(self.TABLE, 650) is None

    def test_empty_table(self) -> None:
        assert resolve_width_table({}, 100) is None
