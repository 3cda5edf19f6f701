"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from splittable.cli import Cell, app, parse_indices, parse_table
from splittable.config import ConfigError

runner = CliRunner()


class TestParsing:
    def test_cell_with_kind(self) -> None:
        assert Cell.parse("gap:spacer") == Cell(label="gap", kind="spacer")

    def test_cell_without_kind(self) -> None:
        assert Cell.parse("bold") == Cell(label="bold")
        assert Cell.parse("bold:") == Cell(label="bold")

    def test_parse_indices(self) -> None:
        assert parse_indices("1, 3,") == [1, 3]

    def test_parse_indices_rejects_words(self) -> None:
        with pytest.raises(ConfigError, match="Invalid index list"):
            parse_indices("one")

    def test_parse_table(self) -> None:
        assert parse_table(["500=1,3", "600=2,4"]) == {500: [1, 3], 600: [2, 4]}

    def test_parse_table_requires_equals(self) -> None:
        with pytest.raises(ConfigError, match="Expected WIDTH=I,J"):
            parse_table(["500"])


class TestPartitionCommand:
    def test_split_every_n(self) -> None:
        result = runner.invoke(
            app, ["partition", "a", "b", "c", "d", "e", "--width", "480", "--every", "2"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["row 1: a", "row 2: c", "row 3: e"]

    def test_wide_container(self) -> None:
        result = runner.invoke(
            app, ["partition", "a", "b", "c", "--width", "900", "--every", "2"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["row 1: a b c"]

    def test_split_on_kind_include_in_next(self) -> None:
        result = runner.invoke(
            app,
            [
                "partition",
                "bold",
                "gap:spacer",
                "font",
                "--width",
                "320",
                "--split-on",
                "spacer",
                "--policy",
                "include_in_next",
            ],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["row 1: bold", "row 2: gap font"]

    def test_width_table(self) -> None:
        result = runner.invoke(
            app,
            [
                "partition",
                *"abcde",
                "--width",
                "550",
                "--table",
                "500=1,3",
                "--table",
                "600=2,4",
            ],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["row 1: a b", "row 2: d"]

    def test_force_split(self) -> None:
        result = runner.invoke(
            app, ["partition", "a", "b", "c", "--width", "900", "--at", "1", "--force"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["row 1: a", "row 2: c"]

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "split.yaml"
        config.write_text("split_every_n: 2\npolicy: include_in_current\n")

        result = runner.invoke(
            app, ["partition", *"abcde", "--width", "400", "--config", str(config)]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "row 1: a b",
            "row 2: c d",
            "row 3: e",
        ]

    def test_config_file_with_split_option(self, tmp_path: Path) -> None:
        config = tmp_path / "split.yaml"
        config.write_text("split_every_n: 2\n")

        result = runner.invoke(
            app,
            ["partition", "a", "--width", "400", "--config", str(config), "--at", "1"],
        )

        assert result.exit_code == 1
        assert "Use either --config or split options" in result.output

    def test_missing_split_option(self) -> None:
        result = runner.invoke(app, ["partition", "a", "b", "--width", "400"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Must supply either" in result.output

    def test_stride_zero(self) -> None:
        result = runner.invoke(
            app, ["partition", "a", "b", "--width", "400", "--every", "0"]
        )

        assert result.exit_code == 1
        assert ">= 1" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "splittable 0.1.0" in result.output
