"""Command-line interface for splittable."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splittable.config import ConfigError
from splittable.logging_config import setup_logging
from splittable.protocols import SplitPolicy
from splittable.settings import SplitSettings

app = typer.Typer(
    name="splittable",
    help="Split a row of items into several rows on narrow containers.",
)
console = Console()


@dataclass(frozen=True)
class Cell:
    """A command-line item: a label with an optional kind."""

    label: str
    kind: str | None = None

    @classmethod
    def parse(cls, token: str) -> "Cell":
        """Parse ``label`` or ``label:kind``."""
        label, sep, kind = token.partition(":")
        return cls(label=label, kind=kind if sep and kind else None)


def parse_indices(text: str) -> list[int]:
    """Parse a comma separated index list such as ``1,3``."""
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise ConfigError(f"Invalid index list: '{text}'. Expected e.g. 1,3") from e


def parse_table(entries: list[str]) -> dict[int, list[int]]:
    """Parse width-table entries such as ``500=1,3``."""
    table: dict[int, list[int]] = {}
    for entry in entries:
        width, sep, indices = entry.partition("=")
        if not sep:
            raise ConfigError(
                f"Invalid width-table entry: '{entry}'. Expected WIDTH=I,J (e.g., 500=1,3)"
            )
        try:
            key = int(width)
        except ValueError as e:
            raise ConfigError(f"Invalid width in width-table entry: '{entry}'") from e
        table[key] = parse_indices(indices)
    return table


def build_settings(
    config: Path | None,
    split_on: str | None,
    every: int | None,
    at: str | None,
    table: list[str] | None,
    policy: SplitPolicy | None,
    force: bool | None,
    split_width: float | None,
) -> SplitSettings:
    """Combine a settings file with command-line options."""
    options: dict = {}
    if split_on is not None:
        options["split_on"] = split_on
    if every is not None:
        options["split_every_n"] = every
    if at is not None:
        options["split_at_indices"] = parse_indices(at)
    if table:
        options["split_at_indices_by_width"] = parse_table(table)

    if config is not None:
        if options:
            raise ConfigError("Use either --config or split options, not both")
        data = SplitSettings.from_yaml_file(config).model_dump(exclude_none=True)
    else:
        data = options

    if policy is not None:
        data["policy"] = policy
    if force is not None:
        data["force_split"] = force
    if split_width is not None:
        data["split_width"] = split_width
    return SplitSettings.from_dict(data)


@app.command()
def partition(
    items: list[str] = typer.Argument(
        ...,
        help="Items as LABEL or LABEL:KIND",
    ),
    width: float = typer.Option(..., "--width", "-w", help="Container width"),
    split_on: str | None = typer.Option(
        None, "--split-on", help="Split on items of this kind"
    ),
    every: int | None = typer.Option(None, "--every", help="Split on every n-th item"),
    at: str | None = typer.Option(
        None, "--at", help="Comma separated 0-based indices to split on"
    ),
    table: list[str] | None = typer.Option(
        None, "--table", help="Width-table entry WIDTH=I,J (repeatable)"
    ),
    policy: SplitPolicy | None = typer.Option(
        None, "--policy", "-p", help="What to do with the split item"
    ),
    force: bool | None = typer.Option(
        None, "--force/--no-force", help="Force or suppress splitting"
    ),
    split_width: float | None = typer.Option(
        None, "--split-width", help="Split at or below this width (default: 500)"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML settings file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug trace"),
) -> None:
    """Partition ITEMS into rows and print one line per row."""
    if verbose:
        setup_logging(logging.DEBUG)

    try:
        settings = build_settings(
            config, split_on, every, at, table, policy, force, split_width
        )
        cells = [Cell.parse(token) for token in items]
        groups = settings.partition(cells, width)
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e

    for number, group in enumerate(groups, start=1):
        labels = " ".join(escape(cell.label) for cell in group)
        console.print(f"[bold]row {number}:[/bold] {labels}", soft_wrap=True)


@app.command()
def version() -> None:
    """Show version information."""
    console.print("splittable 0.1.0")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
