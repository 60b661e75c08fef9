"""Command-line interface for replaygain-tool."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from replaygain_tool.core.gain import format_ratio_to_gain, normalize_ratio, parse_gain_to_ratio
from replaygain_tool.core.peak import format_peak, normalize_peak, parse_peak

app = typer.Typer(
    name="replaygain-tool",
    help="Parse, validate and normalize ReplayGain gain and peak tag values",
    no_args_is_help=True,
)
console = Console()


def display_values_table(
    rows: list[tuple[str, bool, str, str]],
    value_column: str,
    title: str,
) -> None:
    """Display parsed tag values in a table.

    Args:
        rows: List of (input, valid, value, normalized) tuples
        value_column: Header of the parsed value column
        title: Table title
    """
    table = Table(title=title)
    table.add_column("Input", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column(value_column, justify="right")
    table.add_column("Normalized", justify="right")

    for text, valid, value, normalized in rows:
        status = "[green]valid[/green]" if valid else "[red]invalid[/red]"
        table.add_row(repr(text), status, value, normalized)

    console.print(table)


def display_format_table(rows: list[tuple[float, str]], value_column: str, title: str) -> None:
    """Display numeric values next to their tag representation."""
    table = Table(title=title)
    table.add_column(value_column, justify="right", style="cyan")
    table.add_column("Tag", justify="right")

    for value, text in rows:
        table.add_row(repr(value), text or "[red](undefined)[/red]")

    console.print(table)


@app.command()
def gain(
    values: Annotated[
        list[str],
        typer.Argument(help="Gain tag values, e.g. '+3.0 dB' (use -- before negative values)"),
    ],
    output_json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Parse gain tag values into linear ratios.

    Exits with status 1 if any value is invalid.
    """
    results = []
    for text in values:
        ratio, valid = parse_gain_to_ratio(text)
        results.append((text, valid, ratio, format_ratio_to_gain(normalize_ratio(ratio))))

    if output_json:
        console.print_json(data=[
            {"input": text, "valid": valid, "ratio": ratio, "normalized": normalized}
            for text, valid, ratio, normalized in results
        ])
    else:
        display_values_table(
            [
                (text, valid, f"{ratio:.6g}" if valid else "-", normalized)
                for text, valid, ratio, normalized in results
            ],
            value_column="Ratio",
            title="ReplayGain Gain",
        )

    if not all(valid for _, valid, _, _ in results):
        raise typer.Exit(1)


@app.command()
def peak(
    values: Annotated[
        list[str],
        typer.Argument(help="Peak tag values, e.g. '0.988525'"),
    ],
    output_json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Parse peak tag values into sample amplitudes.

    Exits with status 1 if any value is invalid.
    """
    results = []
    for text in values:
        value, valid = parse_peak(text)
        results.append((text, valid, value, format_peak(normalize_peak(value))))

    if output_json:
        console.print_json(data=[
            {"input": text, "valid": valid, "peak": value, "normalized": normalized}
            for text, valid, value, normalized in results
        ])
    else:
        display_values_table(
            [
                (text, valid, f"{value:.6g}" if valid else "-", normalized)
                for text, valid, value, normalized in results
            ],
            value_column="Peak",
            title="ReplayGain Peak",
        )

    if not all(valid for _, valid, _, _ in results):
        raise typer.Exit(1)


@app.command("format-ratio")
def format_ratio(
    ratios: Annotated[
        list[float],
        typer.Argument(help="Linear gain ratios, e.g. 0.5"),
    ],
) -> None:
    """Format linear gain ratios as gain tag values."""
    rows = [(ratio, format_ratio_to_gain(ratio)) for ratio in ratios]
    display_format_table(rows, value_column="Ratio", title="ReplayGain Gain")

    if not all(text for _, text in rows):
        raise typer.Exit(1)


@app.command("format-peak")
def format_peak_command(
    peaks: Annotated[
        list[float],
        typer.Argument(help="Peak sample amplitudes, e.g. 0.95"),
    ],
) -> None:
    """Format peak sample amplitudes as peak tag values."""
    rows = [(value, format_peak(value)) for value in peaks]
    display_format_table(rows, value_column="Peak", title="ReplayGain Peak")

    if not all(text for _, text in rows):
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show parse diagnostics"),
    ] = False,
) -> None:
    """Parse, validate and normalize ReplayGain gain and peak tag values."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


if __name__ == "__main__":
    app()
