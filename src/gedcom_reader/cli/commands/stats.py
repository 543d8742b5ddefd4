from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_reader.cli.utils import current_options, load_records

console = Console()


def stats_command(
    ctx: typer.Context,
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    records = load_records(gedcom, current_options(ctx), verbose=verbose)
    counts = Counter(record.kind for record in records)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Record", style="bold")
    table.add_column("Count", justify="right")

    for kind, count in sorted(counts.items()):
        table.add_row(kind, str(count))
    table.add_row("Total", str(len(records)))

    console.print(table)
