from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_reader.cli.utils import current_options, load_records

console = Console()


def records_command(
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
    List the decoded top-level records of a GEDCOM file.
    """
    records = load_records(gedcom, current_options(ctx), verbose=verbose)

    table = Table(title="GEDCOM Records")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="bold")
    table.add_column("Xref")
    table.add_column("Lines", justify="right")

    for i, record in enumerate(records, start=1):
        lines = sum(1 for _ in record.tree.iter_subtree()) if record.tree else 0
        table.add_row(str(i), record.kind, record.xref or "", str(lines))

    console.print(table)
