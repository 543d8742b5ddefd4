from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from gedcom_reader.cli.utils import current_options, load_records, write_text
from gedcom_reader.exporter import dumps_records

console = Console(stderr=True)


def export_command(
    ctx: typer.Context,
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write JSON here instead of stdout"),
    kinds: Optional[List[str]] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Only export records of this tag (repeatable, e.g. -k INDI -k FAM)",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report progress on stderr"),
):
    """
    Export decoded GEDCOM records to JSON (stdout by default).
    """
    records = load_records(gedcom, current_options(ctx), verbose=verbose)

    if kinds:
        wanted = {k.upper() for k in kinds}
        records = [r for r in records if r.kind.upper() in wanted]
        if verbose:
            console.log(f"{len(records)} records match {sorted(wanted)}")

    write_text(dumps_records(records, pretty=pretty), out=out)

    if verbose:
        console.log(f"Exported to {out or 'stdout'}")
