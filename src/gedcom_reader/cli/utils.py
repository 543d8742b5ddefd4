from __future__ import annotations

import time
from pathlib import Path
from typing import List

import typer
from rich.console import Console

from gedcom_reader.core.exceptions import GedcomError
from gedcom_reader.decoder import Decoder
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.entities import Record

console = Console()
err_console = Console(stderr=True)


def current_options(ctx: typer.Context) -> DecodeOptions:
    obj = ctx.obj or {}
    return obj.get("options") or DecodeOptions()


def load_records(path: Path, options: DecodeOptions, *, verbose: bool = False) -> List[Record]:
    """
    Decode every record of ``path``; exits with code 1 on a decode error.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    try:
        with Decoder.from_path(path, options) as decoder:
            records = list(decoder)
            header_missing = decoder.header_missing
    except GedcomError as exc:
        err_console.print(f"[bold red]Decode error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Decoded {len(records)} records in {elapsed:.2f}s")
        if header_missing:
            console.log("[yellow]Document has no HEAD record[/yellow]")

    return records


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
