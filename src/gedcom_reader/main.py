"""
Script entry point: decode one GEDCOM file and write its records as JSON.

Argument parsing and wiring only; the work happens in ``core.pipeline``.
The richer interactive interface lives in ``gedcom_reader.cli``.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from gedcom_reader.config import get_config
from gedcom_reader.core.context import ParseContext
from gedcom_reader.core.pipeline import Pipeline
from gedcom_reader.logging import get_logger
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.entities import Record
from gedcom_reader.utils import resolve_project_path

log = get_logger("main")

DEFAULT_OUTPUT = resolve_project_path(Path("outputs") / "records.json")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gedcom-reader-run",
        description="Decode a GEDCOM file into JSON records",
    )
    parser.add_argument("-i", "--input", required=True, type=Path, help="GEDCOM file to decode")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"JSON output path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Turn on every leniency option instead of the configured ones",
    )
    parser.add_argument("--debug", action="store_true", help="Log everything, console included, at DEBUG level")
    return parser


def run(
    input_path: Path,
    output_path: Optional[Path],
    debug_flag: bool = False,
    lenient: bool = False,
) -> List[Record]:
    cfg = get_config()
    options = DecodeOptions.lenient() if lenient else DecodeOptions.from_config(cfg)

    ctx = ParseContext(
        config=cfg,
        logger=log,
        input_path=Path(input_path),
        output_path=Path(output_path) if output_path is not None else None,
        options=options,
        debug=cfg.debug or debug_flag,
    )
    records = Pipeline(ctx).run()

    if ctx.output_path is not None:
        log.info("Wrote %s", ctx.output_path)
    return records


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    try:
        run(args.input, args.output, debug_flag=args.debug, lenient=args.lenient)
    except Exception:
        log.exception("Unhandled exception in main")
        raise


if __name__ == "__main__":
    main()
