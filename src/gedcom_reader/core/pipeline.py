from __future__ import annotations

from typing import List

from gedcom_reader.core.context import ParseContext
from gedcom_reader.core.exceptions import GedcomError, ParseExecutionError
from gedcom_reader.decoder import decode_file
from gedcom_reader.exporter import export_records_to_json, records_to_dict
from gedcom_reader.logging import enable_debug
from gedcom_reader.records.entities import Record


class Pipeline:
    """
    Decode ``ctx.input_path`` and, if an output path is set, export JSON.
    No decoding logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> List[Record]:
        ctx = self.ctx
        if ctx.debug:
            enable_debug()
        self.log.info("Decoding %s (options: %s)", ctx.input_path, ctx.options.enabled() or "strict")

        try:
            ctx.records = decode_file(ctx.input_path, ctx.options)
        except (GedcomError, OSError) as exc:
            ctx.fail(exc)
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc

        ctx.counts = records_to_dict(ctx.records)["counts"]
        self.log.info("Decoded %d records: %s", len(ctx.records), ctx.counts)

        if ctx.output_path is not None:
            export_records_to_json(ctx.records, ctx.output_path)

        return ctx.records
