"""
decoder.py
Pull-based GEDCOM record decoder.

Each ``next_record()`` call reads lines (through the line assembler and
tokenizer) until one top-level record is complete, checks the document
grammar as it goes, and hands the record's line tree to the dispatcher:

    HEAD  content-record+  TRLR

The decoder keeps exactly one line of lookahead: the level-0 line that ends
a record is peeked, not consumed, and becomes the first line of the next
record. No backtracking, no resynchronisation: the first error closes the
session and every later call re-raises it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Union

from gedcom_reader.core.exceptions import (
    DuplicateHeaderError,
    GedcomError,
    MissingHeaderError,
    NoRecordsError,
    UnexpectedEndOfInputError,
)
from gedcom_reader.loader.line_assembler import Line, LineAssembler
from gedcom_reader.loader.segmenter import LineTree, build_line_tree, check_level_step
from gedcom_reader.loader.tokenizer import Source, Tokenizer, open_source
from gedcom_reader.logging import get_logger
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.dispatch import CONTENT_KINDS, RecordKind, dispatch
from gedcom_reader.records.entities import Record, TrailerRecord

HEADER_TAG = RecordKind.HEADER.value
TRAILER_TAG = RecordKind.TRAILER.value


class Phase(Enum):
    AWAITING_HEADER = "awaiting_header"
    AWAITING_FIRST_RECORD = "awaiting_first_record"
    IN_RECORDS = "in_records"
    FINISHED = "finished"
    CLOSED = "closed"


class Decoder:
    """
    Decode one GEDCOM document, one record per ``next_record()`` call.

    End of stream is signalled by returning a ``TrailerRecord``; once it has
    been returned every further call returns the same object. Iterating over
    the decoder yields every record before the trailer.

    Not safe for concurrent use: the lookahead line and the phase are
    mutated on every call.
    """

    def __init__(
        self,
        source: Union[Source, Tokenizer],
        options: Optional[DecodeOptions] = None,
    ) -> None:
        self.options = options if options is not None else DecodeOptions()
        self._tokenizer = source if isinstance(source, Tokenizer) else Tokenizer(source)
        self._lines = LineAssembler(self._tokenizer)

        self._phase = Phase.AWAITING_HEADER
        self._peeked: Optional[Line] = None
        self._error: Optional[GedcomError] = None
        self._trailer: Optional[TrailerRecord] = None
        self._header_missing = False
        self._owns_source = False

        self.log = get_logger(__name__)

    @classmethod
    def from_path(
        cls, path: Union[str, Path], options: Optional[DecodeOptions] = None
    ) -> "Decoder":
        """Open ``path`` and decode it; the decoder closes the file on ``close()``."""
        decoder = cls(open_source(path), options)
        decoder._owns_source = True
        return decoder

    # ------------------------------------------------------------------ #
    # State inspection
    # ------------------------------------------------------------------ #

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def error(self) -> Optional[GedcomError]:
        """The error that closed the session, if any."""
        return self._error

    @property
    def header_missing(self) -> bool:
        """True when the document had no HEAD and ``allow_missing_required`` let it pass."""
        return self._header_missing

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def next_record(self) -> Record:
        """
        Return the next record, or the TrailerRecord at end of stream.

        Raises:
            GedcomError: on the first structural, token or builder error,
                and again on every later call.
        """
        if self._phase is Phase.CLOSED:
            raise self._error
        if self._phase is Phase.FINISHED:
            return self._trailer

        try:
            return self._advance()
        except GedcomError as exc:
            self._close(exc)
            raise

    def __iter__(self) -> Iterator[Record]:
        while True:
            record = self.next_record()
            if isinstance(record, TrailerRecord):
                return
            yield record

    def close(self) -> None:
        if self._owns_source:
            self._tokenizer.close()

    def __enter__(self) -> "Decoder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Lookahead
    # ------------------------------------------------------------------ #

    def _peek(self) -> Optional[Line]:
        if self._peeked is None:
            self._peeked = self._lines.next()
        return self._peeked

    def _take(self) -> Line:
        line = self._peek()
        self._peeked = None
        return line

    # ------------------------------------------------------------------ #
    # Phase handling and grouping
    # ------------------------------------------------------------------ #

    def _advance(self) -> Record:
        line = self._peek()
        if line is None:
            return self._end_of_input()

        if self._phase is Phase.AWAITING_HEADER:
            check_level_step(line, -1)
            self._phase = Phase.AWAITING_FIRST_RECORD

            if line.tag == HEADER_TAG:
                self.log.debug("Header found at line %s", line.lineno)
                return dispatch(self._group(), self.options)

            if not self.options.allow_missing_required:
                raise MissingHeaderError(
                    f"document starts with {line.tag!r}, expected {HEADER_TAG!r}",
                    lineno=line.lineno,
                    tag=line.tag,
                )
            self._header_missing = True
            self.log.warning(
                "Line %s: no %s record; decoding without header", line.lineno, HEADER_TAG
            )

        kind = RecordKind.for_tag(line.tag)

        if kind is RecordKind.TRAILER:
            self._take()
            if self._phase is Phase.AWAITING_FIRST_RECORD:
                raise NoRecordsError(
                    "trailer reached before any content record", lineno=line.lineno
                )
            return self._finish(TrailerRecord(tree=LineTree(line=line)))

        if kind is RecordKind.HEADER:
            reason = "HEAD record out of position" if self._header_missing else "second HEAD record"
            raise DuplicateHeaderError(reason, lineno=line.lineno, tag=line.tag)

        if kind in CONTENT_KINDS and self._phase is Phase.AWAITING_FIRST_RECORD:
            self.log.debug("First content record %s at line %s", line.tag, line.lineno)
            self._phase = Phase.IN_RECORDS

        return dispatch(self._group(), self.options)

    def _group(self) -> LineTree:
        """
        Consume one top-level record's lines and return them as a tree.

        Stops, without consuming, at the next level-0 line.
        """
        first = self._take()
        lines: List[Line] = [first]
        last_level = first.level

        while True:
            line = self._peek()
            if line is None:
                if not self.options.allow_missing_required:
                    raise UnexpectedEndOfInputError(
                        f"input ended inside {first.tag} record before {TRAILER_TAG}",
                        lineno=lines[-1].lineno,
                    )
                break
            if line.level == 0:
                break
            check_level_step(line, last_level)
            lines.append(self._take())
            last_level = line.level

        return build_line_tree(lines)

    def _end_of_input(self) -> Record:
        if not self.options.allow_missing_required:
            raise UnexpectedEndOfInputError(f"input ended before {TRAILER_TAG}")

        if self._phase is not Phase.IN_RECORDS:
            raise NoRecordsError("input ended before any content record")

        self.log.warning("No %s record; end of input accepted as trailer", TRAILER_TAG)
        return self._finish(TrailerRecord(synthesized=True))

    def _finish(self, trailer: TrailerRecord) -> TrailerRecord:
        self._trailer = trailer
        self._phase = Phase.FINISHED
        self.log.debug("Decoding finished")
        return trailer

    def _close(self, exc: GedcomError) -> None:
        self._error = exc
        self._phase = Phase.CLOSED
        self.log.error("Decoding stopped: %s", exc)


def new_decoder(
    source: Union[Source, Tokenizer], options: Optional[DecodeOptions] = None
) -> Decoder:
    return Decoder(source, options)


def decode(source: Union[Source, Tokenizer], options: Optional[DecodeOptions] = None) -> List[Record]:
    """Decode a whole document and return every record before the trailer."""
    return list(Decoder(source, options))


def decode_file(path: Union[str, Path], options: Optional[DecodeOptions] = None) -> List[Record]:
    with Decoder.from_path(path, options) as decoder:
        return list(decoder)
