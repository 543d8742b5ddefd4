"""
Event and attribute extraction for INDI and FAM records.

Dates and places are captured verbatim; calendar parsing is left to
downstream tooling.
"""

from __future__ import annotations

from typing import List

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import first_value, note_of, text_of, value_of
from gedcom_reader.records.entities import EventRecord

INDIVIDUAL_EVENT_TAGS = frozenset({
    "BIRT", "CHR", "DEAT", "BURI", "CREM", "ADOP", "BAPM", "BARM", "BASM",
    "BLES", "CHRA", "CONF", "FCOM", "ORDN", "NATU", "EMIG", "IMMI", "CENS",
    "PROB", "WILL", "GRAD", "RETI", "EVEN",
    # individual attributes
    "CAST", "DSCR", "EDUC", "IDNO", "NATI", "NCHI", "NMR", "OCCU", "PROP",
    "RELI", "RESI", "SSN", "TITL", "FACT",
})

FAMILY_EVENT_TAGS = frozenset({
    "ANUL", "CENS", "DIV", "DIVF", "ENGA", "MARB", "MARC", "MARR", "MARL",
    "MARS", "RESI", "EVEN",
})


def build_event(node: LineTree, options: DecodeOptions) -> EventRecord:
    event = EventRecord(
        tag=node.tag,
        value=text_of(node, options) if node.value is not None else None,
        date=first_value(node, "DATE", options),
        place=first_value(node, "PLAC", options),
        event_type=first_value(node, "TYPE", options),
        lineno=node.lineno,
    )
    for child in node.find_children("NOTE"):
        note = note_of(child, options)
        if note:
            event.notes.append(note)
    for child in node.find_children("SOUR"):
        if child.value:
            event.sources.append(value_of(child, options))
    return event


def extract_events(node: LineTree, tags: frozenset, options: DecodeOptions) -> List[EventRecord]:
    return [build_event(child, options) for child in node.children if child.tag in tags]
