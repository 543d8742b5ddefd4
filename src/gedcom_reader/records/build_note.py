from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    require_tag,
    text_of,
    value_of,
)
from gedcom_reader.records.entities import NoteRecord


def build_note(node: LineTree, options: DecodeOptions) -> NoteRecord:
    """
    Build a NoteRecord from a top-level NOTE line tree.

    Text is reconstructed per GEDCOM rules:
        * CONT -> newline
        * CONC -> inline append
    Unmodelled child tags are preserved as attributes.
    """
    require_tag(node, "NOTE")
    check_cardinality(node, options)

    note = NoteRecord(xref=node.xref, tree=node)
    note.text = text_of(node, options) or ""

    for sour in node.find_children("SOUR"):
        if sour.value:
            note.sources.append(value_of(sour, options))

    note.rin = first_value(node, "RIN", options)

    note.attributes.extend(collect_unhandled(node, {"CONT", "CONC", "SOUR", "RIN"}))
    return note
