from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    note_of,
    require_tag,
    text_of,
    value_of,
)
from gedcom_reader.records.entities import RepositoryRecord


def build_repository(node: LineTree, options: DecodeOptions) -> RepositoryRecord:
    """Build a RepositoryRecord from a REPO line tree (NAME is required)."""
    require_tag(node, "REPO")
    check_cardinality(node, options)

    repo = RepositoryRecord(xref=node.xref, tree=node)
    repo.name = first_value(node, "NAME", options, "REPO")
    repo.address = text_of(node.find_first("ADDR"), options)
    repo.phones = [value_of(p, options) for p in node.find_children("PHON") if p.value]

    for child in node.find_children("NOTE"):
        note = note_of(child, options)
        if note:
            repo.notes.append(note)

    repo.rin = first_value(node, "RIN", options)

    repo.attributes.extend(collect_unhandled(node, {"NAME", "ADDR", "PHON", "NOTE", "RIN"}))
    return repo
