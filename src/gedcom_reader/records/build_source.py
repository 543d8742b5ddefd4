from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    note_of,
    object_links,
    pointer_of,
    require_tag,
    text_of,
)
from gedcom_reader.records.entities import SourceRecord


def build_source(node: LineTree, options: DecodeOptions) -> SourceRecord:
    """
    Build a SourceRecord from a top-level SOUR line tree.

    PURE FUNCTION:
      - no cross-record linking
      - REPO citations kept as xref strings

    Handles:
      - TITL / AUTH / PUBL / TEXT with CONC/CONT continuation
      - custom tags (_APID, etc.) losslessly
    """
    require_tag(node, "SOUR")
    check_cardinality(node, options)

    source = SourceRecord(xref=node.xref, tree=node)
    source.title = text_of(node.find_first("TITL"), options)
    source.author = text_of(node.find_first("AUTH"), options)
    source.publication = text_of(node.find_first("PUBL"), options)
    source.abbreviation = first_value(node, "ABBR", options)
    source.text = text_of(node.find_first("TEXT"), options)

    for repo in node.find_children("REPO"):
        ptr = pointer_of(repo, options)
        if ptr:
            source.repositories.append(ptr)

    for child in node.find_children("NOTE"):
        note = note_of(child, options)
        if note:
            source.notes.append(note)

    source.objects, inline_media = object_links(node, options)
    source.rin = first_value(node, "RIN", options)

    handled = {"TITL", "AUTH", "PUBL", "ABBR", "TEXT", "REPO", "NOTE", "OBJE", "RIN"}
    source.attributes.extend(collect_unhandled(node, handled))
    source.attributes.extend(inline_media)
    return source
