from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    note_of,
    object_links,
    require_tag,
    text_of,
    value_of,
)
from gedcom_reader.records.entities import SubmitterRecord


def build_submitter(node: LineTree, options: DecodeOptions) -> SubmitterRecord:
    """Build a SubmitterRecord from a SUBM line tree (NAME is required)."""
    require_tag(node, "SUBM")
    check_cardinality(node, options)

    subm = SubmitterRecord(xref=node.xref, tree=node)
    subm.name = first_value(node, "NAME", options, "SUBM")
    subm.address = text_of(node.find_first("ADDR"), options)
    subm.phones = [value_of(p, options) for p in node.find_children("PHON") if p.value]
    subm.languages = [value_of(lang, options) for lang in node.find_children("LANG") if lang.value]
    subm.objects, inline_media = object_links(node, options)
    subm.notes = [n for n in (note_of(c, options) for c in node.find_children("NOTE")) if n]
    subm.rfn = first_value(node, "RFN", options)
    subm.rin = first_value(node, "RIN", options)

    handled = {"NAME", "ADDR", "PHON", "LANG", "OBJE", "NOTE", "RFN", "RIN"}
    subm.attributes.extend(collect_unhandled(node, handled))
    subm.attributes.extend(inline_media)
    return subm
