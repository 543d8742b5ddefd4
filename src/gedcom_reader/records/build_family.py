from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    int_of,
    note_of,
    object_links,
    pointer_of,
    pointers_of,
    require_tag,
    value_of,
)
from gedcom_reader.records.entities import FamilyRecord
from gedcom_reader.records.events import FAMILY_EVENT_TAGS, extract_events


def build_family(node: LineTree, options: DecodeOptions) -> FamilyRecord:
    """
    Build a FamilyRecord from a FAM line tree.

    PURE FUNCTION:
      - no cross-record linking (HUSB/WIFE/CHIL stay as xref strings)
      - unmodelled children are kept as GenericAttribute
    """
    require_tag(node, "FAM")
    check_cardinality(node, options)

    family = FamilyRecord(xref=node.xref, tree=node)

    # Spouses and children
    family.husband = pointer_of(node.find_first("HUSB"), options)
    family.wife = pointer_of(node.find_first("WIFE"), options)
    family.children = pointers_of(node, "CHIL", options)
    family.child_count = int_of(node.find_first("NCHI"), options)

    family.events.extend(extract_events(node, FAMILY_EVENT_TAGS, options))
    family.submitters = pointers_of(node, "SUBM", options)

    # Notes & Sources
    for note in node.find_children("NOTE"):
        text = note_of(note, options)
        if text:
            family.notes.append(text)

    for sour in node.find_children("SOUR"):
        if sour.value:
            family.sources.append(value_of(sour, options))

    family.objects, inline_media = object_links(node, options)
    family.rin = first_value(node, "RIN", options)

    handled = {"HUSB", "WIFE", "CHIL", "NCHI", "SUBM", "NOTE", "SOUR", "OBJE", "RIN"} | FAMILY_EVENT_TAGS
    family.attributes.extend(collect_unhandled(node, handled))
    family.attributes.extend(inline_media)
    return family
