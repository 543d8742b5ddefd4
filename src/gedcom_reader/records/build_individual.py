from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    note_of,
    object_links,
    pointers_of,
    require_tag,
    value_of,
)
from gedcom_reader.records.entities import IndividualRecord, NameRecord
from gedcom_reader.records.events import INDIVIDUAL_EVENT_TAGS, extract_events

_NAME_PARTS = {"GIVN", "SURN", "NPFX", "NSFX", "NICK", "TYPE"}


def _build_name(node: LineTree, options: DecodeOptions) -> NameRecord:
    name = NameRecord(
        full=value_of(node, options, "INDI") or "",
        given=first_value(node, "GIVN", options),
        surname=first_value(node, "SURN", options),
        prefix=first_value(node, "NPFX", options),
        suffix=first_value(node, "NSFX", options),
        nickname=first_value(node, "NICK", options),
        name_type=first_value(node, "TYPE", options),
    )
    for sub in node.children:
        if sub.tag not in _NAME_PARTS:
            name.raw[sub.tag] = sub.value
    return name


def build_individual(node: LineTree, options: DecodeOptions) -> IndividualRecord:
    require_tag(node, "INDI")
    check_cardinality(node, options)

    individual = IndividualRecord(xref=node.xref, tree=node)

    individual.names = [_build_name(n, options) for n in node.find_children("NAME")]
    individual.sex = first_value(node, "SEX", options)

    # Family links
    individual.families_as_spouse = pointers_of(node, "FAMS", options)
    individual.families_as_child = pointers_of(node, "FAMC", options)
    individual.aliases = pointers_of(node, "ALIA", options)
    individual.submitters = pointers_of(node, "SUBM", options)

    individual.events.extend(extract_events(node, INDIVIDUAL_EVENT_TAGS, options))

    # Notes & Sources
    for note in node.find_children("NOTE"):
        text = note_of(note, options)
        if text:
            individual.notes.append(text)

    for sour in node.find_children("SOUR"):
        if sour.value:
            individual.sources.append(value_of(sour, options))

    individual.objects, inline_media = object_links(node, options)
    individual.rfn = first_value(node, "RFN", options)
    individual.afn = first_value(node, "AFN", options)
    individual.rin = first_value(node, "RIN", options)

    handled = {
        "NAME", "SEX", "FAMS", "FAMC", "ALIA", "SUBM", "NOTE", "SOUR", "OBJE",
        "RFN", "AFN", "RIN",
    } | INDIVIDUAL_EVENT_TAGS
    individual.attributes.extend(collect_unhandled(node, handled))
    individual.attributes.extend(inline_media)
    return individual
