from __future__ import annotations

from typing import List

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    note_of,
    require_tag,
    value_of,
)
from gedcom_reader.records.entities import MediaFile, ObjectRecord


def _build_files(node: LineTree, options: DecodeOptions) -> List[MediaFile]:
    files: List[MediaFile] = []

    # GEDCOM 5.5: FORM/TITL may be siblings of FILE at record level
    sibling_form = first_value(node, "FORM", options)

    for child in node.find_children("FILE"):
        media = MediaFile(path=value_of(child, options) or "")

        form_node = child.find_first("FORM")
        if form_node is not None:
            media.form = value_of(form_node, options)
            media.media_type = first_value(form_node, "TYPE", options) or first_value(
                form_node, "MEDI", options
            )
        else:
            media.form = sibling_form

        media.title = first_value(child, "TITL", options, "OBJE")
        files.append(media)

    return files


def build_object(node: LineTree, options: DecodeOptions) -> ObjectRecord:
    """
    Build an ObjectRecord from a top-level OBJE line tree.

    Handles both the 5.5.1 layout (FORM under FILE) and the older 5.5
    layout (FORM as a sibling of FILE). At least one FILE is required.
    """
    require_tag(node, "OBJE")
    check_cardinality(node, options)

    media = ObjectRecord(xref=node.xref, tree=node)
    media.files = _build_files(node, options)
    media.title = first_value(node, "TITL", options, "OBJE")

    if media.title is None:
        titles = [f.title for f in media.files if f.title]
        media.title = titles[0] if titles else None

    for child in node.find_children("NOTE"):
        note = note_of(child, options)
        if note:
            media.notes.append(note)

    for child in node.find_children("SOUR"):
        if child.value:
            media.sources.append(value_of(child, options))

    media.rin = first_value(node, "RIN", options)

    handled = {"FILE", "FORM", "TITL", "NOTE", "SOUR", "RIN"}
    media.attributes.extend(collect_unhandled(node, handled))
    return media
