from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    charset_of,
    check_cardinality,
    collect_unhandled,
    first_value,
    pointer_of,
    require_tag,
    text_of,
    value_of,
)
from gedcom_reader.records.entities import HeaderRecord


def build_header(node: LineTree, options: DecodeOptions) -> HeaderRecord:
    """
    Build a HeaderRecord from the HEAD line tree.

    Every child is optional so a bare ``0 HEAD`` decodes.
    CHAR must name a known character set unless allow_unknown_charset.
    """
    require_tag(node, "HEAD")
    check_cardinality(node, options)

    header = HeaderRecord(xref=node.xref, tree=node)

    sour = node.find_first("SOUR")
    if sour is not None:
        header.source = value_of(sour, options, "HEAD")
        header.source_version = first_value(sour, "VERS", options)
        header.source_name = first_value(sour, "NAME", options, "HEAD")

    header.destination = first_value(node, "DEST", options)

    date = node.find_first("DATE")
    if date is not None:
        header.date = value_of(date, options)
        header.time = first_value(date, "TIME", options)

    header.submitter = pointer_of(node.find_first("SUBM"), options)
    header.submission = pointer_of(node.find_first("SUBN"), options)
    header.file_name = first_value(node, "FILE", options, "HEAD")
    header.copyright = first_value(node, "COPR", options)

    gedc = node.find_first("GEDC")
    if gedc is not None:
        header.gedcom_version = first_value(gedc, "VERS", options)
        header.gedcom_form = first_value(gedc, "FORM", options)

    char = node.find_first("CHAR")
    if char is not None:
        header.charset = charset_of(char, options)
        header.charset_version = first_value(char, "VERS", options)

    header.language = first_value(node, "LANG", options)

    plac = node.find_first("PLAC")
    if plac is not None:
        header.place_form = first_value(plac, "FORM", options)

    header.note = text_of(node.find_first("NOTE"), options)

    handled = {"SOUR", "DEST", "DATE", "SUBM", "SUBN", "FILE", "COPR", "GEDC", "CHAR", "LANG", "PLAC", "NOTE"}
    header.attributes.extend(collect_unhandled(node, handled))
    return header
