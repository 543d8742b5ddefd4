from __future__ import annotations

from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_cardinality,
    collect_unhandled,
    first_value,
    int_of,
    pointer_of,
    require_tag,
)
from gedcom_reader.records.entities import SubmissionRecord


def build_submission(node: LineTree, options: DecodeOptions) -> SubmissionRecord:
    require_tag(node, "SUBN")
    check_cardinality(node, options)

    subn = SubmissionRecord(xref=node.xref, tree=node)
    subn.submitter = pointer_of(node.find_first("SUBM"), options)
    subn.family_file = first_value(node, "FAMF", options)
    subn.temple = first_value(node, "TEMP", options)
    subn.ancestor_generations = int_of(node.find_first("ANCE"), options)
    subn.descendant_generations = int_of(node.find_first("DESC"), options)
    subn.ordinance_process = first_value(node, "ORDI", options)
    subn.rin = first_value(node, "RIN", options)

    handled = {"SUBM", "FAMF", "TEMP", "ANCE", "DESC", "ORDI", "RIN"}
    subn.attributes.extend(collect_unhandled(node, handled))
    return subn
