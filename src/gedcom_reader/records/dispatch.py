"""
Route a completed record tree to its builder.

Known tags map onto the closed ``RecordKind`` set; the only open arm is the
extension/unknown fallback.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from gedcom_reader.core.exceptions import UnknownTagError
from gedcom_reader.loader.segmenter import LineTree
from gedcom_reader.logging import get_logger
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.build_family import build_family
from gedcom_reader.records.build_header import build_header
from gedcom_reader.records.build_individual import build_individual
from gedcom_reader.records.build_note import build_note
from gedcom_reader.records.build_object import build_object
from gedcom_reader.records.build_repository import build_repository
from gedcom_reader.records.build_source import build_source
from gedcom_reader.records.build_submission import build_submission
from gedcom_reader.records.build_submitter import build_submitter
from gedcom_reader.records.checks import collect_unhandled
from gedcom_reader.records.entities import Record, TrailerRecord, UnknownExtensionRecord

log = get_logger(__name__)

EXTENSION_PREFIX = "_"

Builder = Callable[[LineTree, DecodeOptions], Record]


class RecordKind(Enum):
    HEADER = "HEAD"
    SUBMITTER = "SUBM"
    FAMILY = "FAM"
    INDIVIDUAL = "INDI"
    OBJECT = "OBJE"
    NOTE = "NOTE"
    REPOSITORY = "REPO"
    SOURCE = "SOUR"
    SUBMISSION = "SUBN"
    TRAILER = "TRLR"

    @classmethod
    def for_tag(cls, tag: str) -> Optional["RecordKind"]:
        try:
            return cls(tag)
        except ValueError:
            return None


# Records whose appearance satisfies the "at least one content record" rule.
CONTENT_KINDS = frozenset({
    RecordKind.SUBMITTER,
    RecordKind.FAMILY,
    RecordKind.INDIVIDUAL,
    RecordKind.OBJECT,
    RecordKind.NOTE,
    RecordKind.REPOSITORY,
    RecordKind.SOURCE,
    RecordKind.SUBMISSION,
})


def build_trailer(node: LineTree, options: DecodeOptions) -> TrailerRecord:
    return TrailerRecord(tree=node)


def build_extension(node: LineTree, options: DecodeOptions) -> UnknownExtensionRecord:
    """Pass an extension or tolerated unknown record through untouched."""
    return UnknownExtensionRecord(
        xref=node.xref,
        tag=node.tag,
        value=node.value,
        attributes=collect_unhandled(node, set()),
        tree=node,
    )


BUILDERS: Dict[RecordKind, Builder] = {
    RecordKind.HEADER: build_header,
    RecordKind.SUBMITTER: build_submitter,
    RecordKind.FAMILY: build_family,
    RecordKind.INDIVIDUAL: build_individual,
    RecordKind.OBJECT: build_object,
    RecordKind.NOTE: build_note,
    RecordKind.REPOSITORY: build_repository,
    RecordKind.SOURCE: build_source,
    RecordKind.SUBMISSION: build_submission,
    RecordKind.TRAILER: build_trailer,
}


def dispatch(tree: LineTree, options: DecodeOptions) -> Record:
    """
    Build the record for ``tree`` according to its root tag.

    Raises:
        UnknownTagError: tag is neither known nor an extension and
            ``allow_unknown_tags`` is off.
        BuilderError: propagated unchanged from the record builder.
    """
    kind = RecordKind.for_tag(tree.tag)
    if kind is not None:
        return BUILDERS[kind](tree, options)

    if tree.tag.startswith(EXTENSION_PREFIX):
        return build_extension(tree, options)

    if not options.allow_unknown_tags:
        raise UnknownTagError(
            f"unknown record tag {tree.tag!r}", lineno=tree.lineno, tag=tree.tag
        )

    log.warning("Line %s: unknown record tag %r accepted as extension", tree.lineno, tree.tag)
    return build_extension(tree, options)
