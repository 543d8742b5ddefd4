"""
Field-level checks shared by the record builders.

Each check either passes, raises the matching ``BuilderError`` subclass, or,
when the corresponding option is set, lets the value through (or drops it,
for ``ignore_invalid_value``).
"""

from __future__ import annotations

import re
from collections import Counter
from typing import List, Optional, Tuple

from gedcom_reader.core.exceptions import (
    InvalidValueError,
    MissingRequiredError,
    MoreThanAllowedError,
    TerminatorInValueError,
    UnknownCharsetError,
    WrongLengthError,
)
from gedcom_reader.loader.segmenter import LineTree, reconstruct_text
from gedcom_reader.logging import get_logger
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.entities import GenericAttribute
from gedcom_reader.records.limits import CARDINALITY, KNOWN_CHARSETS, max_length

log = get_logger(__name__)

POINTER_RE = re.compile(r"^@[^@\s][^@]*@$")


def require_tag(node: LineTree, tag: str) -> None:
    if node.tag != tag:
        raise ValueError(f"Expected {tag} node, got {node.tag}")


def check_cardinality(node: LineTree, options: DecodeOptions) -> None:
    """Enforce the (min, max) child counts listed for ``node.tag``."""
    rules = CARDINALITY.get(node.tag, {})
    counts = Counter(child.tag for child in node.children)

    for tag, (lo, hi) in rules.items():
        seen = counts.get(tag, 0)
        if seen < lo and not options.allow_missing_required:
            raise MissingRequiredError(
                f"{node.tag} requires at least {lo} {tag} line(s), found {seen}",
                lineno=node.lineno,
                tag=tag,
            )
        if hi is not None and seen > hi and not options.allow_more_than_allowed:
            raise MoreThanAllowedError(
                f"{node.tag} allows at most {hi} {tag} line(s), found {seen}",
                lineno=node.lineno,
                tag=tag,
            )


def check_text(
    text: Optional[str],
    node: LineTree,
    options: DecodeOptions,
    record_tag: Optional[str] = None,
) -> Optional[str]:
    """Apply terminator and length checks to one line value."""
    if text is None:
        return None

    if ("\r" in text or "\n" in text) and not options.allow_terminators_in_value:
        raise TerminatorInValueError(
            f"{node.tag} value contains a line terminator",
            lineno=node.lineno,
            tag=node.tag,
        )

    limit = max_length(node.tag, record_tag)
    if len(text) > limit and not options.allow_wrong_length:
        raise WrongLengthError(
            f"{node.tag} value is {len(text)} characters, maximum is {limit}",
            lineno=node.lineno,
            tag=node.tag,
        )
    return text


def value_of(
    node: Optional[LineTree],
    options: DecodeOptions,
    record_tag: Optional[str] = None,
) -> Optional[str]:
    if node is None:
        return None
    return check_text(node.value, node, options, record_tag)


def first_value(
    parent: LineTree,
    tag: str,
    options: DecodeOptions,
    record_tag: Optional[str] = None,
) -> Optional[str]:
    return value_of(parent.find_first(tag), options, record_tag)


def text_of(node: Optional[LineTree], options: DecodeOptions) -> Optional[str]:
    """Checked value joined with its CONC/CONT continuation lines."""
    if node is None:
        return None
    check_text(node.value, node, options)
    for child in node.children:
        if child.tag in ("CONC", "CONT"):
            check_text(child.value, child, options)
    return reconstruct_text(node)


def pointer_of(node: Optional[LineTree], options: DecodeOptions) -> Optional[str]:
    """Value of a pointer-valued line (``@X1@``), or None if it is dropped."""
    if node is None or node.value is None:
        return None
    value = node.value.strip()
    if POINTER_RE.match(value):
        return value
    if not options.ignore_invalid_value:
        raise InvalidValueError(
            f"{node.tag} value {node.value!r} is not a cross-reference pointer",
            lineno=node.lineno,
            tag=node.tag,
        )
    log.warning("Line %s: ignoring invalid %s pointer %r", node.lineno, node.tag, node.value)
    return None


def pointers_of(parent: LineTree, tag: str, options: DecodeOptions) -> List[str]:
    out: List[str] = []
    for child in parent.find_children(tag):
        ptr = pointer_of(child, options)
        if ptr:
            out.append(ptr)
    return out


def int_of(node: Optional[LineTree], options: DecodeOptions) -> Optional[int]:
    value = value_of(node, options)
    if value is None:
        return None
    stripped = value.strip()
    if stripped.isascii() and stripped.isdigit():
        return int(stripped)
    if not options.ignore_invalid_value:
        raise InvalidValueError(
            f"{node.tag} value {value!r} is not a number",
            lineno=node.lineno,
            tag=node.tag,
        )
    return None


def charset_of(node: Optional[LineTree], options: DecodeOptions) -> Optional[str]:
    value = value_of(node, options)
    if value is None:
        return None
    if value.strip().upper() not in KNOWN_CHARSETS and not options.allow_unknown_charset:
        raise UnknownCharsetError(
            f"unknown character set {value!r}",
            lineno=node.lineno,
            tag=node.tag,
        )
    return value


def note_of(node: LineTree, options: DecodeOptions) -> Optional[str]:
    """A NOTE child is either a pointer to a NOTE record or inline text."""
    if node.value and POINTER_RE.match(node.value.strip()):
        return node.value.strip()
    return text_of(node, options)


def generic_attribute(node: LineTree) -> GenericAttribute:
    return GenericAttribute(
        tag=node.tag,
        value=node.value,
        xref=node.xref,
        children=[generic_attribute(c) for c in node.children],
        lineno=node.lineno,
    )


def collect_unhandled(node: LineTree, handled: set) -> List[GenericAttribute]:
    """Preserve every child not modelled by the builder (no data loss)."""
    return [generic_attribute(c) for c in node.children if c.tag not in handled]


def object_links(node: LineTree, options: DecodeOptions) -> Tuple[List[str], List[GenericAttribute]]:
    """
    Split OBJE children into pointers to OBJE records and inline blocks.

    An inline ``OBJE`` (no value, FILE/FORM/TITL below it) has no typed
    field, so it is returned as a GenericAttribute for the record's
    ``attributes``.
    """
    pointers: List[str] = []
    inline: List[GenericAttribute] = []
    for child in node.find_children("OBJE"):
        if child.value is None:
            inline.append(generic_attribute(child))
            continue
        ptr = pointer_of(child, options)
        if ptr:
            pointers.append(ptr)
    return pointers, inline
