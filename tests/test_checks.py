# tests/test_checks.py

from __future__ import annotations

import pytest

from gedcom_reader.core.exceptions import (
    InvalidValueError,
    TerminatorInValueError,
    WrongLengthError,
)
from gedcom_reader.loader import Line, LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.checks import (
    check_text,
    collect_unhandled,
    int_of,
    note_of,
    pointer_of,
    require_tag,
)
from gedcom_reader.records.limits import DEFAULT_MAX_LENGTH, max_length


def make_node(tag, value=None, xref=None, children=None, level=1, lineno=1):
    return LineTree(
        line=Line(level=level, tag=tag, xref=xref, value=value, lineno=lineno),
        children=children or [],
    )


def test_max_length_lookup() -> None:
    assert max_length("DATE") == 35
    assert max_length("NAME", "INDI") == 120
    assert max_length("NAME", "SUBM") == 60
    assert max_length("NAME") == DEFAULT_MAX_LENGTH
    assert max_length("_CUSTOM") == DEFAULT_MAX_LENGTH


def test_check_text_length_boundary() -> None:
    node = make_node("DATE")
    assert check_text("x" * 35, node, DecodeOptions()) == "x" * 35
    with pytest.raises(WrongLengthError):
        check_text("x" * 36, node, DecodeOptions())
    assert check_text("x" * 36, node, DecodeOptions(allow_wrong_length=True)) == "x" * 36


@pytest.mark.parametrize("value", ["a\rb", "a\nb", "trailing\r\n"])
def test_check_text_terminators(value: str) -> None:
    node = make_node("PLAC", lineno=9)
    with pytest.raises(TerminatorInValueError) as info:
        check_text(value, node, DecodeOptions())
    assert info.value.lineno == 9
    assert check_text(value, node, DecodeOptions(allow_terminators_in_value=True)) == value


def test_check_text_none_passes() -> None:
    assert check_text(None, make_node("DATE"), DecodeOptions()) is None


@pytest.mark.parametrize("value", ["@I1@", " @F12@ ", "@N-1@"])
def test_valid_pointers(value: str) -> None:
    assert pointer_of(make_node("FAMC", value=value), DecodeOptions()) == value.strip()


@pytest.mark.parametrize("value", ["I1", "@@", "@I1", "@I 1@x", "@"])
def test_invalid_pointers(value: str) -> None:
    node = make_node("FAMC", value=value)
    with pytest.raises(InvalidValueError):
        pointer_of(node, DecodeOptions())
    assert pointer_of(node, DecodeOptions(ignore_invalid_value=True)) is None


def test_missing_pointer_value_is_none() -> None:
    assert pointer_of(make_node("HUSB"), DecodeOptions()) is None
    assert pointer_of(None, DecodeOptions()) is None


def test_int_of() -> None:
    assert int_of(make_node("NCHI", value="12"), DecodeOptions()) == 12
    with pytest.raises(InvalidValueError):
        int_of(make_node("NCHI", value="-1"), DecodeOptions())


def test_note_of_pointer_or_text() -> None:
    assert note_of(make_node("NOTE", value="@N1@"), DecodeOptions()) == "@N1@"
    text = make_node("NOTE", value="a", children=[make_node("CONC", value="b", level=2)])
    assert note_of(text, DecodeOptions()) == "ab"


def test_collect_unhandled_is_recursive() -> None:
    node = make_node(
        "INDI",
        level=0,
        children=[
            make_node("SEX", value="F"),
            make_node("_CUST", value="x", lineno=3, children=[make_node("_SUB", value="y", level=2)]),
        ],
    )

    attrs = collect_unhandled(node, {"SEX"})

    assert len(attrs) == 1
    assert attrs[0].tag == "_CUST"
    assert attrs[0].lineno == 3
    assert attrs[0].children[0].tag == "_SUB"
    assert attrs[0].children[0].value == "y"


def test_require_tag() -> None:
    with pytest.raises(ValueError):
        require_tag(make_node("FAM"), "INDI")
