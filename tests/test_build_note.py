from gedcom_reader.core.exceptions import TerminatorInValueError
from gedcom_reader.loader import Line, LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.build_note import build_note

import pytest


def make_node(tag, value=None, xref=None, children=None, level=0, lineno=1):
    return LineTree(
        line=Line(level=level, tag=tag, xref=xref, value=value, lineno=lineno),
        children=children or [],
    )


def test_build_note_continuations():
    note = make_node(
        "NOTE",
        xref="@N1@",
        value="First line",
        children=[
            make_node("CONC", value=" continues", level=1),
            make_node("CONT", value="Second line", level=1),
            make_node("SOUR", value="@S1@", level=1),
            make_node("_FLAG", value="Y", level=1),
        ],
    )

    record = build_note(note, DecodeOptions())

    assert record.xref == "@N1@"
    assert record.text == "First line continues\nSecond line"
    assert record.sources == ["@S1@"]
    assert [a.tag for a in record.attributes] == ["_FLAG"]


def test_note_without_value():
    record = build_note(make_node("NOTE", xref="@N2@"), DecodeOptions())
    assert record.text == ""


def test_embedded_terminator_gate():
    note = make_node("NOTE", xref="@N1@", value="one\rtwo")

    with pytest.raises(TerminatorInValueError):
        build_note(note, DecodeOptions())

    record = build_note(note, DecodeOptions(allow_terminators_in_value=True))
    assert record.text == "one\rtwo"


def test_terminator_in_continuation_line():
    note = make_node(
        "NOTE",
        value="ok",
        children=[make_node("CONC", value="bad\nvalue", level=1, lineno=2)],
    )

    with pytest.raises(TerminatorInValueError) as info:
        build_note(note, DecodeOptions())
    assert info.value.lineno == 2
