from gedcom_reader.core.exceptions import WrongLengthError
from gedcom_reader.loader import Line, LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.build_individual import build_individual

import pytest


def make_node(tag, value=None, xref=None, children=None, level=0, lineno=1):
    return LineTree(
        line=Line(level=level, tag=tag, xref=xref, value=value, lineno=lineno),
        children=children or [],
    )


def test_build_individual_basic():
    indi = make_node(
        "INDI",
        xref="@I1@",
        children=[
            make_node(
                "NAME",
                value="John /Doe/",
                level=1,
                children=[
                    make_node("GIVN", value="John", level=2),
                    make_node("SURN", value="Doe", level=2),
                    make_node("_MARNM", value="Smith", level=2),
                ],
            ),
            make_node("SEX", value="M", level=1),
            make_node("FAMC", value="@F1@", level=1),
            make_node("FAMS", value="@F2@", level=1),
            make_node("OCCU", value="Farmer", level=1),
            make_node("NOTE", value="@N1@", level=1),
            make_node("_UID", value="abc123", level=1),
        ],
    )

    record = build_individual(indi, DecodeOptions())

    assert record.xref == "@I1@"
    assert record.sex == "M"

    name = record.names[0]
    assert name.full == "John /Doe/"
    assert name.given == "John"
    assert name.surname == "Doe"
    assert name.raw == {"_MARNM": "Smith"}

    assert record.families_as_child == ["@F1@"]
    assert record.families_as_spouse == ["@F2@"]
    assert [e.tag for e in record.events] == ["OCCU"]
    assert record.events[0].value == "Farmer"
    assert record.notes == ["@N1@"]
    assert [a.tag for a in record.attributes] == ["_UID"]


def test_individual_without_xref():
    record = build_individual(make_node("INDI"), DecodeOptions())
    assert record.xref is None
    assert record.names == []


def test_event_notes_and_sources():
    indi = make_node(
        "INDI",
        xref="@I1@",
        children=[
            make_node(
                "BIRT",
                level=1,
                children=[
                    make_node("DATE", value="ABT 1850", level=2),
                    make_node("NOTE", value="From the parish book", level=2),
                    make_node("SOUR", value="@S1@", level=2),
                ],
            ),
        ],
    )

    birth = build_individual(indi, DecodeOptions()).events[0]

    assert birth.value is None
    assert birth.date == "ABT 1850"
    assert birth.notes == ["From the parish book"]
    assert birth.sources == ["@S1@"]


def test_overlong_name_gate():
    indi = make_node("INDI", children=[make_node("NAME", value="x" * 121, level=1)])

    with pytest.raises(WrongLengthError) as info:
        build_individual(indi, DecodeOptions())
    assert info.value.tag == "NAME"

    record = build_individual(indi, DecodeOptions(allow_wrong_length=True))
    assert len(record.names[0].full) == 121


def test_inline_object_block_is_kept():
    indi = make_node(
        "INDI",
        xref="@I1@",
        children=[
            make_node("OBJE", value="@O1@", level=1),
            make_node(
                "OBJE",
                level=1,
                lineno=3,
                children=[
                    make_node("FILE", value="a.jpg", level=2),
                    make_node("FORM", value="jpg", level=2),
                ],
            ),
        ],
    )

    record = build_individual(indi, DecodeOptions())

    assert record.objects == ["@O1@"]
    (inline,) = record.attributes
    assert inline.tag == "OBJE"
    assert inline.lineno == 3
    assert [(c.tag, c.value) for c in inline.children] == [("FILE", "a.jpg"), ("FORM", "jpg")]
