from gedcom_reader.core.exceptions import InvalidValueError, MoreThanAllowedError
from gedcom_reader.loader import Line, LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.build_family import build_family

import pytest


def make_node(tag, value=None, xref=None, children=None, level=0, lineno=1):
    return LineTree(
        line=Line(level=level, tag=tag, xref=xref, value=value, lineno=lineno),
        children=children or [],
    )


def test_build_family_basic():
    fam = make_node(
        "FAM",
        xref="@F1@",
        children=[
            make_node("HUSB", value="@I1@", level=1),
            make_node("WIFE", value="@I2@", level=1),
            make_node("CHIL", value="@I3@", level=1),
            make_node("NOTE", value="Married in town hall", level=1),
            make_node("SOUR", value="@S1@", level=1),
            make_node("NCHI", value="1", level=1),
            make_node("_MSTAT", value="married", level=1),
        ],
    )

    record = build_family(fam, DecodeOptions())

    assert record.xref == "@F1@"
    assert record.kind == "FAM"
    assert record.husband == "@I1@"
    assert record.wife == "@I2@"
    assert record.children == ["@I3@"]
    assert record.child_count == 1
    assert "Married in town hall" in record.notes
    assert "@S1@" in record.sources

    # Lossless: custom tags land in attributes
    assert any(a.tag == "_MSTAT" and a.value == "married" for a in record.attributes)
    assert record.tree is fam


def test_build_family_events():
    fam = make_node(
        "FAM",
        xref="@F1@",
        children=[
            make_node(
                "MARR",
                level=1,
                lineno=2,
                children=[
                    make_node("DATE", value="1 JAN 1900", level=2),
                    make_node("PLAC", value="Springfield", level=2),
                ],
            ),
            make_node("DIV", value="Y", level=1),
        ],
    )

    record = build_family(fam, DecodeOptions())

    assert [e.tag for e in record.events] == ["MARR", "DIV"]
    marr = record.events[0]
    assert marr.date == "1 JAN 1900"
    assert marr.place == "Springfield"
    assert marr.lineno == 2
    assert record.events[1].value == "Y"


def test_two_husbands_rejected_unless_allowed():
    fam = make_node(
        "FAM",
        children=[
            make_node("HUSB", value="@I1@", level=1),
            make_node("HUSB", value="@I2@", level=1),
        ],
    )

    with pytest.raises(MoreThanAllowedError):
        build_family(fam, DecodeOptions())

    record = build_family(fam, DecodeOptions(allow_more_than_allowed=True))
    assert record.husband == "@I1@"


def test_bad_pointer_and_count():
    fam = make_node(
        "FAM",
        children=[
            make_node("CHIL", value="I3", level=1),
            make_node("NCHI", value="two", level=1),
        ],
    )

    with pytest.raises(InvalidValueError):
        build_family(fam, DecodeOptions())

    record = build_family(fam, DecodeOptions(ignore_invalid_value=True))
    assert record.children == []
    assert record.child_count is None


def test_inline_object_block_is_kept():
    fam = make_node(
        "FAM",
        xref="@F1@",
        children=[
            make_node("OBJE", level=1, children=[make_node("FILE", value="wedding.jpg", level=2)]),
        ],
    )

    record = build_family(fam, DecodeOptions())

    assert record.objects == []
    assert record.attributes[0].tag == "OBJE"
    assert record.attributes[0].children[0].value == "wedding.jpg"
