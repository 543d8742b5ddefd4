from gedcom_reader.core.exceptions import MoreThanAllowedError, UnknownCharsetError, WrongLengthError
from gedcom_reader.loader import Line, LineTree
from gedcom_reader.options import DecodeOptions
from gedcom_reader.records.build_header import build_header

import pytest


def make_node(tag, value=None, xref=None, children=None, level=0, lineno=1):
    return LineTree(
        line=Line(level=level, tag=tag, xref=xref, value=value, lineno=lineno),
        children=children or [],
    )


def header_with_charset(charset):
    return make_node("HEAD", children=[make_node("CHAR", value=charset, level=1)])


def test_build_header_fields():
    head = make_node(
        "HEAD",
        children=[
            make_node(
                "SOUR",
                value="APP",
                level=1,
                children=[
                    make_node("VERS", value="1.0", level=2),
                    make_node("NAME", value="Example App", level=2),
                ],
            ),
            make_node("DEST", value="ANY", level=1),
            make_node(
                "DATE",
                value="1 JAN 2024",
                level=1,
                children=[make_node("TIME", value="12:00:00", level=2)],
            ),
            make_node("SUBM", value="@U1@", level=1),
            make_node(
                "GEDC",
                level=1,
                children=[
                    make_node("VERS", value="5.5.1", level=2),
                    make_node("FORM", value="LINEAGE-LINKED", level=2),
                ],
            ),
            make_node("CHAR", value="UTF-8", level=1),
            make_node("LANG", value="English", level=1),
            make_node("_HME", value="@I1@", level=1),
        ],
    )

    header = build_header(head, DecodeOptions())

    assert header.kind == "HEAD"
    assert header.source == "APP"
    assert header.source_version == "1.0"
    assert header.source_name == "Example App"
    assert header.destination == "ANY"
    assert header.date == "1 JAN 2024"
    assert header.time == "12:00:00"
    assert header.submitter == "@U1@"
    assert header.gedcom_version == "5.5.1"
    assert header.gedcom_form == "LINEAGE-LINKED"
    assert header.charset == "UTF-8"
    assert header.language == "English"
    assert [a.tag for a in header.attributes] == ["_HME"]


def test_bare_header_decodes():
    header = build_header(make_node("HEAD"), DecodeOptions())
    assert header.source is None
    assert header.charset is None


@pytest.mark.parametrize("charset", ["ANSEL", "UTF-8", "unicode", "ASCII"])
def test_known_charsets(charset):
    assert build_header(header_with_charset(charset), DecodeOptions()).charset == charset


def test_unknown_charset_gate():
    with pytest.raises(UnknownCharsetError):
        build_header(header_with_charset("KLINGON"), DecodeOptions())

    header = build_header(header_with_charset("KLINGON"), DecodeOptions(allow_unknown_charset=True))
    assert header.charset == "KLINGON"


def test_repeated_header_child():
    head = make_node(
        "HEAD",
        children=[make_node("SOUR", value="A", level=1), make_node("SOUR", value="B", level=1)],
    )
    with pytest.raises(MoreThanAllowedError):
        build_header(head, DecodeOptions())


def test_product_name_length_limit():
    def head_with_product_name(name):
        sour = make_node("SOUR", value="APP", level=1, children=[make_node("NAME", value=name, level=2)])
        return make_node("HEAD", children=[sour])

    assert build_header(head_with_product_name("n" * 90), DecodeOptions()).source_name == "n" * 90
    with pytest.raises(WrongLengthError) as info:
        build_header(head_with_product_name("n" * 91), DecodeOptions())
    assert info.value.tag == "NAME"
