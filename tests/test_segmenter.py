# tests/test_segmenter.py

from __future__ import annotations

import pytest

from gedcom_reader.core.exceptions import InvalidLevelError
from gedcom_reader.loader import (
    Line,
    LineAssembler,
    Tokenizer,
    build_line_tree,
    check_level_step,
    reconstruct_text,
)


def lines_at(*levels: int):
    return [Line(level=lvl, tag=f"T{i}", lineno=i + 1) for i, lvl in enumerate(levels)]


def tree_of(text: str):
    return build_line_tree(list(LineAssembler(Tokenizer(text))))


def test_build_line_tree_mixed_depths() -> None:
    root = build_line_tree(lines_at(0, 1, 2, 1, 2, 2))
    assert [c.tag for c in root.children] == ["T1", "T3"]
    assert [c.tag for c in root.children[0].children] == ["T2"]
    assert [c.tag for c in root.children[1].children] == ["T4", "T5"]


def test_build_line_tree_pops_to_shallower_levels() -> None:
    root = build_line_tree(lines_at(0, 1, 2, 3, 1))
    assert [c.tag for c in root.children] == ["T1", "T4"]
    assert root.children[0].children[0].children[0].tag == "T3"


def test_check_level_step() -> None:
    line = Line(level=3, tag="DATE", lineno=3)
    check_level_step(line, 2)
    with pytest.raises(InvalidLevelError) as info:
        check_level_step(line, 1)
    assert info.value.lineno == 3


def test_first_line_must_be_level_zero() -> None:
    with pytest.raises(InvalidLevelError):
        check_level_step(Line(level=1, tag="HEAD", lineno=1), -1)


def test_build_line_tree_rejects_orphan() -> None:
    with pytest.raises(InvalidLevelError):
        build_line_tree(lines_at(0, 2))


def test_build_line_tree_requires_lines() -> None:
    with pytest.raises(ValueError):
        build_line_tree([])


def test_tree_helpers() -> None:
    text = "0 @I1@ INDI\n1 NAME A /B/\n2 GIVN A\n1 SEX F\n1 NAME C /D/\n"
    tree = tree_of(text)

    assert tree.xref == "@I1@"
    assert len(tree.find_children("NAME")) == 2
    assert tree.find_first("SEX").value == "F"
    assert tree.first_value("NAME") == "A /B/"
    assert tree.first_value("DEAT") is None
    assert [n.tag for n in tree.iter_subtree()] == ["INDI", "NAME", "GIVN", "SEX", "NAME"]


def test_reconstruct_text_conc_and_cont() -> None:
    text = (
        "0 @N1@ NOTE Line one\n"
        "1 CONC  and more\n"
        "1 CONT Second line\n"
        "1 CONC  more text\n"
        "1 SOUR @S1@\n"
    )
    tree = tree_of(text)
    assert reconstruct_text(tree) == "Line one and more\nSecond line more text"


def test_reconstruct_text_empty_cont_is_blank_line() -> None:
    tree = tree_of("0 NOTE a\n1 CONT\n1 CONT b\n")
    assert reconstruct_text(tree) == "a\n\nb"
