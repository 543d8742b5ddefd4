# src/gedcom_reader/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_reader.loader import (
        Token,
        TokenKind,
        Tokenizer,
        Line,
        LineAssembler,
        LineTree,
        build_line_tree,
        reconstruct_text,
    )
"""

from __future__ import annotations

from .tokenizer import Token, TokenKind, Tokenizer, open_source
from .line_assembler import Line, LineAssembler
from .segmenter import (
    LineTree,
    build_line_tree,
    check_level_step,
    reconstruct_text,
)

__all__ = [
    "Token",
    "TokenKind",
    "Tokenizer",
    "open_source",
    "Line",
    "LineAssembler",
    "LineTree",
    "build_line_tree",
    "check_level_step",
    "reconstruct_text",
]
