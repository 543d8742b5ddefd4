# src/gedcom_reader/loader/line_assembler.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gedcom_reader.core.exceptions import (
    MalformedLevelError,
    MalformedTagError,
    MalformedValueError,
)
from .tokenizer import Token, TokenKind


@dataclass(frozen=True)
class Line:
    """
    One structural GEDCOM line.

    Attributes:
        level: Nesting depth (0 for records, >0 for substructures).
        xref: Optional cross-reference identifier, e.g. "@I1@".
        tag: GEDCOM tag, e.g. "INDI", "NAME".
        value: Line value, or None when the line carries none.
        lineno: 1-based physical line number (diagnostics only).
    """
    level: int
    tag: str
    xref: Optional[str] = None
    value: Optional[str] = None
    lineno: int = 0

    def __str__(self) -> str:
        parts = [str(self.level)]
        if self.xref:
            parts.append(self.xref)
        parts.append(self.tag)
        if self.value is not None:
            parts.append(self.value)
        return " ".join(parts)


class LineAssembler:
    """
    Build ``Line`` objects from a token stream, 2-4 tokens at a time.

    ``next()`` returns None once the stream is exhausted at a line boundary.
    Errors only affect the call that raised them; the decoder decides
    whether the session can continue.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._lineno = 0

    def _pull(self) -> Optional[Token]:
        tok = next(self._tokens, None)
        if tok is not None:
            self._lineno = tok.lineno
        return tok

    def next(self) -> Optional[Line]:
        tok = self._pull()
        if tok is None:
            return None

        # --- 1. Level ------------------------------------------------------
        if tok.kind is not TokenKind.LEVEL:
            raise MalformedLevelError(
                f"expected level, found {tok.kind.value} {tok.text!r}",
                lineno=tok.lineno,
            )
        if not (tok.text.isascii() and tok.text.isdigit()):
            raise MalformedLevelError(
                f"level is not numeric -> {tok.text!r}", lineno=tok.lineno
            )
        level = int(tok.text)

        # --- 2. Optional xref ----------------------------------------------
        xref: Optional[str] = None
        tok = self._pull()
        if tok is not None and tok.kind is TokenKind.XREF:
            xref = tok.text
            tok = self._pull()

        # --- 3. Tag --------------------------------------------------------
        if tok is None or tok.kind is not TokenKind.TAG:
            found = "end of input" if tok is None else tok.kind.value
            raise MalformedTagError(f"expected tag, found {found}", lineno=self._lineno)
        tag = tok.text

        # --- 4. Value or end of line ---------------------------------------
        tok = self._pull()
        if tok is None:
            raise MalformedValueError(
                "expected value or end of line, found end of input",
                lineno=self._lineno,
                tag=tag,
            )
        if tok.kind is TokenKind.END_OF_LINE:
            value = None
        elif tok.kind is TokenKind.VALUE:
            value = tok.text
        else:
            raise MalformedValueError(
                f"expected value or end of line, found {tok.kind.value}",
                lineno=tok.lineno,
                tag=tag,
            )

        return Line(level=level, xref=xref, tag=tag, value=value, lineno=self._lineno)

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.next()
            if line is None:
                return
            yield line
