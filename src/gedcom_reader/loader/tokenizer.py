# src/gedcom_reader/loader/tokenizer.py

from __future__ import annotations

import codecs
import io
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

Source = Union[str, bytes, TextIO]

_CHUNK_SIZE = 8192
_TERMINATOR_CHARS = "\r\n"


class TokenKind(Enum):
    LEVEL = "level"
    XREF = "xref"
    TAG = "tag"
    VALUE = "value"
    END_OF_LINE = "end_of_line"


@dataclass(frozen=True)
class Token:
    """
    A single lexical token from a GEDCOM line.

    Attributes:
        kind: What the token is (level, xref, tag, value or end-of-line).
        text: Raw text payload ("" for END_OF_LINE).
        lineno: 1-based physical line number in the source.
    """
    kind: TokenKind
    text: str = ""
    lineno: int = 0


def _decode_bytes(data: bytes) -> str:
    """Decode raw bytes, honouring a UTF-16/UTF-8 BOM; default UTF-8."""
    if data.startswith(codecs.BOM_UTF16_LE) or data.startswith(codecs.BOM_UTF16_BE):
        return data.decode("utf-16", errors="replace")
    return data.decode("utf-8-sig", errors="replace")


def open_source(path: Union[str, Path]) -> TextIO:
    """
    Open a GEDCOM file as a text stream suitable for ``Tokenizer``.

    The stream keeps line terminators untranslated (``newline=""``) so the
    tokenizer can detect the document's terminator style.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("rb") as f:
        head = f.read(4)

    if head.startswith(codecs.BOM_UTF16_LE) or head.startswith(codecs.BOM_UTF16_BE):
        encoding = "utf-16"
    else:
        encoding = "utf-8-sig"

    return file_path.open("r", encoding=encoding, errors="replace", newline="")


def _as_stream(source: Source) -> TextIO:
    if isinstance(source, bytes):
        return io.StringIO(_decode_bytes(source), newline="")
    if isinstance(source, str):
        return io.StringIO(source, newline="")
    return source


def _detect_terminator(buffer: str, at_eof: bool) -> Optional[str]:
    """
    Return the terminator used by the first line in ``buffer``.

    Returns None when no terminator has been seen yet, or when the first
    terminator character sits at the end of the buffer and more input is
    needed to tell CR from CRLF (or LF from LFCR).
    """
    for i, ch in enumerate(buffer):
        if ch not in _TERMINATOR_CHARS:
            continue
        if i + 1 >= len(buffer):
            return ch if at_eof else None
        nxt = buffer[i + 1]
        if nxt in _TERMINATOR_CHARS and nxt != ch:
            return ch + nxt
        return ch
    return None


def _physical_lines(stream: TextIO) -> Iterator[str]:
    """
    Yield physical lines without their terminator.

    The terminator of the first line is locked in for the whole document;
    any other CR/LF characters stay inside the line they appear in.
    """
    buffer = ""
    terminator: Optional[str] = None
    at_eof = False

    while True:
        if not at_eof:
            chunk = stream.read(_CHUNK_SIZE)
            if chunk:
                buffer += chunk
            else:
                at_eof = True

        if terminator is None:
            terminator = _detect_terminator(buffer, at_eof)
            if terminator is None and not at_eof:
                continue

        if terminator is not None:
            while True:
                idx = buffer.find(terminator)
                if idx < 0:
                    break
                yield buffer[:idx]
                buffer = buffer[idx + len(terminator):]

        if at_eof:
            if buffer:
                yield buffer
            return


def _tokenize_line(raw: str, lineno: int) -> List[Token]:
    """
    Split one physical line into tokens.

    Order is always: LEVEL [XREF] TAG (VALUE | END_OF_LINE). A truncated
    line stops early with END_OF_LINE, which the line assembler reports as
    a malformed line.
    """
    tokens: List[Token] = []
    text = raw.lstrip(" \t")

    level, _, rest = text.partition(" ")
    tokens.append(Token(TokenKind.LEVEL, level, lineno))
    rest = rest.lstrip(" ")

    if rest.startswith("@"):
        word, _, after = rest.partition(" ")
        if len(word) >= 3 and word.endswith("@"):
            tokens.append(Token(TokenKind.XREF, word, lineno))
            rest = after.lstrip(" ")

    if not rest:
        tokens.append(Token(TokenKind.END_OF_LINE, "", lineno))
        return tokens

    tag, _, value = rest.partition(" ")
    tokens.append(Token(TokenKind.TAG, tag, lineno))

    if value:
        tokens.append(Token(TokenKind.VALUE, value, lineno))
    else:
        tokens.append(Token(TokenKind.END_OF_LINE, "", lineno))
    return tokens


class Tokenizer:
    """
    Lazy token stream over a GEDCOM document.

    Accepts a ``str``, ``bytes`` or a text stream. Iteration is finite and
    not restartable; ``StopIteration`` marks the end of input.

    Example:
        >>> [t.kind.name for t in Tokenizer("0 HEAD\\n")]
        ['LEVEL', 'TAG', 'END_OF_LINE']
    """

    def __init__(self, source: Source) -> None:
        self._stream = _as_stream(source)
        self._tokens = self._generate()

    def _generate(self) -> Iterator[Token]:
        for lineno, raw in enumerate(_physical_lines(self._stream), start=1):
            if lineno == 1 and raw.startswith("\ufeff"):
                raw = raw.lstrip("\ufeff")

            # Blank lines are not meaningful in GEDCOM.
            if not raw.strip():
                continue

            yield from _tokenize_line(raw, lineno)

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def close(self) -> None:
        self._stream.close()
