"""
Error taxonomy for the GEDCOM decoder.

Every error raised while decoding derives from ``GedcomError`` so callers can
catch the whole family at once, or a single branch of it:

    TokenShapeError    a line could not be assembled from the token stream
    StructureError     document / nesting grammar violated
    UnknownTagError    top-level tag is neither known nor an extension
    BuilderError       a record builder rejected a field
"""

from __future__ import annotations

from typing import Optional


class GedcomError(Exception):
    """Base error for everything raised by ``gedcom_reader``."""

    def __init__(
        self,
        message: str,
        *,
        lineno: Optional[int] = None,
        tag: Optional[str] = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.tag = tag
        super().__init__(self._format())

    def _format(self) -> str:
        if self.lineno:
            return f"Line {self.lineno}: {self.message}"
        return self.message


# -----------------------------------------------------------------------------
# Token-shape errors (never masked by an option)
# -----------------------------------------------------------------------------

class TokenShapeError(GedcomError):
    """A line could not be assembled from the available tokens."""


class MalformedLevelError(TokenShapeError):
    """Expected a numeric level token at the start of a line."""


class MalformedTagError(TokenShapeError):
    """Expected a tag token after the level (and optional xref)."""


class MalformedValueError(TokenShapeError):
    """Expected a value or end-of-line token after the tag."""


# -----------------------------------------------------------------------------
# Structural errors
# -----------------------------------------------------------------------------

class StructureError(GedcomError):
    """Raised when document-level or nesting rules are violated."""


class MissingHeaderError(StructureError):
    """The document does not start with a HEAD record."""


class NoRecordsError(StructureError):
    """The trailer was reached before any content record."""


class InvalidLevelError(StructureError):
    """A line is nested more than one level deeper than its predecessor."""


class DuplicateHeaderError(StructureError):
    """A second HEAD record appeared after the first."""


class UnexpectedEndOfInputError(GedcomError):
    """The input ended before the TRLR record."""


class UnknownTagError(GedcomError):
    """A top-level tag is not a known record type or extension."""


# -----------------------------------------------------------------------------
# Builder errors (field level, each gated by its own option)
# -----------------------------------------------------------------------------

class BuilderError(GedcomError):
    """A record builder could not map a line tree onto its record."""


class MissingRequiredError(BuilderError):
    """A required child line is absent."""


class WrongLengthError(BuilderError):
    """A value is longer than the maximum allowed for its tag."""


class MoreThanAllowedError(BuilderError):
    """A child tag occurs more often than allowed."""


class InvalidValueError(BuilderError):
    """A value does not have the expected syntax."""


class UnknownCharsetError(BuilderError):
    """The header declares a character set the decoder does not know."""


class TerminatorInValueError(BuilderError):
    """A value contains an embedded CR or LF character."""


# -----------------------------------------------------------------------------
# Orchestration
# -----------------------------------------------------------------------------

class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when decoding fails inside the pipeline."""
