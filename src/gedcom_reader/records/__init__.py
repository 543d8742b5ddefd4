from __future__ import annotations

from .entities import (
    EventRecord,
    FamilyRecord,
    GenericAttribute,
    HeaderRecord,
    IndividualRecord,
    MediaFile,
    NameRecord,
    NoteRecord,
    ObjectRecord,
    Record,
    RepositoryRecord,
    SourceRecord,
    SubmissionRecord,
    SubmitterRecord,
    TrailerRecord,
    UnknownExtensionRecord,
)

__all__ = [
    "EventRecord",
    "FamilyRecord",
    "GenericAttribute",
    "HeaderRecord",
    "IndividualRecord",
    "MediaFile",
    "NameRecord",
    "NoteRecord",
    "ObjectRecord",
    "Record",
    "RepositoryRecord",
    "SourceRecord",
    "SubmissionRecord",
    "SubmitterRecord",
    "TrailerRecord",
    "UnknownExtensionRecord",
]
