from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from gedcom_reader.loader.segmenter import LineTree


# -----------------------------
# Small atoms
# -----------------------------

@dataclass(slots=True)
class GenericAttribute:
    """
    Lossless capture of unmodeled GEDCOM tags.

    Supports:
      - nested substructures (children)
      - source line tracking (lineno)
      - vendor / future GEDCOM extensions
    """
    tag: str
    value: Optional[str] = None
    xref: Optional[str] = None

    # Nested tag/value structures preserved verbatim
    children: List["GenericAttribute"] = field(default_factory=list)

    # Original GEDCOM line number (if available)
    lineno: Optional[int] = None


@dataclass(slots=True)
class NameRecord:
    """GEDCOM NAME substructure of an individual."""
    full: str = ""
    given: Optional[str] = None
    surname: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    name_type: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class EventRecord:
    """
    Individual/family event or attribute (BIRT, MARR, OCCU, ...).

    Dates and places are kept verbatim; no calendar parsing happens here.
    """
    tag: str
    value: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    event_type: Optional[str] = None
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    lineno: Optional[int] = None


@dataclass(slots=True)
class MediaFile:
    path: str
    form: Optional[str] = None
    media_type: Optional[str] = None
    title: Optional[str] = None


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class Record:
    """
    Base class of every decoded top-level record.

    ``tree`` keeps the line tree the record was built from; it is excluded
    from equality so two decodes of the same input compare equal.
    """
    TAG: ClassVar[str] = ""

    xref: Optional[str] = None
    attributes: List[GenericAttribute] = field(default_factory=list)
    tree: Optional["LineTree"] = field(default=None, repr=False, compare=False)

    @property
    def kind(self) -> str:
        return self.TAG


@dataclass(slots=True)
class HeaderRecord(Record):
    TAG: ClassVar[str] = "HEAD"

    source: Optional[str] = None
    source_version: Optional[str] = None
    source_name: Optional[str] = None
    destination: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    submitter: Optional[str] = None
    submission: Optional[str] = None
    file_name: Optional[str] = None
    copyright: Optional[str] = None
    gedcom_version: Optional[str] = None
    gedcom_form: Optional[str] = None
    charset: Optional[str] = None
    charset_version: Optional[str] = None
    language: Optional[str] = None
    place_form: Optional[str] = None
    note: Optional[str] = None


@dataclass(slots=True)
class SubmitterRecord(Record):
    TAG: ClassVar[str] = "SUBM"

    name: Optional[str] = None
    address: Optional[str] = None
    phones: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    rfn: Optional[str] = None
    rin: Optional[str] = None


@dataclass(slots=True)
class FamilyRecord(Record):
    TAG: ClassVar[str] = "FAM"

    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    child_count: Optional[int] = None
    events: List[EventRecord] = field(default_factory=list)
    submitters: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    rin: Optional[str] = None


@dataclass(slots=True)
class IndividualRecord(Record):
    TAG: ClassVar[str] = "INDI"

    names: List[NameRecord] = field(default_factory=list)
    sex: Optional[str] = None
    events: List[EventRecord] = field(default_factory=list)
    families_as_child: List[str] = field(default_factory=list)   # FAMC
    families_as_spouse: List[str] = field(default_factory=list)  # FAMS
    aliases: List[str] = field(default_factory=list)
    submitters: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    rfn: Optional[str] = None
    afn: Optional[str] = None
    rin: Optional[str] = None


@dataclass(slots=True)
class ObjectRecord(Record):
    TAG: ClassVar[str] = "OBJE"

    title: Optional[str] = None
    files: List[MediaFile] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    rin: Optional[str] = None


@dataclass(slots=True)
class NoteRecord(Record):
    TAG: ClassVar[str] = "NOTE"

    text: str = ""
    sources: List[str] = field(default_factory=list)
    rin: Optional[str] = None


@dataclass(slots=True)
class RepositoryRecord(Record):
    TAG: ClassVar[str] = "REPO"

    name: Optional[str] = None
    address: Optional[str] = None
    phones: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    rin: Optional[str] = None


@dataclass(slots=True)
class SourceRecord(Record):
    TAG: ClassVar[str] = "SOUR"

    title: Optional[str] = None
    author: Optional[str] = None
    publication: Optional[str] = None
    abbreviation: Optional[str] = None
    text: Optional[str] = None
    repositories: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    rin: Optional[str] = None


@dataclass(slots=True)
class SubmissionRecord(Record):
    TAG: ClassVar[str] = "SUBN"

    submitter: Optional[str] = None
    family_file: Optional[str] = None
    temple: Optional[str] = None
    ancestor_generations: Optional[int] = None
    descendant_generations: Optional[int] = None
    ordinance_process: Optional[str] = None
    rin: Optional[str] = None


@dataclass(slots=True)
class TrailerRecord(Record):
    """End-of-stream marker; also returned when a missing TRLR was tolerated."""
    TAG: ClassVar[str] = "TRLR"

    synthesized: bool = False


@dataclass(slots=True)
class UnknownExtensionRecord(Record):
    """Top-level record with a custom ``_TAG`` or a tolerated unknown tag."""

    tag: str = ""
    value: Optional[str] = None

    @property
    def kind(self) -> str:
        return self.tag
