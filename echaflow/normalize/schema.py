# normalize/schema.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional

from ..errors import UnknownSubsection

SENTINEL = "N/A"

# TSV column header -> Record attribute
TSV_COLUMNS = [
    ("idcoordinates2D", "id_coordinates_2d"),
    ("FragFp", "frag_fp"),
    ("EC", "ec_id"),
    ("Weblink", "weblink"),
    ("Structure", "structure"),
    ("Section", "section"),
    ("Image", "image"),
    ("Subsection", "subsection"),
    ("Name", "name"),
    ("Reference Substance", "substance"),
    ("Constitute", "constituent"),
    ("Reference EC", "ec"),
    ("Reference CAS", "cas"),
]

RECORD_HEADERS = [header for header, _ in TSV_COLUMNS]


class Subsection(Enum):
    """Subsections of the Composition(s) section, valued by their page label."""

    BOUNDARY = "Boundary Composition(s)"
    LEGAL_ENTITY = "Legal Entity Composition(s)"
    GENERATED = "Composition(s) generated upon use"
    OTHER = "Other types of composition(s)"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, text: str) -> "Subsection":
        """Parse an exact header label, raising `UnknownSubsection` otherwise."""
        for member in cls:
            if member.value == text:
                return member
        raise UnknownSubsection(text)


@dataclass(frozen=True)
class Section:
    """A section of the dossier page; hashable so it can key the cache.

    Use `Section.IDENTIFICATION` or `Section.composition(subsection)`.
    """

    kind: str
    subsection: Optional[Subsection] = None

    IDENTIFICATION: ClassVar["Section"]
    IDENTIFICATION_KIND: ClassVar[str] = "Identification"
    COMPOSITION_KIND: ClassVar[str] = "Composition(s)"

    @classmethod
    def composition(cls, subsection: Subsection) -> "Section":
        return cls(cls.COMPOSITION_KIND, subsection)

    @property
    def is_identification(self) -> bool:
        return self.kind == self.IDENTIFICATION_KIND

    def __str__(self) -> str:
        if self.subsection is not None:
            return self.subsection.label
        return self.kind


Section.IDENTIFICATION = Section(Section.IDENTIFICATION_KIND)

# Names accepted on the command line, in the default extraction order.
SECTION_NAMES: Dict[str, Section] = {
    "identification": Section.IDENTIFICATION,
    "boundary": Section.composition(Subsection.BOUNDARY),
    "legal-entity": Section.composition(Subsection.LEGAL_ENTITY),
    "generated": Section.composition(Subsection.GENERATED),
    "other": Section.composition(Subsection.OTHER),
}


@dataclass(frozen=True)
class Record:
    """One constituent entry of one panel of one section.

    `weblink`, `ec_id`, `frag_fp`, `id_coordinates_2d`, `structure` and
    `pubchem_cas` are left for downstream enrichment.  `formula` and
    `pubchem_cas` are not written to TSV.
    """

    id_coordinates_2d: str = SENTINEL
    frag_fp: str = SENTINEL
    ec_id: str = SENTINEL
    weblink: str = SENTINEL
    structure: str = SENTINEL
    section: str = SENTINEL
    image: str = SENTINEL
    subsection: str = SENTINEL
    name: str = SENTINEL
    substance: str = SENTINEL
    constituent: str = SENTINEL
    ec: str = SENTINEL
    cas: str = SENTINEL
    formula: str = SENTINEL
    pubchem_cas: str = SENTINEL

    def to_tsv_row(self) -> List[str]:
        return [getattr(self, attr) for _, attr in TSV_COLUMNS]

    @classmethod
    def from_tsv_row(cls, row: Dict[str, str]) -> "Record":
        return cls(**{attr: row[header] for header, attr in TSV_COLUMNS if header in row})


EchaData = List[Record]
RawFields = Dict[str, str]
