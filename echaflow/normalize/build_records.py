"""
Record builder.

Turns the blocks of a parsed dossier page into `Record` rows.  The
Identification section is a single block right after the
``#sIdentification`` marker.  Each composition subsection is a run of
panels (see `classify`), each panel carrying a title and one block per
constituent.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from ..errors import StructuralAnchorMissing
from .classify import UnknownHeaderPolicy, panels_for
from .html_to_fields import CONSTITUENT_KEY, IMAGE_KEY, extract_fields
from .schema import SENTINEL, EchaData, RawFields, Record, Section

logger = logging.getLogger(__name__)

IDENTIFICATION_SELECTOR = "#sIdentification + div.sBlock"
BLOCK_SELECTOR = "div.sBlock"
TITLE_SELECTOR = "h4.panel-title"
NAME_KEY = "Name"


def panel_title(panel: Tag) -> str:
    """Join the non-empty text nodes under the panel title, if any."""
    parts = []
    for title in panel.select(TITLE_SELECTOR):
        parts.extend(s.strip() for s in title.strings if s.strip())
    return "".join(parts)


def identification_records(document: BeautifulSoup) -> EchaData:
    anchor = document.select_one(IDENTIFICATION_SELECTOR)
    if anchor is None:
        raise StructuralAnchorMissing(IDENTIFICATION_SELECTOR, "identification")

    wrap = extract_fields(anchor)
    return [
        Record(
            section=Section.IDENTIFICATION_KIND,
            subsection=SENTINEL,
            image=wrap.get(IMAGE_KEY, SENTINEL),
            name=wrap.get("Display Name", SENTINEL),
            substance=wrap.get("Display Name", SENTINEL),
            constituent=wrap.get(CONSTITUENT_KEY, SENTINEL),
            ec=wrap.get("EC Number", SENTINEL),
            cas=wrap.get("CAS Number", SENTINEL),
            formula=wrap.get("Molecular formula", SENTINEL),
        )
    ]


def composition_record(wrap: RawFields, section: Section) -> Record:
    return Record(
        section=Section.COMPOSITION_KIND,
        subsection=str(section),
        image=wrap.get(IMAGE_KEY, SENTINEL),
        name=wrap.get(NAME_KEY, SENTINEL),
        substance=wrap.get("Reference substance name", SENTINEL),
        constituent=wrap.get(CONSTITUENT_KEY, SENTINEL),
        ec=wrap.get("EC Number", SENTINEL),
        cas=wrap.get("CAS Number", SENTINEL),
        formula=wrap.get("Molecular formula", SENTINEL),
    )


def composition_records(
    document: BeautifulSoup,
    section: Section,
    policy: UnknownHeaderPolicy = UnknownHeaderPolicy.KEEP,
) -> EchaData:
    records: EchaData = []
    for panel in panels_for(document, section, policy):
        title = panel_title(panel)
        for block in panel.select(BLOCK_SELECTOR):
            wrap = extract_fields(block)
            # The panel title is the name, whatever the block says.
            wrap[NAME_KEY] = title
            records.append(composition_record(wrap, section))
        logger.debug("Panel %r: %d records so far", title, len(records))
    return records


def data_from(
    document: BeautifulSoup,
    section: Section,
    policy: UnknownHeaderPolicy = UnknownHeaderPolicy.KEEP,
) -> EchaData:
    """Build the records of one section of the page.

    Raises:
        StructuralAnchorMissing: the Identification block is absent.
    """
    if section.is_identification:
        return identification_records(document)
    return composition_records(document, section, policy)
