"""
Composition panel classifier.

The Composition(s) area of a dossier page is a flat run of subsection
headers (``div.panel-group > h4``) and panels (``div.panel``).  A
panel belongs to whichever header most recently preceded it, so the
panels are tagged in a single left-to-right pass that carries the
current subsection along as state.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, Tuple

from bs4 import BeautifulSoup, Tag

from ..errors import UnknownSubsection
from .schema import Section, Subsection

logger = logging.getLogger(__name__)

PANELS_SELECTOR = "div.panel-group > h4, div.panel.panel-default"
HEADER_TAG = "h4"
# Text of the expand/collapse toggle rendered inside each header.
TOGGLE_TEXT = "open allclose all"


class UnknownHeaderPolicy(str, Enum):
    """What the scan does with a header that is not a known subsection."""

    KEEP = "keep"
    OTHER = "other"
    ABORT = "abort"


def header_label(node: Tag) -> str:
    """Collapse a header's text nodes into its subsection label."""
    parts = [s.strip().replace("\n", "").replace("\t", "") for s in node.strings]
    return "".join(parts).replace(TOGGLE_TEXT, "")


def _scan(document: BeautifulSoup, policy: UnknownHeaderPolicy) -> Iterator[Tuple[Section, Tag]]:
    state = Section.composition(Subsection.OTHER)
    for node in document.select(PANELS_SELECTOR):
        if node.name != HEADER_TAG:
            yield state, node
            continue

        label = header_label(node)
        try:
            state = Section.composition(Subsection.from_label(label))
        except UnknownSubsection:
            if policy is UnknownHeaderPolicy.ABORT:
                logger.warning("Unknown subsection header %r; remaining panels discarded", label)
                return
            if policy is UnknownHeaderPolicy.OTHER:
                logger.warning("Unknown subsection header %r; following panels tagged as %s",
                               label, Subsection.OTHER.label)
                state = Section.composition(Subsection.OTHER)
            else:
                logger.warning("Unknown subsection header %r; keeping %s", label, state)


def classify_panels(
    document: BeautifulSoup,
    policy: UnknownHeaderPolicy = UnknownHeaderPolicy.KEEP,
) -> List[Tuple[Section, Tag]]:
    """Tag every composition panel with the section it belongs to.

    Panels that appear before any header are tagged as
    ``Other types of composition(s)``.  Headers themselves are never
    returned.  Order is document order.
    """
    return list(_scan(document, UnknownHeaderPolicy(policy)))


def panels_for(
    document: BeautifulSoup,
    section: Section,
    policy: UnknownHeaderPolicy = UnknownHeaderPolicy.KEEP,
) -> List[Tag]:
    """Return the panels tagged with `section`, in document order."""
    return [node for tag, node in _scan(document, UnknownHeaderPolicy(policy)) if tag == section]
