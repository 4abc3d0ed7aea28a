"""
Block to fields extractor.

A dossier "block" (``div.sBlock``) lists one constituent as a
definition list: each ``<dt>`` holds a field label such as
``EC Number:`` and the matching ``<dd>`` holds its value.  A block may
also carry a structure image and an ``<h5>`` constituent marker such as
``Constituent 2``.  This module flattens a block into a plain
``{label: value}`` dictionary.  Nothing here raises when an element is
missing; the record builder substitutes the ``"N/A"`` sentinel for any
label that does not show up.
"""

from __future__ import annotations

import logging
from typing import List

from bs4 import Tag

from .schema import RawFields

logger = logging.getLogger(__name__)

IMAGE_KEY = "Image link"
CONSTITUENT_KEY = "Constituent"


def _clean_label(text: str) -> str:
    return text.replace(":", "").strip()


def _clean_value(text: str) -> str:
    return text.strip().replace("\n", "").replace("\t", "")


def extract_fields(block: Tag) -> RawFields:
    """Extract the labelled fields of a single block.

    Args:
        block: The block element (any BeautifulSoup ``Tag``).

    Returns:
        A dictionary built in three passes: ``dt``/``dd`` pairs, then
        ``"Image link"``, then ``"Constituent"``.  A later pass
        overwrites an earlier one on the same key.  When the number of
        labels and values differ, the surplus of the longer list is
        ignored.
    """
    labels: List[str] = [_clean_label(dt.get_text()) for dt in block.find_all("dt")]
    values: List[str] = [_clean_value(dd.get_text()) for dd in block.find_all("dd")]
    if len(labels) != len(values):
        logger.debug("Block has %d labels but %d values; extra entries dropped", len(labels), len(values))

    fields: RawFields = dict(zip(labels, values))

    for img in block.find_all("img"):
        fields[IMAGE_KEY] = img.get("src") or ""

    # Several markers may be present; the last one wins.
    for marker in block.find_all("h5"):
        fields[CONSTITUENT_KEY] = " ".join(marker.get_text().split())

    return fields
