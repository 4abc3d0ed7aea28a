"""
Extraction runner.

This module exposes `scrape`, which drives one dossier from URL to TSV:
fetch the page once through an `EchaSite`, build the records of every
requested section, stamp them with the dossier URL and write them to
``<output_dir>/<dossier id>.tsv``.  All sections are built before the
file is opened, so a fatal error leaves no partial output behind.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import IO, Iterable, Optional

from ..normalize.schema import EchaData, Section
from ..normalize.write_tsv import write_records, write_records_tsv
from ..site import EchaSite

logger = logging.getLogger(__name__)


def _ensure_dir(path: str) -> None:
    """Create a directory if it does not already exist."""
    os.makedirs(path, exist_ok=True)


def dossier_id(url: str) -> str:
    """Return the last path segment of a dossier URL."""
    return url.rstrip("/").split("/")[-1]


def output_path(dossier: str, output_dir: str) -> str:
    """Build ``<output_dir>/<dossier>.tsv``, creating the directory.

    An existing file at that path will be truncated by the writer.
    """
    _ensure_dir(output_dir)
    return os.path.join(output_dir, f"{dossier}.tsv")


def build_records(site: EchaSite, sections: Iterable[Section]) -> EchaData:
    """Collect the sections' records with `weblink` set to the page URL."""
    records = site.collect(sections)
    if site.url:
        records = [replace(record, weblink=site.url) for record in records]
    return records


def scrape(
    site: EchaSite,
    sections: Iterable[Section],
    *,
    output_dir: Optional[str] = None,
    stream: Optional[IO[str]] = None,
    header: bool = True,
) -> Optional[str]:
    """Extract `sections` from `site` and write them as TSV.

    Args:
        site: Session over the dossier page.
        sections: Sections to extract, in output order.
        output_dir: Directory for the TSV file; ignored when `stream`
            is given.
        stream: Write to this text stream instead of a file.
        header: Whether to write the column header row.

    Returns:
        The path written, or ``None`` when writing to `stream`.

    Raises:
        FetchError, StructuralAnchorMissing: nothing is written.
    """
    records = build_records(site, sections)
    if stream is not None:
        count = write_records(records, stream, header=header)
        logger.info("Wrote %d records", count)
        return None

    path = output_path(dossier_id(site.url), output_dir or os.getcwd())
    count = write_records_tsv(records, path, header=header)
    logger.info("Wrote %d records to %s", count, path)
    return path
