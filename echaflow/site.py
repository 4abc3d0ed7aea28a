"""
Dossier site session.

An `EchaSite` owns one fetched dossier page and the records built from
it.  The page is fetched once, when the session is created, and each
section is scanned at most once: later requests for the same section
are served from the session's cache.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

from bs4 import BeautifulSoup

from .collect.fetch import DEFAULT_TIMEOUT, fetch_document, parse_document
from .errors import FetchError
from .normalize.build_records import data_from
from .normalize.classify import UnknownHeaderPolicy
from .normalize.schema import EchaData, Section

logger = logging.getLogger(__name__)

Fetcher = Callable[..., BeautifulSoup]


class EchaSite:
    """Represents and manages the data of each section of one dossier page.

    A failed fetch does not raise from the constructor; the error is kept
    and raised by the first `get_constituents` call that needs the page.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        fetcher: Optional[Fetcher] = None,
        unknown_header: Union[UnknownHeaderPolicy, str] = UnknownHeaderPolicy.KEEP,
        document: Optional[BeautifulSoup] = None,
    ) -> None:
        self.url = url
        self.unknown_header = UnknownHeaderPolicy(unknown_header)
        self.data: Dict[Section, EchaData] = {}
        self.scans = 0
        self._error: Optional[FetchError] = None
        self._document: Optional[BeautifulSoup] = document
        if document is None:
            try:
                self._document = (fetcher or fetch_document)(url, timeout=timeout, headers=headers)
            except FetchError as exc:
                logger.debug("Fetch failed for %s: %s", url, exc)
                self._error = exc

    @classmethod
    def from_html(cls, html: str, *, url: str = "", **kwargs) -> "EchaSite":
        """Build a session over an already-downloaded page body."""
        return cls(url, document=parse_document(html), **kwargs)

    @property
    def document(self) -> BeautifulSoup:
        if self._document is None:
            raise self._error or FetchError(self.url, "no document")
        return self._document

    @property
    def sections_cached(self) -> List[Section]:
        return list(self.data)

    def get_constituents(self, section: Section) -> EchaData:
        """Return the records of `section`, scanning the page on first use.

        Raises:
            FetchError: the page could not be fetched when the session
                was created.
            StructuralAnchorMissing: the section's anchor is not on the page.
        """
        cached = self.data.get(section)
        if cached is not None:
            return list(cached)

        document = self.document
        self.scans += 1
        records = data_from(document, section, self.unknown_header)
        logger.info("%s: %d records", section, len(records))
        self.data[section] = records
        return list(records)

    def collect(self, sections: Iterable[Section]) -> EchaData:
        """Concatenate the records of several sections in the given order."""
        records: EchaData = []
        for section in sections:
            records.extend(self.get_constituents(section))
        return records
