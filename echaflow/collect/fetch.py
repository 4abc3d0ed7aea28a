"""
Dossier page fetcher.

One blocking GET per dossier.  The full page is large, so the default
timeout is generous.  Any transport failure, HTTP error status or
non-text body is reported as a `FetchError`; there is no retry.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

import requests
from bs4 import BeautifulSoup

from ..errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120
DEFAULT_USER_AGENT = "echaflow/0.1"


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def fetch_html(url: str, *, timeout: float = DEFAULT_TIMEOUT, headers: Optional[Dict[str, str]] = None) -> str:
    """Return the body of `url` as text."""
    logger.info("Fetching data from %s...", url)
    started = time.monotonic()
    try:
        resp = requests.get(url, timeout=timeout, headers=headers or {"User-Agent": DEFAULT_USER_AGENT})
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    content_type = resp.headers.get("Content-Type", "")
    if content_type and "text" not in content_type and "html" not in content_type:
        raise FetchError(url, f"unexpected content type {content_type!r}")

    logger.info("Fetched in: %d seconds", time.monotonic() - started)
    return resp.text


def fetch_document(url: str, *, timeout: float = DEFAULT_TIMEOUT, headers: Optional[Dict[str, str]] = None) -> BeautifulSoup:
    """Fetch `url` and parse it into a BeautifulSoup document."""
    return parse_document(fetch_html(url, timeout=timeout, headers=headers))
