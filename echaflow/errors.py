"""
Error taxonomy for echaflow.

Fatal conditions are raised as subclasses of `EchaflowError` so that the
CLI can report which step failed (fetching the page or reading its
structure) and stop before any output is written.  Missing fields are
not errors; they become the ``"N/A"`` sentinel in the built records.
"""

from __future__ import annotations

from typing import Optional


class EchaflowError(Exception):
    """Base class for all echaflow failures."""

    step: str = "extract"


class FetchError(EchaflowError):
    """The dossier page could not be fetched or was not a text body."""

    step = "fetch"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Couldn't obtain html body from {url}: {reason}")
        self.url = url
        self.reason = reason


class StructuralAnchorMissing(EchaflowError):
    """An element the extractor relies on is absent from the page.

    This usually means the site layout has changed.
    """

    step = "structure"

    def __init__(self, selector: str, what: Optional[str] = None) -> None:
        label = what or selector
        super().__init__(f"Problem obtaining {label} html (selector {selector!r} matched nothing)")
        self.selector = selector


class UnknownSubsection(ValueError, EchaflowError):
    """A composition header did not match any known subsection label."""

    step = "structure"

    def __init__(self, label: str) -> None:
        super().__init__(f"Couldn't parse {label!r} to a Subsection")
        self.label = label
