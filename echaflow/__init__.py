"""
echaflow: ECHA registration dossier extractor.

This package pulls the Identification and Composition(s) data of a
registration dossier page into flat `Record` rows.  Each submodule
implements one step:

1. **collect** – Fetch the dossier page (one blocking request) and
   drive a full run through `collect.runner.scrape`.
2. **normalize** – Flatten page blocks into labelled fields, assign
   composition panels to their subsection in a single pass, build
   `Record` rows and write them as TSV.
3. **site** – `EchaSite`, the session that owns one fetched page and
   caches the records of each section it has built.
4. **cli** – Command line entry point wiring the above together.

Example::

    from echaflow import EchaSite, Section, Subsection

    site = EchaSite("https://echa.europa.eu/registration-dossier/-/registered-dossier/24529")
    boundary = site.get_constituents(Section.composition(Subsection.BOUNDARY))
"""

from .errors import EchaflowError, FetchError, StructuralAnchorMissing, UnknownSubsection  # noqa: F401
from .normalize.schema import Record, Section, Subsection  # noqa: F401
from .site import EchaSite  # noqa: F401

__version__ = "0.1.0"
