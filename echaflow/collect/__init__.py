"""
Collection subsystem for echaflow.

`fetch` downloads a dossier page and parses it with BeautifulSoup.
`runner` drives a whole extraction: one `EchaSite` session, the
requested sections, and the TSV file named after the dossier.
"""

from .fetch import fetch_document  # noqa: F401
