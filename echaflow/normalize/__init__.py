"""
Normalization subsystem for echaflow.

This package converts a parsed dossier page into `Record` rows and
writes them to TSV files.  `html_to_fields` flattens a single block
into labelled fields, `classify` assigns composition panels to their
subsection, and `build_records` maps fields onto the `Record` schema
defined in `schema.py`.
"""

from .schema import Record, Section, Subsection  # noqa: F401
from .html_to_fields import extract_fields  # noqa: F401
from .classify import UnknownHeaderPolicy, classify_panels  # noqa: F401
from .build_records import data_from  # noqa: F401
from .write_tsv import read_records_tsv, write_records_tsv  # noqa: F401
