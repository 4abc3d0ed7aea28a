"""
TSV writer for extracted records.

Writes `Record` rows as tab-separated values using the column order
defined by `TSV_COLUMNS` in `schema.py`.  If the target file already
exists it is truncated.  A value is wrapped in double quotes (inner
quotes doubled) only when it holds a tab, a newline, or starts with a
quote; everything else is written as plain text, so splitting a line
on tabs gives the values back.
"""

from __future__ import annotations

import csv
from typing import IO, Iterable, List

from .schema import RECORD_HEADERS, EchaData, Record

DELIMITER = "\t"
QUOTE = '"'
_NEEDS_QUOTING = ("\t", "\n", "\r")


def _tsv_field(value: str) -> str:
    if value.startswith(QUOTE) or any(c in value for c in _NEEDS_QUOTING):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def _tsv_line(values: Iterable[str]) -> str:
    return DELIMITER.join(_tsv_field(v) for v in values) + "\n"


def write_records(records: Iterable[Record], stream: IO[str], *, header: bool = True) -> int:
    """Write records to an open text stream and return the row count."""
    if header:
        stream.write(_tsv_line(RECORD_HEADERS))
    count = 0
    for record in records:
        stream.write(_tsv_line(record.to_tsv_row()))
        count += 1
    return count


def write_records_tsv(records: Iterable[Record], path: str, *, header: bool = True) -> int:
    """Write records to a TSV file.

    Args:
        records: Iterable of `Record` objects.
        path: Destination path for the TSV.
        header: Whether to write the column header row first.

    Returns:
        The number of data rows written.
    """
    with open(path, "w", newline="", encoding="utf-8") as tsvfile:
        return write_records(records, tsvfile, header=header)


def read_records_tsv(path: str, *, header: bool = True) -> EchaData:
    """Read back a TSV written by `write_records_tsv`."""
    records: List[Record] = []
    with open(path, "r", newline="", encoding="utf-8") as tsvfile:
        if header:
            reader = csv.DictReader(tsvfile, delimiter=DELIMITER)
        else:
            reader = csv.DictReader(tsvfile, fieldnames=RECORD_HEADERS, delimiter=DELIMITER)
        for row in reader:
            records.append(Record.from_tsv_row(row))
    return records
