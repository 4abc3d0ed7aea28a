"""Tests for the block field extractor."""

from __future__ import annotations

from bs4 import BeautifulSoup

from echaflow.normalize.html_to_fields import extract_fields


def _block_tag(html: str):
    return BeautifulSoup(html, "html.parser").select_one("div.sBlock")


def test_pairs_are_cleaned(make_block) -> None:
    block = _block_tag(make_block([("EC Number", "201-000-0"), ("CAS Number", "1-2-3")]))
    assert extract_fields(block) == {"EC Number": "201-000-0", "CAS Number": "1-2-3"}


def test_mismatched_counts_drop_unpaired_labels() -> None:
    html = (
        '<div class="sBlock"><dl>'
        "<dt>EC Number:</dt><dd>201-000-0</dd>"
        "<dt>CAS Number:</dt><dd>1-2-3</dd>"
        "<dt>Molecular formula:</dt>"
        "</dl></div>"
    )
    fields = extract_fields(_block_tag(html))
    assert fields == {"EC Number": "201-000-0", "CAS Number": "1-2-3"}


def test_last_constituent_marker_wins(make_block) -> None:
    block = _block_tag(make_block([("EC Number", "201-000-0")], markers=["Constituent 1", "Constituent 2"]))
    assert extract_fields(block)["Constituent"] == "Constituent 2"


def test_image_link_and_missing_src() -> None:
    with_src = _block_tag('<div class="sBlock"><img src="/img/a.png"></div>')
    without_src = _block_tag('<div class="sBlock"><img alt="none"></div>')
    assert extract_fields(with_src) == {"Image link": "/img/a.png"}
    assert extract_fields(without_src) == {"Image link": ""}


def test_empty_block_yields_no_fields() -> None:
    assert extract_fields(_block_tag('<div class="sBlock"><p>nothing here</p></div>')) == {}


def test_later_passes_overwrite_pairs() -> None:
    # A dt literally named like a later pass key is overwritten by that pass.
    html = (
        '<div class="sBlock"><h5>Constituent 3</h5><img src="b.png"><dl>'
        "<dt>Constituent:</dt><dd>from list</dd>"
        "<dt>Image link:</dt><dd>from list</dd>"
        "<dt>EC Number:</dt><dd>1</dd><dt>EC Number:</dt><dd>2</dd>"
        "</dl></div>"
    )
    fields = extract_fields(_block_tag(html))
    assert fields["Constituent"] == "Constituent 3"
    assert fields["Image link"] == "b.png"
    assert fields["EC Number"] == "2"


def test_value_whitespace_is_removed() -> None:
    html = '<div class="sBlock"><dl><dt>Display Name:</dt><dd>\n\t  Sodium\n\tchloride \n</dd></dl></div>'
    assert extract_fields(_block_tag(html)) == {"Display Name": "Sodiumchloride"}


def test_constituent_marker_with_inline_markup() -> None:
    html = '<div class="sBlock"><h5>Constituent <span>2</span></h5><h5>\n  Constituent\n  <b>3</b> </h5></div>'
    assert extract_fields(_block_tag(html))["Constituent"] == "Constituent 3"
    single = _block_tag('<div class="sBlock"><h5>Constituent <span>2</span></h5></div>')
    assert extract_fields(single)["Constituent"] == "Constituent 2"
