"""Shared fixtures building synthetic dossier pages.

The markup mirrors the layout of an ECHA registration dossier: an
``#sIdentification`` marker followed by a ``div.sBlock``, then a
``div.panel-group`` holding subsection headers (``h4``) interleaved
with ``div.panel`` elements, each titled by ``h4.panel-title`` and
containing one ``div.sBlock`` per constituent.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import pytest


def _block(
    pairs: Iterable[Tuple[str, str]] = (),
    *,
    image: Optional[str] = None,
    markers: Sequence[str] = (),
) -> str:
    parts = ['<div class="sBlock">']
    for marker in markers:
        parts.append(f"<h5>{marker}</h5>")
    if image is not None:
        parts.append(f'<img src="{image}" alt="structure">')
    parts.append("<dl>")
    for label, value in pairs:
        parts.append(f"<dt>{label}:</dt>\n<dd>\n\t{value}\n</dd>")
    parts.append("</dl></div>")
    return "\n".join(parts)


def _panel(title: str, blocks: Sequence[str]) -> str:
    return (
        '<div class="panel panel-default">'
        '<div class="panel-heading"><h4 class="panel-title">'
        f'<a data-toggle="collapse">\n  {title}\n</a></h4></div>'
        '<div class="panel-collapse"><div class="panel-body">'
        + "\n".join(blocks)
        + "</div></div></div>"
    )


def _header(label: str) -> str:
    return (
        f"<h4>\n\t{label}\n"
        '<span class="toggle"><a>open all</a></span>'
        '<span class="toggle"><a>close all</a></span></h4>'
    )


def _page(identification: Optional[str] = None, composition: Sequence[str] = ()) -> str:
    body = []
    if identification is not None:
        body.append('<div id="sIdentification"><h2>Identification</h2></div>')
        body.append(identification)
    if composition:
        body.append('<div id="sComposition"><div class="panel-group">')
        body.extend(composition)
        body.append("</div></div>")
    return "<html><head><title>Dossier</title></head><body>" + "\n".join(body) + "</body></html>"


@pytest.fixture
def make_block():
    return _block


@pytest.fixture
def make_panel():
    return _panel


@pytest.fixture
def make_header():
    return _header


@pytest.fixture
def make_page():
    return _page


@pytest.fixture
def sample_page() -> str:
    """A dossier with an identification block and all four subsections."""
    identification = _block(
        [
            ("Display Name", "Water"),
            ("EC Number", "231-791-2"),
            ("CAS Number", "7732-18-5"),
            ("Molecular formula", "H2O"),
        ],
        image="/images/water.png",
    )
    composition = [
        _header("Boundary Composition(s)"),
        _panel(
            "Boundary composition 1",
            [
                _block(
                    [("Reference substance name", "Water"), ("EC Number", "231-791-2"), ("CAS Number", "7732-18-5")],
                    markers=["Constituent 1"],
                ),
                _block(
                    [("Reference substance name", "Deuterium oxide"), ("EC Number", "232-148-9")],
                    markers=["Constituent 2"],
                ),
            ],
        ),
        _header("Legal Entity Composition(s)"),
        _panel("Legal entity composition 1", [_block([("Reference substance name", "Water")])]),
        _header("Composition(s) generated upon use"),
        _panel("Generated 1", [_block([("Reference substance name", "Steam")])]),
        _header("Other types of composition(s)"),
        _panel("Other 1", [_block([("Reference substance name", "Ice")])]),
    ]
    return _page(identification, composition)
