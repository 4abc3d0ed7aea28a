"""
Command line interface for echaflow.

Extracts the Identification and Composition(s) sections of one ECHA
registration dossier and writes them as a TSV file named after the
dossier number.  Settings come from ``config.yaml`` (or the file given
with ``--config``); flags given here take precedence.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

import yaml

from .collect.runner import scrape
from .config import ScrapeConfig, load_config
from .errors import EchaflowError
from .normalize.classify import UnknownHeaderPolicy
from .normalize.schema import SECTION_NAMES
from .site import EchaSite

logger = logging.getLogger("echaflow.cli")


def _build_site(args: argparse.Namespace, url: str, cfg: ScrapeConfig) -> EchaSite:
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            html = f.read()
        return EchaSite.from_html(html, url=url, unknown_header=cfg.unknown_header)
    return EchaSite(url, timeout=cfg.timeout, headers=cfg.headers, unknown_header=cfg.unknown_header)


def cmd_scrape(args: argparse.Namespace) -> int:
    """Run one extraction and write the TSV output."""
    try:
        cfg = load_config(args.config)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        logger.error("config step failed: %s", exc)
        return 1
    if args.out_dir:
        cfg.output_dir = args.out_dir
    if args.section:
        cfg.sections = args.section
    if args.unknown_header:
        cfg.unknown_header = args.unknown_header
    if args.no_header:
        cfg.header = False

    url = args.url
    if not url:
        logger.info("No URL provided, using default.")
        url = cfg.url

    try:
        site = _build_site(args, url, cfg)
    except OSError as exc:
        logger.error("input step failed: %s", exc)
        return 1

    try:
        path = scrape(
            site,
            cfg.section_list,
            output_dir=str(cfg.output_path),
            stream=sys.stdout if args.stdout else None,
            header=cfg.header,
        )
    except EchaflowError as exc:
        logger.error("%s step failed: %s", exc.step, exc)
        return 1

    if path:
        print(path)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="echaflow", description="ECHA dossier composition extractor")
    parser.add_argument("url", nargs="?", help="Dossier URL (default from config)")
    parser.add_argument("--config", help="YAML file overriding the default settings")
    parser.add_argument("--out-dir", dest="out_dir", help="Directory for the TSV output")
    parser.add_argument("--file", help="Parse a local HTML file instead of fetching the URL")
    parser.add_argument(
        "--section",
        action="append",
        choices=list(SECTION_NAMES),
        help="Section to extract; repeat for several (default: all)",
    )
    parser.add_argument(
        "--unknown-header",
        dest="unknown_header",
        choices=[p.value for p in UnknownHeaderPolicy],
        help="Handling of unrecognised composition headers",
    )
    parser.add_argument("--no-header", dest="no_header", action="store_true", help="Omit the TSV header row")
    parser.add_argument("--stdout", action="store_true", help="Write TSV to standard output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    return cmd_scrape(args)


if __name__ == "__main__":
    raise SystemExit(main())
