"""
Configuration loading.

Defaults live in ``config.yaml`` next to this module.  A user YAML file
may override any key, and ``ECHAFLOW_OUTPUT_DIR`` / ``ECHAFLOW_TIMEOUT``
(read from the environment or a ``.env`` file) override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .normalize.classify import UnknownHeaderPolicy
from .normalize.schema import SECTION_NAMES, Section

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")


@dataclass
class ScrapeConfig:
    """Settings for one extraction run."""

    url: str
    output_dir: str
    timeout: float = 120.0
    user_agent: str = "echaflow/0.1"
    sections: List[str] = field(default_factory=lambda: list(SECTION_NAMES))
    unknown_header: str = UnknownHeaderPolicy.KEEP.value
    header: bool = True

    def __post_init__(self) -> None:
        unknown = [name for name in self.sections if name not in SECTION_NAMES]
        if unknown:
            raise ValueError(f"Unknown section name(s): {', '.join(unknown)}")
        # Raises ValueError for an unsupported policy.
        UnknownHeaderPolicy(self.unknown_header)

    @property
    def section_list(self) -> List[Section]:
        return [SECTION_NAMES[name] for name in self.sections]

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}

    @property
    def output_path(self) -> Path:
        return Path(os.path.expanduser(self.output_dir))


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: Optional[str] = None) -> ScrapeConfig:
    """Load the shipped defaults, an optional override file and env vars."""
    load_dotenv()
    values = _read_yaml(DEFAULT_CONFIG_PATH)
    if config_path:
        logger.debug("Loading config overrides from %s", config_path)
        values.update(_read_yaml(Path(config_path)))

    if os.environ.get("ECHAFLOW_OUTPUT_DIR"):
        values["output_dir"] = os.environ["ECHAFLOW_OUTPUT_DIR"]
    if os.environ.get("ECHAFLOW_TIMEOUT"):
        try:
            values["timeout"] = float(os.environ["ECHAFLOW_TIMEOUT"])
        except ValueError:
            raise ValueError(f"ECHAFLOW_TIMEOUT must be a number, got {os.environ['ECHAFLOW_TIMEOUT']!r}") from None

    known = {f.name for f in fields(ScrapeConfig)}
    for key in sorted(set(values) - known):
        logger.warning("Ignoring unknown config key %r", key)
        values.pop(key)
    return ScrapeConfig(**values)
