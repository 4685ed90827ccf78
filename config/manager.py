"""Config manager: load, save and validate the term catalog.

Uses ruamel.yaml for YAML serialization with a comment header.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML

from config.defaults import default_terms
from config.schema import TermCatalogConfig
from models.term import Term

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# termgrid — academic term calendars
# Dates are YYYY-MM-DD, boundaries inclusive.
# Created: {date.today().isoformat()}
# ============================================
"""


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "terms.yaml"

    def __init__(self, path: Optional[Path] = None):
        if path is not None:
            self.CONFIG_DIR = path.parent
            self.DEFAULT_CONFIG = path

    def first_run_check(self) -> bool:
        """True if no term catalog has been written yet."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Loading ───

    def load(self, path: Optional[Path] = None) -> TermCatalogConfig:
        """Load the catalog from YAML. Validated via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Term catalog not found: {target}\n"
                f"Run 'termgrid init' to write the built-in terms."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            catalog = TermCatalogConfig.model_validate(dict(raw or {}))
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Term catalog invalid: {target}\n"
                f"Pydantic error: {e}"
            ) from e
        logger.info(f"Loaded {len(catalog.terms)} terms from {target}")
        return catalog

    def load_or_default(self, path: Optional[Path] = None) -> TermCatalogConfig:
        """Like load(), but falls back to the built-in terms if no file exists."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            logger.info(f"No term catalog at {target}, using built-in terms")
            return default_terms()
        return self.load(target)

    def term(self, url_name: Optional[str] = None,
             path: Optional[Path] = None) -> Term:
        """Build the Term for `url_name` (default: the catalog's current term)."""
        catalog = self.load_or_default(path)
        return Term.from_config(catalog.get(url_name or catalog.current))

    # ─── Saving ───

    def save(self, catalog: TermCatalogConfig, path: Optional[Path] = None) -> Path:
        """Write the catalog as YAML with camelCase keys."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = catalog.model_dump(mode="json", by_alias=True, exclude_none=True)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        logger.info(f"Term catalog saved: {target}")
        return target
