from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import CatalogUnavailable
from .config import CatalogConfig
from .models import Catalog

logger = logging.getLogger(__name__)


def _read(path: Path) -> Catalog | None:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    try:
        return Catalog.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError):
        logger.warning("Catalog at %s is not a valid catalog document, skipping", path, exc_info=True)
        return None


def load_catalog(config: CatalogConfig | None = None) -> Catalog:
    """
    Load the dish and wine catalog.

    Tries each search path in order and returns the first one that can be
    read and parsed. Emptiness is not checked here; see ``Catalog.is_complete``.
    Raises ``CatalogUnavailable`` when no path yields a catalog.
    """
    config = config or CatalogConfig.from_env()

    for path in config.search_paths:
        catalog = _read(path)
        if catalog is not None:
            logger.info("Catalog loaded from %s", path)
            return catalog

    tried = ", ".join(str(p) for p in config.search_paths)
    logger.error("Catalog not found in any expected location: %s", tried)
    raise CatalogUnavailable(f"Impossibile caricare il database dei vini (cercato in: {tried})")
