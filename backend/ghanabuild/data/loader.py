"""Load a rate catalog from a JSON file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ghanabuild.data.catalog import RateCatalog
from ghanabuild.exceptions import CatalogError

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> RateCatalog:
    """Read and validate a catalog JSON file.

    Raises:
        CatalogError: If the file is missing, unreadable, or does not match
            the catalog schema.
    """
    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read rate catalog at {catalog_path}: {exc}"
        raise CatalogError(msg) from exc

    try:
        catalog = RateCatalog.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid rate catalog at {catalog_path}: {exc.error_count()} error(s)"
        raise CatalogError(msg) from exc

    logger.info(
        "Loaded rate catalog %s (%d regions) from %s",
        catalog.version, len(catalog.regions), catalog_path,
    )
    return catalog
