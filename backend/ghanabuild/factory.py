"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

import os

from ghanabuild.data.loader import load_catalog
from ghanabuild.data.repository import RateCatalogRepository
from ghanabuild.data.seed import SEED_CATALOG
from ghanabuild.engine import EstimationEngine

CATALOG_PATH_ENV = "GHANABUILD_CATALOG_PATH"


def create_default_engine() -> EstimationEngine:
    """Create an EstimationEngine wired up with the default rate catalog.

    Uses the JSON catalog named by ``GHANABUILD_CATALOG_PATH`` when that
    variable is set, otherwise the bundled seed catalog (2025 Ghana
    averages).

    Returns:
        An EstimationEngine ready to produce estimates.

    Raises:
        CatalogError: If ``GHANABUILD_CATALOG_PATH`` points at an unreadable
            or invalid catalog.

    Example::

        from ghanabuild import create_default_engine

        engine = create_default_engine()
        breakdown = engine.estimate(request)
    """
    catalog_path = os.environ.get(CATALOG_PATH_ENV, "").strip()
    catalog = load_catalog(catalog_path) if catalog_path else SEED_CATALOG
    return EstimationEngine(RateCatalogRepository(catalog))
