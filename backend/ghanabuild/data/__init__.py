"""Rate catalog layer for the Ghanabuild estimation engine."""

from ghanabuild.data.catalog import (
    ConstructionPhase,
    MaterialEntry,
    RateCatalog,
    RateDefaults,
    Region,
    WorkerEntry,
)
from ghanabuild.data.loader import load_catalog
from ghanabuild.data.repository import RateCatalogRepository, resolve_multiplier

__all__ = [
    "ConstructionPhase",
    "MaterialEntry",
    "RateCatalog",
    "RateCatalogRepository",
    "RateDefaults",
    "Region",
    "WorkerEntry",
    "load_catalog",
    "resolve_multiplier",
]
