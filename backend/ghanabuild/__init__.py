"""Ghanabuild construction cost estimation engine.

Usage::

    from ghanabuild import create_default_engine, ProjectRequest

    engine = create_default_engine()
    breakdown = engine.estimate(
        ProjectRequest(
            region="accra",
            total_floor_area=200,
            number_of_bathrooms=3,
            number_of_floors=2,
        )
    )
"""

from ghanabuild.data.catalog import (
    ConstructionPhase,
    MaterialEntry,
    RateCatalog,
    RateDefaults,
    Region,
    WorkerEntry,
)
from ghanabuild.data.repository import RateCatalogRepository
from ghanabuild.engine import EstimationEngine, compute_estimate
from ghanabuild.exceptions import (
    CatalogError,
    EstimationError,
    GhanabuildError,
    InvalidInputError,
)
from ghanabuild.expansion import material_line_items, schedule_summary, worker_requirements
from ghanabuild.factory import create_default_engine
from ghanabuild.models.enums import AreaUnit, Confidence, FinishQuality, ProjectType
from ghanabuild.models.estimate import (
    Assumption,
    CostBreakdown,
    CostLineItem,
    EstimateMetadata,
    ProjectSummary,
    RegionData,
)
from ghanabuild.models.expansion import (
    MaterialLineItem,
    PhaseSlot,
    ScheduleSummary,
    WorkerRequirement,
)
from ghanabuild.models.request import ProjectRequest

__all__ = [
    "AreaUnit",
    "Assumption",
    "CatalogError",
    "Confidence",
    "ConstructionPhase",
    "CostBreakdown",
    "CostLineItem",
    "EstimateMetadata",
    "EstimationEngine",
    "EstimationError",
    "FinishQuality",
    "GhanabuildError",
    "InvalidInputError",
    "MaterialEntry",
    "MaterialLineItem",
    "PhaseSlot",
    "ProjectRequest",
    "ProjectSummary",
    "ProjectType",
    "RateCatalog",
    "RateCatalogRepository",
    "RateDefaults",
    "Region",
    "RegionData",
    "ScheduleSummary",
    "WorkerEntry",
    "WorkerRequirement",
    "compute_estimate",
    "create_default_engine",
    "material_line_items",
    "schedule_summary",
    "worker_requirements",
]
