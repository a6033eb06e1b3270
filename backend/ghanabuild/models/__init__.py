"""Domain models for the Ghanabuild estimation engine."""

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
from ghanabuild.models.request import SQFT_TO_SQM, ProjectRequest

__all__ = [
    "SQFT_TO_SQM",
    "AreaUnit",
    "Assumption",
    "Confidence",
    "CostBreakdown",
    "CostLineItem",
    "EstimateMetadata",
    "FinishQuality",
    "MaterialLineItem",
    "PhaseSlot",
    "ProjectRequest",
    "ProjectSummary",
    "ProjectType",
    "RegionData",
    "ScheduleSummary",
    "WorkerRequirement",
]
