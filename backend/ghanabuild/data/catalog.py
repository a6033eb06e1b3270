"""Schema for the static rate catalog consumed by the estimation engine."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Region(BaseModel):
    """A geographic rate zone with its own costs and adjustment multipliers."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    land_cost_per_plot: float = Field(ge=0)
    construction_cost_per_sqm: float = Field(ge=0)
    labor_cost_per_day: float = Field(ge=0)
    bathroom_cost: float = Field(ge=0)
    floor_multiplier: float = Field(ge=0)
    external_works_rate: float = Field(ge=0)
    location_factor: float = Field(gt=0, default=1.0)
    quality_multipliers: dict[str, float] = Field(default_factory=dict)
    project_type_multipliers: dict[str, float] = Field(default_factory=dict)
    additional_fees: dict[str, float] = Field(default_factory=dict)

    @property
    def fees_total(self) -> float:
        return sum(self.additional_fees.values())


class RateDefaults(BaseModel):
    """Global rates applied uniformly regardless of region."""

    model_config = ConfigDict(frozen=True)

    markup_rate: float = Field(ge=0)
    contingency_rate: float = Field(ge=0)
    inflation_rate: float = Field(ge=0)
    risk_premium_rate: float = Field(ge=0)


class MaterialEntry(BaseModel):
    """A material with its unit cost and typical consumption per m²."""

    model_config = ConfigDict(frozen=True)

    name: str
    unit: str
    cost_per_unit: float = Field(ge=0)
    quantity_per_sqm: float = Field(ge=0)


class WorkerEntry(BaseModel):
    """A trade with its daily rate and productivity in m² per day."""

    model_config = ConfigDict(frozen=True)

    role: str
    daily_rate: float = Field(ge=0)
    productivity_sqm_per_day: float = Field(gt=0)
    category: str


class ConstructionPhase(BaseModel):
    """A named stage of construction, used for scheduling display only."""

    model_config = ConfigDict(frozen=True)

    name: str
    duration_days: int = Field(ge=0)
    percentage_of_total: float = Field(ge=0, le=100)
    activities: tuple[str, ...] = ()
    required_workers: tuple[str, ...] = ()
    required_materials: tuple[str, ...] = ()


class RateCatalog(BaseModel):
    """The complete, versioned rate dataset.

    Loaded once at startup and shared read-only by every estimate.
    ``materials`` and ``workers`` are keyed by category / skill tier and
    keep their insertion order for display.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    currency: str = "GHS"
    last_updated: date
    default_region: str | None = None
    regions: tuple[Region, ...] = Field(min_length=1)
    defaults: RateDefaults
    materials: dict[str, tuple[MaterialEntry, ...]] = Field(default_factory=dict)
    workers: dict[str, tuple[WorkerEntry, ...]] = Field(default_factory=dict)
    phases: tuple[ConstructionPhase, ...] = ()

    @model_validator(mode="after")
    def region_names_are_unique(self) -> RateCatalog:
        names = [r.name for r in self.regions]
        if len(names) != len(set(names)):
            msg = "Region names must be unique"
            raise ValueError(msg)
        if self.default_region is not None and self.default_region not in names:
            msg = f"default_region '{self.default_region}' is not a known region"
            raise ValueError(msg)
        return self
