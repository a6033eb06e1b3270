"""Cost breakdown output models for the Ghanabuild estimation engine."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ghanabuild.models.enums import AreaUnit, Confidence


class RegionData(BaseModel):
    """Echo of the rates actually used, for display and audit.

    The ``is_custom_*`` flags mark rates that came from a caller override
    instead of the regional table.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    land_cost_per_plot: float
    construction_cost_per_sqm: float
    labor_cost_per_day: float
    bathroom_cost: float
    floor_multiplier: float
    external_works_rate: float
    location_factor: float
    additional_fees: dict[str, float] = Field(default_factory=dict)
    is_custom_land_cost: bool = False
    is_custom_material_cost: bool = False
    is_custom_labor_cost: bool = False


class ProjectSummary(BaseModel):
    """The normalized project details the estimate was computed for."""

    model_config = ConfigDict(frozen=True)

    region: str
    project_type: str
    total_floor_area: float
    area_unit: AreaUnit
    area_sqm: float
    number_of_bathrooms: int
    number_of_floors: int
    finish_quality: str
    include_external_works: bool


class CostLineItem(BaseModel):
    """A single displayed line of the breakdown."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    amount: float
    percent_of_total: float


class Assumption(BaseModel):
    """A documented fallback or rejection made during estimation."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    catalog_version: str
    currency: str
    catalog_last_updated: date
    estimation_method: str = "regional_rate_table"


class CostBreakdown(BaseModel):
    """Complete itemized estimate produced by the engine.

    Every intermediate value is kept so the presentation layer can show
    each line and its share of the total. ``base_cost`` is the adjusted
    construction cost (after quality, project-type and floor multipliers)
    and is the base for markup, contingency, location, inflation and risk.
    """

    model_config = ConfigDict(frozen=True)

    area_sqm: float
    land_cost: float
    raw_construction_cost: float
    quality_multiplier: float
    project_type_multiplier: float
    floor_factor: float
    base_cost: float
    bathroom_cost: float
    external_works_cost: float
    additional_fees: float
    markup: float
    contingency: float
    location_adjustment: float
    inflation_adjustment: float
    risk_premium: float
    subtotal: float
    total_cost: float

    region_data: RegionData
    project_details: ProjectSummary
    line_items: tuple[CostLineItem, ...] = ()
    assumptions: tuple[Assumption, ...] = ()
    metadata: EstimateMetadata

    @property
    def cost_per_sqm(self) -> float:
        return self.total_cost / self.area_sqm if self.area_sqm > 0 else 0.0

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Returns a dict with formatted strings for direct display.
        """
        from ghanabuild.formatting import format_area, format_currency, format_percent

        top_items = sorted(self.line_items, key=lambda li: li.amount, reverse=True)[:3]

        return {
            "region": self.region_data.name,
            "project_type": self.project_details.project_type,
            "finish_quality": self.project_details.finish_quality,
            "area_formatted": format_area(
                self.area_sqm, self.project_details.area_unit,
            ),
            "total_cost_formatted": format_currency(self.total_cost),
            "cost_per_sqm_formatted": format_currency(self.cost_per_sqm),
            "currency": self.metadata.currency,
            "custom_rates_applied": [
                name
                for name, flag in (
                    ("land", self.region_data.is_custom_land_cost),
                    ("material", self.region_data.is_custom_material_cost),
                    ("labor", self.region_data.is_custom_labor_cost),
                )
                if flag
            ],
            "top_cost_drivers": [
                {
                    "label": li.label,
                    "amount_formatted": format_currency(li.amount),
                    "percent_formatted": format_percent(li.percent_of_total),
                }
                for li in top_items
            ],
            "num_assumptions": len(self.assumptions),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict for print/export views."""
        return {
            "project_details": self.project_details.model_dump(mode="json"),
            "region_data": self.region_data.model_dump(mode="json"),
            "line_items": [
                {
                    "label": li.label,
                    "amount": li.amount,
                    "percent_of_total": li.percent_of_total,
                }
                for li in self.line_items
            ],
            "subtotal": self.subtotal,
            "total_cost": self.total_cost,
            "assumptions": [
                {
                    "parameter": a.parameter,
                    "assumed_value": a.assumed_value,
                    "reasoning": a.reasoning,
                    "confidence": a.confidence.value,
                }
                for a in self.assumptions
            ],
            "metadata": self.metadata.model_dump(mode="json"),
        }
