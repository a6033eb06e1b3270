"""Core estimation engine for the Ghanabuild cost estimator.

The EstimationEngine applies the regional rate-table methodology in a fixed
order; reordering any step changes the total, so the order is part of the
contract:

1. **Resolve region** — exact lookup with default-region fallback, then
   substitute any active, valid custom land / material / labor override.
2. **Normalize area** — square feet are converted to square meters.
3. **Base construction cost** — area × construction cost per m².
4. **Quality adjustment** — finish-tier multiplier (1.0 if unknown).
5. **Project-type adjustment** — project-type multiplier (1.0 if unknown).
6. **Bathrooms** — flat cost per bathroom, kept outside the multiplier chain.
7. **Floors** — ``1 + extra_floors × floor_multiplier`` on the adjusted cost.
8. **External works** — share of the adjusted cost, only when requested.
9. **Additional fees** — flat regional fee schedule.
10. **Markup, contingency, location, inflation, risk** — each off the
    adjusted construction cost, not the running subtotal.
11. **Subtotal** — construction + bathrooms + external works + fees.
12. **Total** — subtotal + the five adjustments + land cost.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ghanabuild.data.repository import RateCatalogRepository, resolve_multiplier
from ghanabuild.exceptions import InvalidInputError
from ghanabuild.models.enums import Confidence
from ghanabuild.models.estimate import (
    Assumption,
    CostBreakdown,
    CostLineItem,
    EstimateMetadata,
    ProjectSummary,
)
from ghanabuild.models.request import ProjectRequest

if TYPE_CHECKING:
    from ghanabuild.data.catalog import RateCatalog

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"

# (field, label) in display order
_LINE_ITEMS: tuple[tuple[str, str], ...] = (
    ("land_cost", "Land"),
    ("base_cost", "Construction"),
    ("bathroom_cost", "Bathrooms"),
    ("external_works_cost", "External Works"),
    ("additional_fees", "Permits & Fees"),
    ("markup", "Contractor Markup"),
    ("contingency", "Contingency"),
    ("location_adjustment", "Location Adjustment"),
    ("inflation_adjustment", "Inflation Adjustment"),
    ("risk_premium", "Risk Premium"),
)


class EstimationEngine:
    """Converts a ProjectRequest into a CostBreakdown.

    Args:
        repository: The rate catalog repository providing region lookup,
            multiplier resolution and override handling.

    Example::

        from ghanabuild.data.repository import RateCatalogRepository
        from ghanabuild.data.seed import SEED_CATALOG

        engine = EstimationEngine(RateCatalogRepository(SEED_CATALOG))
        breakdown = engine.estimate({"region": "accra", ...})
    """

    def __init__(self, repository: RateCatalogRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> RateCatalogRepository:
        return self._repository

    def estimate(self, request: ProjectRequest | Mapping[str, Any]) -> CostBreakdown:
        """Produce an itemized estimate for a project.

        Args:
            request: A validated ProjectRequest, or a raw payload as sent by
                the form (camelCase or snake_case keys).

        Returns:
            A CostBreakdown with every intermediate value, the resolved
            region rates and documented fallbacks.

        Raises:
            InvalidInputError: If floor area, bathrooms or floors are
                missing, non-numeric or out of range, or the
                floor area is so large that the costs overflow.
        """
        if not isinstance(request, ProjectRequest):
            request = ProjectRequest.from_payload(request)

        repo = self._repository
        defaults = repo.defaults
        assumptions: list[Assumption] = []

        # 1. Resolve region and rates
        region, fallback_reasons = repo.resolve_region(request.region)
        for reason in fallback_reasons:
            assumptions.append(
                Assumption(
                    parameter="region",
                    assumed_value=region.name,
                    reasoning=reason,
                    confidence=Confidence.LOW,
                )
            )

        rates, rejections = repo.resolve_rates(region, request)
        for reason in rejections:
            assumptions.append(
                Assumption(
                    parameter="custom_override",
                    assumed_value="regional rate",
                    reasoning=reason,
                    confidence=Confidence.MEDIUM,
                )
            )

        # 2. Normalize area
        area_sqm = request.area_sqm

        # 3. Base construction cost
        raw_construction_cost = area_sqm * rates.construction_cost_per_sqm

        # 4-5. Quality and project-type adjustments
        quality_multiplier = self._multiplier(
            region.quality_multipliers, request.finish_quality, "finish_quality", assumptions,
        )
        project_type_multiplier = self._multiplier(
            region.project_type_multipliers, request.project_type, "project_type", assumptions,
        )
        construction_cost = raw_construction_cost * quality_multiplier * project_type_multiplier

        # 6. Bathrooms
        bathroom_cost = request.number_of_bathrooms * rates.bathroom_cost

        # 7. Floors
        extra_floors = max(0, request.number_of_floors - 1)
        floor_factor = 1 + extra_floors * rates.floor_multiplier
        base_cost = construction_cost * floor_factor

        # 8. External works
        external_works_cost = (
            base_cost * rates.external_works_rate if request.include_external_works else 0.0
        )

        # 9. Additional fees
        additional_fees = sum(rates.additional_fees.values())

        # 10. Adjustments off the adjusted construction cost
        markup = base_cost * defaults.markup_rate
        contingency = base_cost * defaults.contingency_rate
        location_adjustment = base_cost * (rates.location_factor - 1)
        inflation_adjustment = base_cost * defaults.inflation_rate
        risk_premium = base_cost * defaults.risk_premium_rate

        # 11-12. Subtotal and total
        land_cost = rates.land_cost_per_plot
        subtotal = base_cost + bathroom_cost + external_works_cost + additional_fees
        total_cost = (
            subtotal
            + markup
            + contingency
            + location_adjustment
            + inflation_adjustment
            + risk_premium
            + land_cost
        )
        if not (math.isfinite(base_cost) and math.isfinite(total_cost)):
            logger.warning("Estimate overflowed for %.6g m2", area_sqm)
            raise InvalidInputError(
                "Please correct the following errors:",
                details=["Total Floor Area: too large to estimate."],
            )

        amounts = {
            "land_cost": land_cost,
            "base_cost": base_cost,
            "bathroom_cost": bathroom_cost,
            "external_works_cost": external_works_cost,
            "additional_fees": additional_fees,
            "markup": markup,
            "contingency": contingency,
            "location_adjustment": location_adjustment,
            "inflation_adjustment": inflation_adjustment,
            "risk_premium": risk_premium,
        }

        project_details = ProjectSummary(
            region=region.name,
            project_type=request.project_type,
            total_floor_area=request.total_floor_area,
            area_unit=request.area_unit,
            area_sqm=area_sqm,
            number_of_bathrooms=request.number_of_bathrooms,
            number_of_floors=request.number_of_floors,
            finish_quality=request.finish_quality,
            include_external_works=request.include_external_works,
        )

        catalog = repo.catalog
        metadata = EstimateMetadata(
            engine_version=ENGINE_VERSION,
            catalog_version=catalog.version,
            currency=catalog.currency,
            catalog_last_updated=catalog.last_updated,
        )

        logger.debug(
            "Estimated %s: %.2f %s over %.2f m2",
            region.name, total_cost, catalog.currency, area_sqm,
        )

        return CostBreakdown(
            area_sqm=area_sqm,
            raw_construction_cost=raw_construction_cost,
            quality_multiplier=quality_multiplier,
            project_type_multiplier=project_type_multiplier,
            floor_factor=floor_factor,
            subtotal=subtotal,
            total_cost=total_cost,
            region_data=rates,
            project_details=project_details,
            line_items=self._line_items(amounts, total_cost),
            assumptions=assumptions,
            metadata=metadata,
            **amounts,
        )

    @staticmethod
    def _multiplier(
        mapping: Mapping[str, float],
        key: str,
        parameter: str,
        assumptions: list[Assumption],
    ) -> float:
        """Resolve a multiplier, documenting any neutral fallback."""
        if key not in mapping:
            logger.info("No %s multiplier for %r, using 1.0", parameter, key)
            assumptions.append(
                Assumption(
                    parameter=parameter,
                    assumed_value="1.0",
                    reasoning=f"No multiplier defined for {parameter} '{key}'; no adjustment applied",
                    confidence=Confidence.LOW,
                )
            )
        return resolve_multiplier(mapping, key)

    @staticmethod
    def _line_items(amounts: dict[str, float], total_cost: float) -> list[CostLineItem]:
        items: list[CostLineItem] = []
        for key, label in _LINE_ITEMS:
            amount = amounts[key]
            percent = amount / total_cost * 100.0 if total_cost > 0 else 0.0
            items.append(
                CostLineItem(key=key, label=label, amount=amount, percent_of_total=percent)
            )
        return items


def compute_estimate(
    request: ProjectRequest | Mapping[str, Any], catalog: RateCatalog,
) -> CostBreakdown:
    """Estimate a single request against an explicitly supplied catalog."""
    return EstimationEngine(RateCatalogRepository(catalog)).estimate(request)
