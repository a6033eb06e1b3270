"""Rate catalog repository: region lookup, multipliers and override resolution."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ghanabuild.models.estimate import RegionData

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ghanabuild.data.catalog import (
        ConstructionPhase,
        MaterialEntry,
        RateCatalog,
        RateDefaults,
        Region,
        WorkerEntry,
    )
    from ghanabuild.models.request import ProjectRequest

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _slugify(name: str) -> str:
    return _WHITESPACE.sub("-", name.strip().lower())


def resolve_multiplier(mapping: Mapping[str, float], key: str) -> float:
    """Return ``mapping[key]``, or a neutral 1.0 when the key is unknown."""
    return mapping.get(key, 1.0)


class RateCatalogRepository:
    """Read-only access to a RateCatalog.

    Wraps the catalog and provides lookup methods with exact matching and
    lenient fallback: an unknown region resolves to the default region and
    an unknown tier resolves to a neutral multiplier, so stale client data
    never breaks an estimate.
    """

    def __init__(self, catalog: RateCatalog) -> None:
        self._catalog = catalog
        self._regions_by_slug: dict[str, Region] = {r.name: r for r in catalog.regions}
        self._regions_by_display: dict[str, Region] = {
            r.display_name.strip().lower(): r for r in catalog.regions
        }
        default_name = catalog.default_region or catalog.regions[0].name
        self._default_region = self._regions_by_slug[default_name]

    @property
    def catalog(self) -> RateCatalog:
        return self._catalog

    @property
    def defaults(self) -> RateDefaults:
        return self._catalog.defaults

    @property
    def default_region(self) -> Region:
        return self._default_region

    @property
    def regions(self) -> list[Region]:
        return list(self._catalog.regions)

    @property
    def materials(self) -> dict[str, list[MaterialEntry]]:
        return {category: list(items) for category, items in self._catalog.materials.items()}

    @property
    def workers(self) -> dict[str, list[WorkerEntry]]:
        return {tier: list(items) for tier, items in self._catalog.workers.items()}

    @property
    def phases(self) -> list[ConstructionPhase]:
        return list(self._catalog.phases)

    def get_region(self, name: str) -> Region | None:
        """Look up a region by slug or display name.

        Returns None if no match is found.
        """
        region = self._regions_by_slug.get(name)
        if region is not None:
            return region
        region = self._regions_by_slug.get(_slugify(name))
        if region is not None:
            return region
        return self._regions_by_display.get(name.strip().lower())

    def resolve_region(self, name: str) -> tuple[Region, list[str]]:
        """Resolve a region name, falling back to the default region.

        Returns a tuple of (region, fallback_reasons). Never raises.
        """
        region = self.get_region(name)
        if region is not None:
            return region, []

        logger.info(
            "Unknown region %r, falling back to %s", name, self._default_region.name,
        )
        reason = (
            f"Region '{name}' not found; used default region "
            f"'{self._default_region.display_name}' instead"
            if name
            else f"No region given; used default region '{self._default_region.display_name}'"
        )
        return self._default_region, [reason]

    def resolve_rates(
        self, region: Region, request: ProjectRequest,
    ) -> tuple[RegionData, list[str]]:
        """Substitute active, valid custom overrides for the regional rates.

        An override is honored only when its flag is set and its value is a
        non-negative number; otherwise the regional rate is used and the
        rejection is reported in the returned reasons.
        """
        rejections: list[str] = []

        land, custom_land = self._apply_override(
            "land cost", region.land_cost_per_plot,
            request.use_custom_land_cost, request.custom_land_cost, rejections,
        )
        material, custom_material = self._apply_override(
            "material cost", region.construction_cost_per_sqm,
            request.use_custom_material_cost, request.custom_material_cost, rejections,
        )
        labor, custom_labor = self._apply_override(
            "labor cost", region.labor_cost_per_day,
            request.use_custom_labor_cost, request.custom_labor_cost, rejections,
        )

        region_data = RegionData(
            name=region.display_name,
            slug=region.name,
            land_cost_per_plot=land,
            construction_cost_per_sqm=material,
            labor_cost_per_day=labor,
            bathroom_cost=region.bathroom_cost,
            floor_multiplier=region.floor_multiplier,
            external_works_rate=region.external_works_rate,
            location_factor=region.location_factor,
            additional_fees=dict(region.additional_fees),
            is_custom_land_cost=custom_land,
            is_custom_material_cost=custom_material,
            is_custom_labor_cost=custom_labor,
        )
        return region_data, rejections

    @staticmethod
    def _apply_override(
        label: str,
        regional_rate: float,
        enabled: bool | None,
        value: float | None,
        rejections: list[str],
    ) -> tuple[float, bool]:
        if enabled is None:
            logger.warning("Unreadable custom %s flag", label)
            rejections.append(
                f"Custom {label} flag is not a yes/no value; "
                f"used regional rate {regional_rate:g}"
            )
            return regional_rate, False
        if not enabled:
            return regional_rate, False
        if value is None or value < 0:
            logger.warning("Rejected custom %s override %r", label, value)
            shown = "missing or non-numeric" if value is None else f"{value:g}"
            rejections.append(
                f"Custom {label} ({shown}) is not a valid non-negative number; "
                f"used regional rate {regional_rate:g}"
            )
            return regional_rate, False
        return value, True
