"""Derived-quantity expansion for the materials, workforce and schedule tables.

These functions project a breakdown's normalized area onto the static
catalogs for reporting. They never feed back into the CostBreakdown.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ghanabuild.models.expansion import (
    MaterialLineItem,
    PhaseSlot,
    ScheduleSummary,
    WorkerRequirement,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from ghanabuild.data.catalog import ConstructionPhase, MaterialEntry, WorkerEntry


def _check_area(area_sqm: float) -> None:
    if not math.isfinite(area_sqm) or area_sqm < 0:
        msg = f"area_sqm must be a finite non-negative number, got {area_sqm}"
        raise ValueError(msg)


def material_line_items(
    area_sqm: float,
    materials: Mapping[str, Sequence[MaterialEntry]],
) -> list[MaterialLineItem]:
    """Scale every catalog material to the floor area.

    ``quantity = quantity_per_sqm * area_sqm`` and
    ``cost = quantity * cost_per_unit``. Catalog order is preserved.
    """
    _check_area(area_sqm)
    items: list[MaterialLineItem] = []
    for category, entries in materials.items():
        for entry in entries:
            quantity = entry.quantity_per_sqm * area_sqm
            items.append(
                MaterialLineItem(
                    category=category,
                    name=entry.name,
                    unit=entry.unit,
                    cost_per_unit=entry.cost_per_unit,
                    quantity=quantity,
                    cost=quantity * entry.cost_per_unit,
                )
            )
    return items


def worker_requirements(
    area_sqm: float,
    workers: Mapping[str, Sequence[WorkerEntry]],
) -> list[WorkerRequirement]:
    """Compute whole working days and labour cost per trade.

    Days are always rounded up: a fractional day is paid as a full day.
    """
    _check_area(area_sqm)
    items: list[WorkerRequirement] = []
    for entries in workers.values():
        for entry in entries:
            days_needed = math.ceil(area_sqm / entry.productivity_sqm_per_day)
            items.append(
                WorkerRequirement(
                    role=entry.role,
                    category=entry.category,
                    daily_rate=entry.daily_rate,
                    productivity=entry.productivity_sqm_per_day,
                    days_needed=days_needed,
                    cost=days_needed * entry.daily_rate,
                )
            )
    return items


def schedule_summary(
    phases: Sequence[ConstructionPhase],
    total_cost: float | None = None,
) -> ScheduleSummary:
    """Lay the phases end to end and sum their durations.

    When ``total_cost`` is given, each phase also gets its
    ``percentage_of_total`` share of it.
    """
    slots: list[PhaseSlot] = []
    day = 0
    for phase in phases:
        allocated = (
            total_cost * phase.percentage_of_total / 100.0
            if total_cost is not None
            else None
        )
        slots.append(
            PhaseSlot(
                name=phase.name,
                duration_days=phase.duration_days,
                start_day=day,
                end_day=day + phase.duration_days,
                percentage_of_total=phase.percentage_of_total,
                allocated_cost=allocated,
                activities=phase.activities,
                required_workers=phase.required_workers,
                required_materials=phase.required_materials,
            )
        )
        day += phase.duration_days
    return ScheduleSummary(total_duration_days=day, phases=slots)


def materials_total(items: Iterable[MaterialLineItem]) -> float:
    return sum(item.cost for item in items)


def workforce_total(items: Iterable[WorkerRequirement]) -> float:
    return sum(item.cost for item in items)
