"""Tests for the materials, workforce and schedule expansion functions."""

from __future__ import annotations

import pytest

from ghanabuild.data.catalog import ConstructionPhase, MaterialEntry, WorkerEntry
from ghanabuild.data.seed import SEED_CATALOG
from ghanabuild.expansion import (
    material_line_items,
    materials_total,
    schedule_summary,
    worker_requirements,
    workforce_total,
)

_MATERIALS = {
    "Structure": [
        MaterialEntry(name="Cement", unit="bag", cost_per_unit=95.0, quantity_per_sqm=1.2),
        MaterialEntry(name="Steel", unit="kg", cost_per_unit=14.0, quantity_per_sqm=25.0),
    ],
    "Finishes": [
        MaterialEntry(name="Tiles", unit="m²", cost_per_unit=120.0, quantity_per_sqm=1.05),
    ],
}

_WORKERS = {
    "Skilled": [
        WorkerEntry(role="Mason", daily_rate=200.0, productivity_sqm_per_day=8.0, category="Skilled"),
        WorkerEntry(role="Carpenter", daily_rate=200.0, productivity_sqm_per_day=12.0, category="Skilled"),
    ],
    "Unskilled": [
        WorkerEntry(role="Labourer", daily_rate=100.0, productivity_sqm_per_day=10.0, category="Unskilled"),
    ],
}


class TestMaterialLineItems:
    def test_quantity_and_cost(self) -> None:
        items = material_line_items(200.0, _MATERIALS)
        cement = items[0]
        assert cement.category == "Structure"
        assert cement.name == "Cement"
        assert cement.unit == "bag"
        assert cement.quantity == pytest.approx(240.0)
        assert cement.cost == pytest.approx(22_800.0)

    def test_preserves_catalog_order(self) -> None:
        items = material_line_items(10.0, _MATERIALS)
        assert [i.name for i in items] == ["Cement", "Steel", "Tiles"]
        assert [i.category for i in items] == ["Structure", "Structure", "Finishes"]

    def test_zero_area(self) -> None:
        items = material_line_items(0.0, _MATERIALS)
        assert all(i.quantity == 0.0 and i.cost == 0.0 for i in items)

    def test_negative_area_rejected(self) -> None:
        with pytest.raises(ValueError, match="area_sqm"):
            material_line_items(-1.0, _MATERIALS)

    def test_total(self) -> None:
        items = material_line_items(100.0, _MATERIALS)
        expected = 100 * (1.2 * 95 + 25 * 14 + 1.05 * 120)
        assert materials_total(items) == pytest.approx(expected)

    def test_seed_catalog_covers_every_material(self) -> None:
        items = material_line_items(150.0, SEED_CATALOG.materials)
        assert len(items) == sum(len(v) for v in SEED_CATALOG.materials.values())


class TestWorkerRequirements:
    def test_exact_division(self) -> None:
        mason = worker_requirements(200.0, _WORKERS)[0]
        assert mason.role == "Mason"
        assert mason.days_needed == 25
        assert mason.cost == pytest.approx(5_000.0)

    def test_fractional_days_round_up(self) -> None:
        carpenter = worker_requirements(200.0, _WORKERS)[1]
        assert carpenter.days_needed == 17
        assert carpenter.cost == pytest.approx(3_400.0)

    def test_tiny_area_costs_a_full_day(self) -> None:
        items = worker_requirements(0.5, _WORKERS)
        assert all(i.days_needed == 1 for i in items)

    def test_zero_area_needs_no_days(self) -> None:
        items = worker_requirements(0.0, _WORKERS)
        assert all(i.days_needed == 0 for i in items)

    def test_carries_category_and_productivity(self) -> None:
        labourer = worker_requirements(100.0, _WORKERS)[2]
        assert labourer.category == "Unskilled"
        assert labourer.productivity == 10.0
        assert labourer.daily_rate == 100.0

    def test_total(self) -> None:
        items = worker_requirements(200.0, _WORKERS)
        assert workforce_total(items) == pytest.approx(5_000 + 3_400 + 20 * 100)


class TestScheduleSummary:
    def test_total_duration_is_sum(self) -> None:
        summary = schedule_summary(SEED_CATALOG.phases)
        assert summary.total_duration_days == sum(p.duration_days for p in SEED_CATALOG.phases)
        assert summary.total_duration_days == 166

    def test_phases_are_sequential(self) -> None:
        summary = schedule_summary(SEED_CATALOG.phases)
        assert summary.phases[0].start_day == 0
        for prev, nxt in zip(summary.phases, summary.phases[1:]):
            assert nxt.start_day == prev.end_day
        assert summary.phases[-1].end_day == summary.total_duration_days

    def test_cost_allocation(self) -> None:
        summary = schedule_summary(SEED_CATALOG.phases, total_cost=1_000_000.0)
        foundation = next(p for p in summary.phases if p.name == "Foundation")
        assert foundation.allocated_cost == pytest.approx(150_000.0)
        allocated = sum(p.allocated_cost or 0.0 for p in summary.phases)
        assert allocated == pytest.approx(1_000_000.0)

    def test_no_allocation_without_total(self) -> None:
        summary = schedule_summary(SEED_CATALOG.phases)
        assert all(p.allocated_cost is None for p in summary.phases)

    def test_empty_phase_list(self) -> None:
        summary = schedule_summary([])
        assert summary.total_duration_days == 0
        assert summary.phases == ()

    def test_copies_requirements(self) -> None:
        phase = ConstructionPhase(
            name="Roofing",
            duration_days=10,
            percentage_of_total=100.0,
            activities=["Trusses"],
            required_workers=["Carpenter"],
            required_materials=["Timber"],
        )
        slot = schedule_summary([phase]).phases[0]
        assert slot.activities == ("Trusses",)
        assert slot.required_workers == ("Carpenter",)
        assert slot.required_materials == ("Timber",)
