"""Tests for sorting, filtering and grouping expansion rows."""

from __future__ import annotations

import pytest

from ghanabuild.data.seed import SEED_CATALOG
from ghanabuild.expansion import material_line_items, worker_requirements
from ghanabuild.models.expansion import MaterialLineItem, WorkerRequirement
from ghanabuild.views import filter_items, group_by_category, sort_items


@pytest.fixture()
def materials() -> list[MaterialLineItem]:
    return material_line_items(200.0, SEED_CATALOG.materials)


@pytest.fixture()
def workers() -> list[WorkerRequirement]:
    return worker_requirements(200.0, SEED_CATALOG.workers)


class TestSortItems:
    def test_sort_by_name(self, materials: list[MaterialLineItem]) -> None:
        names = [m.name for m in sort_items(materials, "name")]
        assert names == sorted(names, key=str.lower)

    def test_sort_by_cost_descending(self, materials: list[MaterialLineItem]) -> None:
        costs = [m.cost for m in sort_items(materials, "cost", descending=True)]
        assert costs == sorted(costs, reverse=True)

    def test_sort_by_quantity(self, materials: list[MaterialLineItem]) -> None:
        quantities = [m.quantity for m in sort_items(materials, "quantity")]
        assert quantities == sorted(quantities)

    def test_sort_by_rate(self, materials: list[MaterialLineItem]) -> None:
        rates = [m.cost_per_unit for m in sort_items(materials, "rate")]
        assert rates == sorted(rates)

    def test_sort_workers_by_days(self, workers: list[WorkerRequirement]) -> None:
        days = [w.days_needed for w in sort_items(workers, "days", descending=True)]
        assert days == sorted(days, reverse=True)

    def test_unsupported_key(self, materials: list[MaterialLineItem]) -> None:
        with pytest.raises(ValueError, match="Unsupported sort key"):
            sort_items(materials, "colour")

    def test_days_not_valid_for_materials(self, materials: list[MaterialLineItem]) -> None:
        with pytest.raises(ValueError):
            sort_items(materials, "days")

    def test_empty(self) -> None:
        assert sort_items([], "cost") == []

    def test_does_not_mutate_input(self, materials: list[MaterialLineItem]) -> None:
        before = list(materials)
        sort_items(materials, "cost", descending=True)
        assert materials == before


class TestFilterItems:
    def test_match_on_name(self, materials: list[MaterialLineItem]) -> None:
        result = filter_items(materials, "cement")
        assert [m.name for m in result] == ["Cement (50kg bag)"]

    def test_match_on_category(self, materials: list[MaterialLineItem]) -> None:
        result = filter_items(materials, "ROOF")
        assert {m.category for m in result} == {"Roofing"}
        assert len(result) == 2

    def test_blank_query_returns_all(self, materials: list[MaterialLineItem]) -> None:
        assert filter_items(materials, "  ") == materials

    def test_no_match(self, materials: list[MaterialLineItem]) -> None:
        assert filter_items(materials, "marble") == []

    def test_workers_match_on_role(self, workers: list[WorkerRequirement]) -> None:
        result = filter_items(workers, "plumb")
        assert [w.role for w in result] == ["Plumber"]


class TestGroupByCategory:
    def test_groups_in_catalog_order(self, materials: list[MaterialLineItem]) -> None:
        groups = group_by_category(materials)
        assert list(groups) == list(SEED_CATALOG.materials)

    def test_group_sizes(self, workers: list[WorkerRequirement]) -> None:
        groups = group_by_category(workers)
        for tier, entries in SEED_CATALOG.workers.items():
            assert len(groups[tier]) == len(entries)
