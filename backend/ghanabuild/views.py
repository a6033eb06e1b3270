"""Stateless view-layer queries over expansion results.

Sorting, filtering and grouping for the materials and workforce tables.
None of this touches the engine.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ghanabuild.models.expansion import MaterialLineItem, WorkerRequirement

_Item = TypeVar("_Item", MaterialLineItem, WorkerRequirement)

MATERIAL_SORT_KEYS: dict[str, Callable[[MaterialLineItem], Any]] = {
    "name": lambda m: m.name.lower(),
    "cost": lambda m: m.cost,
    "quantity": lambda m: m.quantity,
    "rate": lambda m: m.cost_per_unit,
}

WORKER_SORT_KEYS: dict[str, Callable[[WorkerRequirement], Any]] = {
    "name": lambda w: w.role.lower(),
    "cost": lambda w: w.cost,
    "days": lambda w: w.days_needed,
    "rate": lambda w: w.daily_rate,
}


def _label(item: MaterialLineItem | WorkerRequirement) -> str:
    return item.name if isinstance(item, MaterialLineItem) else item.role


def sort_items(items: Iterable[_Item], key: str = "name", descending: bool = False) -> list[_Item]:
    """Sort materials or worker rows by one of the supported keys.

    Raises:
        ValueError: If ``key`` is not supported for the item type.
    """
    rows = list(items)
    if not rows:
        return rows
    keys: dict[str, Callable[[Any], Any]] = (
        MATERIAL_SORT_KEYS if isinstance(rows[0], MaterialLineItem) else WORKER_SORT_KEYS
    )
    sort_key = keys.get(key)
    if sort_key is None:
        msg = f"Unsupported sort key '{key}'; expected one of {sorted(keys)}"
        raise ValueError(msg)
    return sorted(rows, key=sort_key, reverse=descending)


def filter_items(items: Iterable[_Item], query: str) -> list[_Item]:
    """Case-insensitive substring match over name and category."""
    needle = query.strip().lower()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if needle in _label(item).lower() or needle in item.category.lower()
    ]


def group_by_category(items: Iterable[_Item]) -> dict[str, list[_Item]]:
    """Group rows by category, keeping first-seen category order."""
    groups: dict[str, list[_Item]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups
