"""Derived quantity models for the materials, workforce and schedule tables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MaterialLineItem(BaseModel):
    """A catalog material scaled to the project's floor area."""

    model_config = ConfigDict(frozen=True)

    category: str
    name: str
    unit: str
    cost_per_unit: float
    quantity: float
    cost: float


class WorkerRequirement(BaseModel):
    """A trade's whole-day requirement for the project's floor area."""

    model_config = ConfigDict(frozen=True)

    role: str
    category: str
    daily_rate: float
    productivity: float
    days_needed: int
    cost: float


class PhaseSlot(BaseModel):
    """A construction phase placed on the sequential project timeline."""

    model_config = ConfigDict(frozen=True)

    name: str
    duration_days: int
    start_day: int
    end_day: int
    percentage_of_total: float
    allocated_cost: float | None = None
    activities: tuple[str, ...] = ()
    required_workers: tuple[str, ...] = ()
    required_materials: tuple[str, ...] = ()


class ScheduleSummary(BaseModel):
    """Total duration plus the ordered phase timeline."""

    model_config = ConfigDict(frozen=True)

    total_duration_days: int
    phases: tuple[PhaseSlot, ...] = ()
