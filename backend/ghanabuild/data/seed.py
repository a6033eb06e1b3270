"""Seed rate catalog for the Ghanabuild estimator.

Rates are 2025 Ghana averages in Ghana cedis (GHS), compiled from
published regional land, block-work and artisan day rates. Accra is the
designated default region.
"""

from datetime import date

from ghanabuild.data.catalog import (
    ConstructionPhase,
    MaterialEntry,
    RateCatalog,
    RateDefaults,
    Region,
    WorkerEntry,
)

_QUALITY_TIERS = {"standard": 1.0, "premium": 1.35, "luxury": 1.8}
_PROJECT_TYPES = {"residential": 1.0, "commercial": 1.25}

SEED_REGIONS: list[Region] = [
    Region(
        name="accra",
        display_name="Accra",
        land_cost_per_plot=500_000.0,
        construction_cost_per_sqm=3_000.0,
        labor_cost_per_day=150.0,
        bathroom_cost=15_000.0,
        floor_multiplier=0.10,
        external_works_rate=0.05,
        location_factor=1.10,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 3_000.0,
            "architectural_approval": 2_500.0,
            "epa_permit": 1_500.0,
            "utility_connection": 1_000.0,
        },
    ),
    Region(
        name="kumasi",
        display_name="Kumasi",
        land_cost_per_plot=300_000.0,
        construction_cost_per_sqm=2_700.0,
        labor_cost_per_day=130.0,
        bathroom_cost=13_000.0,
        floor_multiplier=0.10,
        external_works_rate=0.05,
        location_factor=1.05,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 2_500.0,
            "architectural_approval": 2_000.0,
            "epa_permit": 1_200.0,
            "utility_connection": 900.0,
        },
    ),
    Region(
        name="sekondi-takoradi",
        display_name="Sekondi-Takoradi",
        land_cost_per_plot=250_000.0,
        construction_cost_per_sqm=2_600.0,
        labor_cost_per_day=125.0,
        bathroom_cost=12_500.0,
        floor_multiplier=0.10,
        external_works_rate=0.06,
        location_factor=1.03,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 2_200.0,
            "architectural_approval": 1_800.0,
            "epa_permit": 1_200.0,
            "utility_connection": 800.0,
        },
    ),
    Region(
        name="cape-coast",
        display_name="Cape Coast",
        land_cost_per_plot=180_000.0,
        construction_cost_per_sqm=2_450.0,
        labor_cost_per_day=115.0,
        bathroom_cost=12_000.0,
        floor_multiplier=0.09,
        external_works_rate=0.06,
        location_factor=1.0,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 2_000.0,
            "architectural_approval": 1_500.0,
            "epa_permit": 1_000.0,
            "utility_connection": 750.0,
        },
    ),
    Region(
        name="koforidua",
        display_name="Koforidua",
        land_cost_per_plot=150_000.0,
        construction_cost_per_sqm=2_400.0,
        labor_cost_per_day=110.0,
        bathroom_cost=11_500.0,
        floor_multiplier=0.09,
        external_works_rate=0.05,
        location_factor=1.02,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 1_800.0,
            "architectural_approval": 1_400.0,
            "epa_permit": 1_000.0,
            "utility_connection": 700.0,
        },
    ),
    Region(
        name="ho",
        display_name="Ho",
        land_cost_per_plot=120_000.0,
        construction_cost_per_sqm=2_300.0,
        labor_cost_per_day=105.0,
        bathroom_cost=11_000.0,
        floor_multiplier=0.08,
        external_works_rate=0.05,
        location_factor=1.0,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 1_600.0,
            "architectural_approval": 1_200.0,
            "epa_permit": 900.0,
            "utility_connection": 700.0,
        },
    ),
    Region(
        name="sunyani",
        display_name="Sunyani",
        land_cost_per_plot=110_000.0,
        construction_cost_per_sqm=2_250.0,
        labor_cost_per_day=100.0,
        bathroom_cost=10_500.0,
        floor_multiplier=0.08,
        external_works_rate=0.05,
        location_factor=1.01,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 1_500.0,
            "architectural_approval": 1_200.0,
            "epa_permit": 900.0,
            "utility_connection": 650.0,
        },
    ),
    Region(
        name="tamale",
        display_name="Tamale",
        land_cost_per_plot=100_000.0,
        construction_cost_per_sqm=2_200.0,
        labor_cost_per_day=95.0,
        bathroom_cost=10_000.0,
        floor_multiplier=0.08,
        external_works_rate=0.07,
        location_factor=1.04,
        quality_multipliers=dict(_QUALITY_TIERS),
        project_type_multipliers=dict(_PROJECT_TYPES),
        additional_fees={
            "building_permit": 1_500.0,
            "architectural_approval": 1_000.0,
            "epa_permit": 800.0,
            "utility_connection": 600.0,
        },
    ),
]

SEED_DEFAULTS = RateDefaults(
    markup_rate=0.15,
    contingency_rate=0.05,
    inflation_rate=0.03,
    risk_premium_rate=0.05,
)

SEED_MATERIALS: dict[str, list[MaterialEntry]] = {
    "Foundation & Structure": [
        MaterialEntry(name="Cement (50kg bag)", unit="bag", cost_per_unit=95.0, quantity_per_sqm=1.2),
        MaterialEntry(name="Sharp Sand", unit="m³", cost_per_unit=180.0, quantity_per_sqm=0.15),
        MaterialEntry(name="Granite Chippings", unit="m³", cost_per_unit=320.0, quantity_per_sqm=0.1),
        MaterialEntry(name="Reinforcement Steel", unit="kg", cost_per_unit=14.0, quantity_per_sqm=25.0),
    ],
    "Masonry": [
        MaterialEntry(name="Sandcrete Blocks (6 inch)", unit="piece", cost_per_unit=7.5, quantity_per_sqm=30.0),
        MaterialEntry(name="Plastering Sand", unit="m³", cost_per_unit=150.0, quantity_per_sqm=0.05),
    ],
    "Roofing": [
        MaterialEntry(name="Aluminium Roofing Sheets", unit="m²", cost_per_unit=85.0, quantity_per_sqm=1.15),
        MaterialEntry(name="Treated Timber", unit="m", cost_per_unit=22.0, quantity_per_sqm=4.0),
    ],
    "Finishes": [
        MaterialEntry(name="Floor Tiles", unit="m²", cost_per_unit=120.0, quantity_per_sqm=1.05),
        MaterialEntry(name="Emulsion Paint", unit="litre", cost_per_unit=45.0, quantity_per_sqm=0.6),
        MaterialEntry(name="Doors & Frames", unit="piece", cost_per_unit=1_800.0, quantity_per_sqm=0.05),
        MaterialEntry(name="Aluminium Windows", unit="m²", cost_per_unit=650.0, quantity_per_sqm=0.12),
    ],
    "Plumbing & Electrical": [
        MaterialEntry(name="PVC Pipes", unit="m", cost_per_unit=18.0, quantity_per_sqm=1.5),
        MaterialEntry(name="Electrical Cable (2.5mm)", unit="m", cost_per_unit=9.0, quantity_per_sqm=6.0),
    ],
}

SEED_WORKERS: dict[str, list[WorkerEntry]] = {
    "Skilled": [
        WorkerEntry(role="Mason", daily_rate=200.0, productivity_sqm_per_day=8.0, category="Skilled"),
        WorkerEntry(role="Carpenter", daily_rate=200.0, productivity_sqm_per_day=12.0, category="Skilled"),
        WorkerEntry(role="Steel Bender", daily_rate=190.0, productivity_sqm_per_day=15.0, category="Skilled"),
        WorkerEntry(role="Electrician", daily_rate=250.0, productivity_sqm_per_day=20.0, category="Skilled"),
        WorkerEntry(role="Plumber", daily_rate=250.0, productivity_sqm_per_day=25.0, category="Skilled"),
        WorkerEntry(role="Tiler", daily_rate=220.0, productivity_sqm_per_day=15.0, category="Skilled"),
        WorkerEntry(role="Painter", daily_rate=180.0, productivity_sqm_per_day=30.0, category="Skilled"),
    ],
    "Unskilled": [
        WorkerEntry(role="Labourer", daily_rate=100.0, productivity_sqm_per_day=10.0, category="Unskilled"),
    ],
    "Supervisory": [
        WorkerEntry(role="Foreman", daily_rate=350.0, productivity_sqm_per_day=40.0, category="Supervisory"),
        WorkerEntry(role="Site Engineer", daily_rate=600.0, productivity_sqm_per_day=60.0, category="Supervisory"),
    ],
}

SEED_PHASES: list[ConstructionPhase] = [
    ConstructionPhase(
        name="Site Preparation",
        duration_days=14,
        percentage_of_total=5.0,
        activities=["Site clearing", "Setting out", "Excavation"],
        required_workers=["Labourer", "Foreman"],
        required_materials=[],
    ),
    ConstructionPhase(
        name="Foundation",
        duration_days=21,
        percentage_of_total=15.0,
        activities=["Footings", "Foundation walls", "Oversite concrete"],
        required_workers=["Mason", "Steel Bender", "Labourer"],
        required_materials=[
            "Cement (50kg bag)", "Sharp Sand", "Granite Chippings", "Reinforcement Steel",
        ],
    ),
    ConstructionPhase(
        name="Superstructure",
        duration_days=45,
        percentage_of_total=30.0,
        activities=["Block work", "Columns and beams", "Lintels", "Floor slabs"],
        required_workers=["Mason", "Carpenter", "Steel Bender", "Labourer"],
        required_materials=[
            "Sandcrete Blocks (6 inch)", "Cement (50kg bag)", "Reinforcement Steel",
        ],
    ),
    ConstructionPhase(
        name="Roofing",
        duration_days=21,
        percentage_of_total=15.0,
        activities=["Roof trusses", "Roof covering", "Fascia and gutters"],
        required_workers=["Carpenter", "Labourer"],
        required_materials=["Treated Timber", "Aluminium Roofing Sheets"],
    ),
    ConstructionPhase(
        name="Mechanical, Electrical & Plumbing",
        duration_days=30,
        percentage_of_total=15.0,
        activities=["Conduits and wiring", "Water supply", "Drainage"],
        required_workers=["Electrician", "Plumber"],
        required_materials=["PVC Pipes", "Electrical Cable (2.5mm)"],
    ),
    ConstructionPhase(
        name="Finishes",
        duration_days=35,
        percentage_of_total=20.0,
        activities=["Plastering", "Tiling", "Painting", "Doors and windows"],
        required_workers=["Mason", "Tiler", "Painter", "Carpenter"],
        required_materials=[
            "Plastering Sand", "Floor Tiles", "Emulsion Paint",
            "Doors & Frames", "Aluminium Windows",
        ],
    ),
]

SEED_CATALOG = RateCatalog(
    version="2025.1",
    currency="GHS",
    last_updated=date(2025, 6, 1),
    default_region="accra",
    regions=SEED_REGIONS,
    defaults=SEED_DEFAULTS,
    materials=SEED_MATERIALS,
    workers=SEED_WORKERS,
    phases=SEED_PHASES,
)
