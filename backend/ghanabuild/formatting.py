"""Formatting helpers for cost breakdown output.

Display-only: amounts stay in the catalog currency (Ghana cedis by
default), no conversion is performed.
"""

from __future__ import annotations

from ghanabuild.models.enums import AreaUnit
from ghanabuild.models.request import SQFT_TO_SQM

CEDI_SYMBOL = "GH₵"


def format_currency(amount: float, symbol: str = CEDI_SYMBOL) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= 10,000: no pesewas, with comma separators (e.g., 'GH₵1,496,800')
    - Amounts < 10,000: with pesewas (e.g., 'GH₵9,876.54')
    """
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if value >= 10_000:
        return f"{sign}{symbol}{value:,.0f}"
    return f"{sign}{symbol}{value:,.2f}"


def format_area(area_sqm: float, unit: AreaUnit = AreaUnit.SQUARE_METERS) -> str:
    """Format an area in the unit the user entered it in."""
    if unit == AreaUnit.SQUARE_FEET:
        return f"{area_sqm / SQFT_TO_SQM:,.0f} sq ft"
    return f"{area_sqm:,.0f} m²"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal place (e.g., '44.1%')."""
    return f"{value:.1f}%"
