"""Enums for the Ghanabuild domain models."""

from enum import StrEnum


class AreaUnit(StrEnum):
    """Unit the floor area was entered in."""

    SQUARE_METERS = "square-meters"
    SQUARE_FEET = "square-feet"


class FinishQuality(StrEnum):
    """Finish tiers every region prices."""

    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class ProjectType(StrEnum):
    """Project types every region prices."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class Confidence(StrEnum):
    """Confidence level attached to a documented assumption."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
