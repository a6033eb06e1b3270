"""Project request model: the single input to the estimation engine.

The model accepts both the snake_case field names and the camelCase keys
sent by the estimator form (``totalFloorArea``, ``preferredFinishQuality``,
``useCustomLandCost`` ...). Numeric fields that drive every downstream cost
are validated strictly; everything else degrades to a sensible default.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel, to_snake

from ghanabuild.exceptions import InvalidInputError
from ghanabuild.models.enums import AreaUnit, FinishQuality, ProjectType

# Exact conversion factor used for all square-feet inputs.
SQFT_TO_SQM = 0.092903

_SQUARE_FEET_ALIASES = frozenset({
    "square-feet", "square_feet", "squarefeet", "sqft", "sq ft", "sq-ft", "ft2", "feet",
})

_TRUE_FLAGS = frozenset({"true", "yes", "y", "on", "1"})
_FALSE_FLAGS = frozenset({"false", "no", "n", "off", "0", ""})

_FIELD_LABELS: dict[str, str] = {
    "total_floor_area": "Total Floor Area",
    "number_of_bathrooms": "Number of Bathrooms",
    "number_of_floors": "Number of Floors",
}


def coerce_number(value: Any) -> float | None:
    """Parse a loosely-typed form value into a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_flag(value: Any) -> bool | None:
    """Parse a form checkbox value; None when it is not recognisably yes or no."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_FLAGS:
            return True
        if text in _FALSE_FLAGS:
            return False
    return None


class ProjectRequest(BaseModel):
    """A single estimate request as collected by the form layer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    region: str = ""
    project_type: str = ProjectType.RESIDENTIAL.value
    total_floor_area: float = Field(gt=0, allow_inf_nan=False)
    area_unit: AreaUnit = AreaUnit.SQUARE_METERS
    number_of_bathrooms: int = Field(ge=1, le=10)
    number_of_floors: int = Field(ge=1, le=5)
    finish_quality: str = Field(
        default=FinishQuality.STANDARD.value,
        validation_alias=AliasChoices(
            "finish_quality", "finishQuality", "preferredFinishQuality",
        ),
    )
    include_external_works: bool = False

    # None marks a flag that was sent but could not be read as yes or no.
    use_custom_land_cost: bool | None = False
    custom_land_cost: float | None = None
    use_custom_material_cost: bool | None = False
    custom_material_cost: float | None = None
    use_custom_labor_cost: bool | None = False
    custom_labor_cost: float | None = None

    @field_validator("region", mode="before")
    @classmethod
    def _region_to_str(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("project_type", mode="before")
    @classmethod
    def _normalize_project_type(cls, v: Any) -> str:
        text = "" if v is None else str(v).strip().lower()
        return text or ProjectType.RESIDENTIAL.value

    @field_validator("finish_quality", mode="before")
    @classmethod
    def _normalize_finish_quality(cls, v: Any) -> str:
        text = "" if v is None else str(v).strip().lower()
        return text or FinishQuality.STANDARD.value

    @field_validator("area_unit", mode="before")
    @classmethod
    def _normalize_area_unit(cls, v: Any) -> AreaUnit:
        # Anything that is not recognisably square feet is square meters.
        text = "" if v is None else str(v).strip().lower()
        if text in _SQUARE_FEET_ALIASES:
            return AreaUnit.SQUARE_FEET
        return AreaUnit.SQUARE_METERS

    @field_validator(
        "total_floor_area", "number_of_bathrooms", "number_of_floors", mode="before",
    )
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            msg = "Input should be a number, not true/false"
            raise ValueError(msg)
        return v

    @field_validator("include_external_works", mode="before")
    @classmethod
    def _lenient_external_works(cls, v: Any) -> bool:
        return bool(coerce_flag(v))

    @field_validator(
        "use_custom_land_cost", "use_custom_material_cost", "use_custom_labor_cost",
        mode="before",
    )
    @classmethod
    def _lenient_override_flag(cls, v: Any) -> bool | None:
        return coerce_flag(v)

    @field_validator(
        "custom_land_cost", "custom_material_cost", "custom_labor_cost", mode="before",
    )
    @classmethod
    def _lenient_override(cls, v: Any) -> float | None:
        return coerce_number(v)

    @property
    def area_sqm(self) -> float:
        """Floor area normalized to square meters."""
        if self.area_unit == AreaUnit.SQUARE_FEET:
            return self.total_floor_area * SQFT_TO_SQM
        return self.total_floor_area

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ProjectRequest:
        """Validate a raw payload, raising InvalidInputError on bad fields."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            details = [_describe_error(err) for err in exc.errors()]
            msg = "Please correct the following errors:"
            raise InvalidInputError(msg, details=details) from exc


def _describe_error(err: Mapping[str, Any]) -> str:
    loc = err.get("loc") or ()
    field = to_snake(str(loc[0])) if loc else "request"
    label = _FIELD_LABELS.get(field, field.replace("_", " ").capitalize())
    if err.get("type") == "missing":
        return f"{label} is required."
    return f"{label}: {err.get('msg', 'invalid value')}."
