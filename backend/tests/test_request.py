"""Tests for ProjectRequest parsing and normalization."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from ghanabuild.exceptions import InvalidInputError
from ghanabuild.models.enums import AreaUnit
from ghanabuild.models.request import SQFT_TO_SQM, ProjectRequest, coerce_flag, coerce_number

_BASE: dict[str, Any] = {
    "totalFloorArea": 150,
    "numberOfBathrooms": 2,
    "numberOfFloors": 1,
}


def _parse(**kwargs: Any) -> ProjectRequest:
    return ProjectRequest.from_payload({**_BASE, **kwargs})


class TestDefaults:
    def test_optional_fields_default(self) -> None:
        request = _parse()
        assert request.region == ""
        assert request.project_type == "residential"
        assert request.finish_quality == "standard"
        assert request.area_unit == AreaUnit.SQUARE_METERS
        assert request.include_external_works is False
        assert request.use_custom_land_cost is False
        assert request.custom_land_cost is None

    def test_blank_strings_use_defaults(self) -> None:
        request = _parse(projectType="", finishQuality="  ")
        assert request.project_type == "residential"
        assert request.finish_quality == "standard"


class TestAliases:
    def test_snake_case_keys(self) -> None:
        request = ProjectRequest.from_payload(
            {"total_floor_area": 80, "number_of_bathrooms": 1, "number_of_floors": 2},
        )
        assert request.total_floor_area == 80.0
        assert request.number_of_floors == 2

    def test_preferred_finish_quality_key(self) -> None:
        assert _parse(preferredFinishQuality="Luxury").finish_quality == "luxury"

    def test_project_type_lowercased(self) -> None:
        assert _parse(projectType=" Commercial ").project_type == "commercial"


class TestAreaUnit:
    @pytest.mark.parametrize("unit", ["square-feet", "sqft", "SQ FT", "square_feet"])
    def test_square_feet_aliases(self, unit: str) -> None:
        request = _parse(areaUnit=unit)
        assert request.area_unit == AreaUnit.SQUARE_FEET
        assert request.area_sqm == pytest.approx(150 * SQFT_TO_SQM)

    @pytest.mark.parametrize("unit", ["square-meters", "sqm", "", None, "acres"])
    def test_everything_else_is_square_meters(self, unit: Any) -> None:
        request = _parse(areaUnit=unit)
        assert request.area_unit == AreaUnit.SQUARE_METERS
        assert request.area_sqm == 150.0


class TestOverrideCoercion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1500", 1500.0),
            (1500, 1500.0),
            (" 12.5 ", 12.5),
            (-5, -5.0),
            ("", None),
            ("abc", None),
            (None, None),
            (True, None),
            (float("inf"), None),
            (float("nan"), None),
        ],
    )
    def test_coerce_number(self, value: Any, expected: float | None) -> None:
        assert coerce_number(value) == expected

    def test_invalid_override_does_not_fail_request(self) -> None:
        request = _parse(useCustomLandCost=True, customLandCost="lots")
        assert request.use_custom_land_cost is True
        assert request.custom_land_cost is None


class TestFlagCoercion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            (None, False),
            (1, True),
            (0, False),
            (" Yes ", True),
            ("off", False),
            ("", False),
            ("maybe", None),
            (2, None),
            ([], None),
        ],
    )
    def test_coerce_flag(self, value: Any, expected: bool | None) -> None:
        assert coerce_flag(value) is expected

    def test_unreadable_override_flag_kept_as_none(self) -> None:
        request = _parse(useCustomLandCost="maybe", customLandCost=10)
        assert request.use_custom_land_cost is None

    def test_unreadable_external_works_flag_is_false(self) -> None:
        assert _parse(includeExternalWorks="perhaps").include_external_works is False


class TestValidation:
    @pytest.mark.parametrize("field", ["totalFloorArea", "numberOfBathrooms", "numberOfFloors"])
    def test_booleans_rejected_for_numeric_fields(self, field: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            _parse(**{field: True})
        [detail] = exc_info.value.details
        assert "true/false" in detail

    def test_details_name_fields(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ProjectRequest.from_payload({"totalFloorArea": "abc", "numberOfFloors": 9})
        details = exc_info.value.details
        assert any(d.startswith("Total Floor Area:") for d in details)
        assert "Number of Bathrooms is required." in details
        assert any(d.startswith("Number of Floors:") for d in details)

    def test_error_message(self) -> None:
        with pytest.raises(InvalidInputError, match="correct the following"):
            ProjectRequest.from_payload({})

    def test_request_is_frozen(self) -> None:
        request = _parse()
        with pytest.raises(ValidationError):
            request.number_of_floors = 3  # type: ignore[misc]
