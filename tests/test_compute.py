"""
Tests for the solar geometry engine and form validation
"""

import math
import re
from datetime import date, time

import pytest

import shadowsoul.compute as compute
from shadowsoul.compute import (
    MIN_SHADOW_ALTITUDE_DEG,
    InputValidationError,
    compute_shadow,
    day_of_year,
    height_in_feet,
    run,
    shadow_from_altitude,
    solar_altitude,
    standard_meridian,
    validate_query,
)
from shadowsoul.interpretation import FOCUSED_TITLE
from shadowsoul.models import ShadowInput

_SCI = re.compile(r"^\d\.\d{2}e[+-]\d+$")


def _input(**overrides) -> ShadowInput:
    fields = dict(
        height=6.0,
        height_unit="ft",
        latitude=40.7128,
        longitude=-74.0060,
        direction="North",
        footwear="Nike",
        date=date(2024, 6, 21),
        time=time(12, 0),
    )
    fields.update(overrides)
    return ShadowInput(**fields)


class TestHeightInFeet:
    """Test height normalization."""

    def test_feet_unchanged(self):
        assert height_in_feet(6.0, "ft") == 6.0

    def test_centimeters(self):
        assert height_in_feet(180, "cm") == pytest.approx(5.905512)

    def test_meters(self):
        assert height_in_feet(2, "m") == pytest.approx(6.56168)


class TestCalendar:
    """Test day-of-year and standard meridian helpers."""

    @pytest.mark.parametrize(
        "d, expected",
        [
            (date(2024, 1, 1), 1),
            (date(2024, 3, 1), 61),
            (date(2023, 3, 1), 60),
            (date(2023, 12, 31), 365),
            (date(2024, 12, 31), 366),
        ],
    )
    def test_day_of_year(self, d, expected):
        assert day_of_year(d) == expected

    @pytest.mark.parametrize(
        "longitude, expected",
        [
            (-74.006, -75),
            (0.0, 0),
            (126.97, 120),
            (7.5, 15),
            (-7.5, 0),
            (179.0, 180),
        ],
    )
    def test_standard_meridian(self, longitude, expected):
        assert standard_meridian(longitude) == expected


class TestSolarAltitude:
    """Test sun altitude for known situations."""

    def test_solstice_noon_new_york(self):
        alt = solar_altitude(40.7128, -74.0060, date(2024, 6, 21), time(12, 0))
        assert 70 < alt < 75

    def test_deep_night_is_negative(self):
        alt = solar_altitude(40.7128, -74.0060, date(2024, 6, 21), time(23, 0))
        assert alt < -10

    def test_equator_equinox_noon_near_zenith(self):
        alt = solar_altitude(0.0, 0.0, date(2024, 3, 20), time(12, 0))
        assert alt > 85

    def test_poles_do_not_raise(self):
        for lat in (-90.0, 90.0):
            alt = solar_altitude(lat, 180.0, date(2024, 12, 21), time(0, 0))
            assert -90 <= alt <= 90


class TestShadowFromAltitude:
    """Test the altitude gate and unit conversions."""

    def test_boundary_is_inclusive(self):
        result = shadow_from_altitude(6.0, MIN_SHADOW_ALTITUDE_DEG)

        assert result.shadow_exists is False
        assert result.length_feet == 0
        assert result.planck_lengths == "0"
        assert result.light_years == "0"
        assert result.horse_units == 0
        assert result.sun_altitude_deg == 5.0

    def test_just_above_boundary_casts_shadow(self):
        result = shadow_from_altitude(6.0, 5.0001)
        assert result.shadow_exists is True
        assert result.length_feet > 60

    def test_negative_altitude_keeps_altitude(self):
        result = shadow_from_altitude(6.0, -30.0)
        assert result.shadow_exists is False
        assert result.sun_altitude_deg == -30.0

    def test_45_degrees_equals_height(self):
        result = shadow_from_altitude(6.0, 45.0)
        assert result.length_feet == pytest.approx(6.0)
        assert result.horse_units == pytest.approx(0.75)

    def test_conversions(self):
        result = shadow_from_altitude(6.0, 45.0)

        assert result.planck_lengths == "1.13e+35"
        assert result.light_years == "1.93e-16"

    def test_zero_height_with_sun_up(self):
        result = shadow_from_altitude(0.0, 60.0)
        assert result.shadow_exists is True
        assert result.length_feet == 0.0
        assert result.planck_lengths == "0.00e+0"


class TestToExponential:
    """Test JavaScript-style scientific notation."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3.5249e34, "3.52e+34"),
            (1.5e5, "1.50e+5"),
            (0.000123, "1.23e-4"),
            (5.893e-17, "5.89e-17"),
        ],
    )
    def test_format(self, value, expected):
        assert compute._to_exponential(value) == expected


class TestComputeShadow:
    """Test the full engine."""

    def test_solstice_noon_short_shadow(self):
        result = compute_shadow(_input())

        assert result.shadow_exists is True
        assert 1.5 < result.length_feet < 2.2
        assert _SCI.match(result.planck_lengths)
        assert _SCI.match(result.light_years)

    def test_deep_night_no_shadow(self):
        result = compute_shadow(_input(time=time(23, 0)))

        assert result.shadow_exists is False
        assert result.length_feet == 0
        assert result.horse_units == 0
        assert result.sun_altitude_deg < MIN_SHADOW_ALTITUDE_DEG

    def test_idempotent(self):
        assert compute_shadow(_input()) == compute_shadow(_input())

    def test_linear_in_height(self):
        base = compute_shadow(_input(height=6.0))
        tripled = compute_shadow(_input(height=18.0))
        assert tripled.length_feet == pytest.approx(3 * base.length_feet)

    def test_unit_equivalence(self):
        feet = compute_shadow(_input(height=6.0, height_unit="ft"))
        meters = compute_shadow(_input(height=6.0 / 3.28084, height_unit="m"))
        assert meters.length_feet == pytest.approx(feet.length_feet)

    def test_horse_units_round_trip(self):
        result = compute_shadow(_input(time=time(16, 30)))
        assert result.shadow_exists
        assert result.horse_units * 8 == pytest.approx(result.length_feet)

    def test_altitude_exactly_at_threshold(self, monkeypatch):
        monkeypatch.setattr(compute, "solar_altitude", lambda *args: 5.0)
        result = compute_shadow(_input())
        assert result.shadow_exists is False
        assert result.length_feet == 0

    def test_total_over_grid(self):
        for lat in (-90.0, -45.5, 0.0, 40.7128, 89.9):
            for lon in (-180.0, -74.006, 0.0, 126.97, 180.0):
                for d in (date(2024, 1, 1), date(2024, 6, 21), date(2023, 12, 31)):
                    for t in (time(0, 0), time(6, 15), time(12, 0), time(18, 45)):
                        result = compute_shadow(
                            _input(latitude=lat, longitude=lon, date=d, time=t)
                        )
                        assert result.length_feet >= 0
                        assert math.isfinite(result.length_feet)
                        assert result.shadow_exists == (
                            result.sun_altitude_deg > MIN_SHADOW_ALTITUDE_DEG
                        )


class TestValidateQuery:
    """Test form-layer validation."""

    def test_valid_query(self, query_factory):
        shadow_input = validate_query(query_factory(height_unit="cm", height=180))

        assert shadow_input.height == 180.0
        assert shadow_input.height_unit == "cm"
        assert shadow_input.date == date(2024, 6, 21)
        assert shadow_input.time == time(12, 0)

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"height": 0}, "Height must be positive"),
            ({"height": -1.5}, "Height must be positive"),
            ({"height": "tall"}, "Numeric field expected"),
            ({"height_unit": "yd"}, "Unknown height unit"),
            ({"latitude": 91}, "Latitude out of range"),
            ({"longitude": -180.5}, "Longitude out of range"),
            ({"direction": "Up"}, "Unknown direction"),
            ({"footwear": "Crocs"}, "Unknown footwear"),
            ({"when": "2024/06/21 12:00"}, "Invalid date/time"),
            ({"when": "2024-02-30 12:00"}, "Invalid date/time"),
        ],
    )
    def test_rejects(self, query_factory, overrides, message):
        with pytest.raises(InputValidationError, match=message):
            validate_query(query_factory(**overrides))

    def test_validation_error_is_value_error(self, query_factory):
        with pytest.raises(ValueError):
            validate_query(query_factory(height=0))


class TestRun:
    """Test the top-level entry point."""

    def test_noon_reading(self, noon_reading):
        assert noon_reading.result.shadow_exists
        assert noon_reading.interpretation.title == FOCUSED_TITLE
        assert noon_reading.input.footwear == "Nike"

    def test_night_reading_still_interpreted(self, night_reading):
        assert night_reading.result.shadow_exists is False
        assert night_reading.interpretation.title == FOCUSED_TITLE

    def test_invalid_query_raises(self, query_factory):
        with pytest.raises(InputValidationError):
            run(query_factory(latitude=123))
