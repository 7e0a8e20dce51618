"""Solar geometry computation layer — form validation, sun altitude, and shadow length."""

import math
from datetime import date, datetime, time

import structlog

from shadowsoul.interpretation import select_interpretation
from shadowsoul.models import (
    DIRECTIONS,
    FOOTWEAR,
    HEIGHT_UNITS,
    QueryInput,
    ShadowInput,
    ShadowReading,
    ShadowResult,
)

log = structlog.get_logger(__name__)

# Below this altitude shadows grow without bound; treated as "no shadow".
MIN_SHADOW_ALTITUDE_DEG = 5.0

_FEET_PER_UNIT: dict[str, float] = {
    "ft": 1.0,
    "cm": 0.0328084,
    "m": 3.28084,
}
_METERS_PER_FOOT = 0.3048
_PLANCK_LENGTH_M = 1.616e-35
_LIGHT_YEAR_M = 9.461e15
_HORSE_LENGTH_FT = 8.0
_MINUTES_PER_DEGREE = 4.0


class InputValidationError(ValueError):
    """Form input outside the accepted ranges."""


def height_in_feet(height: float, unit: str) -> float:
    """Normalize a height to feet. Unknown units are treated as feet."""
    return height * _FEET_PER_UNIT.get(unit, 1.0)


def day_of_year(d: date) -> int:
    """Day of year, January 1 = 1."""
    return d.timetuple().tm_yday


def solar_declination(doy: int) -> float:
    """Solar declination in degrees (Cooper's approximation)."""
    return -23.45 * math.cos(2 * math.pi / 365 * (doy + 10))


def equation_of_time(doy: int) -> float:
    """Equation of time correction in minutes."""
    b = 2 * math.pi / 365 * (doy - 81)
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def standard_meridian(longitude: float) -> float:
    """Reference meridian of the 15°-wide time zone slot nearest to longitude.

    NOTE: approximation only. Political zone borders and daylight saving are
    ignored; no timezone database is consulted. Halves round towards +inf.
    """
    return math.floor(longitude / 15 + 0.5) * 15


def local_solar_time(hour_decimal: float, longitude: float, doy: int) -> float:
    """Convert civil decimal hours at longitude to local solar time."""
    correction = _MINUTES_PER_DEGREE * (standard_meridian(longitude) - longitude)
    return hour_decimal + equation_of_time(doy) / 60 + correction / 60


def solar_altitude(latitude: float, longitude: float, d: date, t: time) -> float:
    """Sun altitude above the horizon in degrees. Negative at night."""
    doy = day_of_year(d)
    hour_decimal = t.hour + t.minute / 60
    hour_angle = 15 * (local_solar_time(hour_decimal, longitude, doy) - 12)

    lat_rad = math.radians(latitude)
    dec_rad = math.radians(solar_declination(doy))
    ha_rad = math.radians(hour_angle)

    sin_alt = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(lat_rad) * math.cos(
        dec_rad
    ) * math.cos(ha_rad)
    sin_alt = max(-1.0, min(1.0, sin_alt))
    return math.degrees(math.asin(sin_alt))


def _to_exponential(value: float, digits: int = 2) -> str:
    """Scientific notation without exponent zero-padding ("3.52e+35", "5.89e-17")."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def shadow_from_altitude(height_feet: float, altitude_deg: float) -> ShadowResult:
    """Shadow cast by an object of height_feet under a sun at altitude_deg.

    Returns the zero result when altitude_deg <= MIN_SHADOW_ALTITUDE_DEG.
    """
    if altitude_deg <= MIN_SHADOW_ALTITUDE_DEG:
        return ShadowResult(
            shadow_exists=False,
            length_feet=0.0,
            planck_lengths="0",
            light_years="0",
            horse_units=0.0,
            sun_altitude_deg=altitude_deg,
        )

    length_feet = abs(height_feet / math.tan(math.radians(altitude_deg)))
    meters = length_feet * _METERS_PER_FOOT
    return ShadowResult(
        shadow_exists=True,
        length_feet=length_feet,
        planck_lengths=_to_exponential(meters / _PLANCK_LENGTH_M),
        light_years=_to_exponential(meters / _LIGHT_YEAR_M),
        horse_units=abs(length_feet / _HORSE_LENGTH_FT),
        sun_altitude_deg=altitude_deg,
    )


def compute_shadow(shadow_input: ShadowInput) -> ShadowResult:
    """Compute the shadow for a validated input.

    Pure and total: never raises for inputs inside the documented ranges.

    Args:
        shadow_input: Validated height, position, date and civil time.

    Returns:
        ShadowResult. Check ``shadow_exists`` before reading ``length_feet``.
    """
    altitude = solar_altitude(
        shadow_input.latitude,
        shadow_input.longitude,
        shadow_input.date,
        shadow_input.time,
    )
    feet = height_in_feet(shadow_input.height, shadow_input.height_unit)
    return shadow_from_altitude(feet, altitude)


def validate_query(query: QueryInput) -> ShadowInput:
    """Validate raw form input and convert it to a ShadowInput.

    Args:
        query: Raw form values.

    Returns:
        ShadowInput ready for compute_shadow.

    Raises:
        InputValidationError: When any field is out of range or malformed.
    """
    try:
        height = float(query.height)
        latitude = float(query.latitude)
        longitude = float(query.longitude)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"Numeric field expected: {e}") from e

    if not math.isfinite(height) or height <= 0:
        raise InputValidationError("Height must be positive")
    if query.height_unit not in HEIGHT_UNITS:
        raise InputValidationError(f"Unknown height unit: {query.height_unit}")
    if not -90 <= latitude <= 90:
        raise InputValidationError(f"Latitude out of range: {latitude}")
    if not -180 <= longitude <= 180:
        raise InputValidationError(f"Longitude out of range: {longitude}")
    if query.direction not in DIRECTIONS:
        raise InputValidationError(f"Unknown direction: {query.direction}")
    if query.footwear not in FOOTWEAR:
        raise InputValidationError(f"Unknown footwear: {query.footwear}")

    try:
        dt = datetime.strptime(query.when, "%Y-%m-%d %H:%M")
    except ValueError as e:
        raise InputValidationError(f"Invalid date/time: {query.when}") from e

    return ShadowInput(
        height=height,
        height_unit=query.height_unit,  # type: ignore[arg-type]
        latitude=latitude,
        longitude=longitude,
        direction=query.direction,  # type: ignore[arg-type]
        footwear=query.footwear,  # type: ignore[arg-type]
        date=dt.date(),
        time=dt.time(),
    )


def run(query: QueryInput) -> ShadowReading:
    """Top-level entry point: takes a QueryInput and returns a ShadowReading.

    Args:
        query: Raw form input.

    Returns:
        Fully computed ShadowReading.

    Raises:
        InputValidationError: When the form input is invalid.
    """
    shadow_input = validate_query(query)
    result = compute_shadow(shadow_input)
    interpretation = select_interpretation(
        result.length_feet, shadow_input.direction, shadow_input.footwear
    )
    log.debug(
        "shadow_computed",
        shadow_exists=result.shadow_exists,
        length_feet=round(result.length_feet, 3),
        sun_altitude_deg=round(result.sun_altitude_deg, 2),
        title=interpretation.title,
    )
    return ShadowReading(
        input=shadow_input, result=result, interpretation=interpretation
    )
