"""OpenWeather client — current conditions for the weather card and city geocoding."""

import math
import os

import httpx
import structlog

from shadowsoul.models import GeocodeResult, WeatherData

log = structlog.get_logger(__name__)

_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
_GEOCODE_URL = "https://api.openweathermap.org/geo/1.0/direct"
_TIMEOUT = 10

DEFAULT_WEATHER = WeatherData(
    description="Clear", temperature=20.0, cloud_cover=0.0, visibility="10km"
)


class GeocodingError(Exception):
    """Geocoder call failure."""


def _api_key() -> str:
    return (
        os.environ.get("OPENWEATHER_API_KEY")
        or os.environ.get("WEATHER_API_KEY")
        or "demo_key"
    )


def _parse_weather(data: dict) -> WeatherData:
    weather = data.get("weather") or [{}]
    visibility_m = data.get("visibility")
    return WeatherData(
        description=weather[0].get("description") or DEFAULT_WEATHER.description,
        temperature=float(
            (data.get("main") or {}).get("temp") or DEFAULT_WEATHER.temperature
        ),
        cloud_cover=float((data.get("clouds") or {}).get("all") or 0),
        visibility=(
            f"{math.floor(visibility_m / 1000 + 0.5)}km"
            if visibility_m
            else DEFAULT_WEATHER.visibility
        ),
    )


def fetch_weather(lat: float, lon: float) -> WeatherData:
    """Fetch current conditions at a position.

    Weather is display-only, so failures are logged and DEFAULT_WEATHER is
    returned instead of raising.

    Args:
        lat: Latitude (decimal degrees).
        lon: Longitude (decimal degrees).

    Returns:
        WeatherData for the weather card.
    """
    params = {"lat": lat, "lon": lon, "appid": _api_key(), "units": "metric"}
    try:
        resp = httpx.get(_WEATHER_URL, params=params, timeout=_TIMEOUT)
        resp.raise_for_status()
        return _parse_weather(resp.json())
    except (httpx.HTTPError, ValueError, TypeError, AttributeError, IndexError) as e:
        log.warning("weather_fetch_failed", lat=lat, lon=lon, error=str(e))
        return DEFAULT_WEATHER


def geocode_city(city: str) -> tuple[GeocodeResult, ...]:
    """Resolve a free-text city name to up to five candidate positions.

    Args:
        city: City name in any language.

    Returns:
        Tuple of GeocodeResult, possibly empty when nothing matched.

    Raises:
        GeocodingError: On empty input, HTTP error, or malformed response.
    """
    if not city or not city.strip():
        raise GeocodingError("City name is required")

    params = {"q": city.strip(), "limit": 5, "appid": _api_key()}
    try:
        resp = httpx.get(_GEOCODE_URL, params=params, timeout=_TIMEOUT)
        resp.raise_for_status()
        results = tuple(
            GeocodeResult(
                name=r["name"],
                country=r.get("country", ""),
                state=r.get("state"),
                lat=float(r["lat"]),
                lon=float(r["lon"]),
            )
            for r in resp.json()
        )
    except httpx.HTTPError as e:
        log.error("geocode_failed", city=city, error=str(e))
        raise GeocodingError(f"Failed to geocode city: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        log.error("geocode_bad_response", city=city, error=str(e))
        raise GeocodingError(f"Unexpected geocoder response: {e}") from e

    log.info("geocode_ok", city=city, matches=len(results))
    return results


def weather_icon(description: str) -> str:
    """Icon key for a weather description: "cloud" or "sun"."""
    return "cloud" if "cloud" in description.lower() else "sun"
