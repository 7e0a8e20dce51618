"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from datetime import date, time
from typing import Literal

HeightUnit = Literal["ft", "cm", "m"]
Direction = Literal[
    "North",
    "Northeast",
    "East",
    "Southeast",
    "South",
    "Southwest",
    "West",
    "Northwest",
]
Footwear = Literal[
    "Nike", "Adidas", "Converse", "Vans", "Puma", "Reebok", "New Balance", "Other"
]

HEIGHT_UNITS: tuple[str, ...] = ("ft", "cm", "m")
DIRECTIONS: tuple[str, ...] = (
    "North",
    "Northeast",
    "East",
    "Southeast",
    "South",
    "Southwest",
    "West",
    "Northwest",
)
FOOTWEAR: tuple[str, ...] = (
    "Nike",
    "Adidas",
    "Converse",
    "Vans",
    "Puma",
    "Reebok",
    "New Balance",
    "Other",
)


@dataclass(frozen=True)
class QueryInput:
    """Raw form input. Not yet validated."""

    height: float
    height_unit: str  # "ft" | "cm" | "m"
    latitude: float
    longitude: float
    direction: str  # Compass point, narrative only
    footwear: str  # Shoe brand label, narrative only
    when: str  # "YYYY-MM-DD HH:MM" local wall-clock time


@dataclass(frozen=True)
class ShadowInput:
    """Validated input to the solar geometry engine."""

    height: float
    height_unit: HeightUnit
    latitude: float  # Decimal degrees, [-90, 90]
    longitude: float  # Decimal degrees, [-180, 180]
    direction: Direction
    footwear: Footwear
    date: date
    time: time  # Civil time at the given longitude


@dataclass(frozen=True)
class ShadowResult:
    """Shadow length and its whimsical unit conversions.

    Every field is populated even when no shadow exists.
    """

    shadow_exists: bool  # False iff sun altitude <= 5°
    length_feet: float
    planck_lengths: str  # Scientific notation, "0" when no shadow
    light_years: str  # Scientific notation, "0" when no shadow
    horse_units: float
    sun_altitude_deg: float  # Negative when the sun is below the horizon


@dataclass(frozen=True)
class Trait:
    """A single soul-silhouette trait card."""

    name: str
    description: str
    icon: str  # Symbolic icon key resolved by the display layer


@dataclass(frozen=True)
class Interpretation:
    """Narrative band selected from the shadow length."""

    title: str
    description: str
    traits: tuple[Trait, Trait, Trait]


@dataclass(frozen=True)
class WeatherData:
    """Current conditions for the weather card. Display only."""

    description: str
    temperature: float  # Celsius
    cloud_cover: float  # Percent
    visibility: str  # e.g. "10km"


@dataclass(frozen=True)
class GeocodeResult:
    """A single city match returned by the geocoder."""

    name: str
    country: str
    state: str | None
    lat: float
    lon: float

    @property
    def label(self) -> str:
        parts = [self.name, self.state, self.country]
        return ", ".join(p for p in parts if p)


@dataclass(frozen=True)
class ShadowReading:
    """The sole input to renderers. Fully computed state."""

    input: ShadowInput
    result: ShadowResult
    interpretation: Interpretation
