"""Weather data structures shared by the CLI and the web front end."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class DescriptionStyle(Enum):
    """Display category for an OpenWeatherMap description phrase."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    LOW_VISIBILITY = "low_visibility"
    PRECIPITATION = "precipitation"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class WeatherQuery:
    """City and country code as typed by the user (already trimmed)."""

    city: str
    country_code: str

    @property
    def q(self) -> str:
        """Value of the API's ``q`` parameter, e.g. ``"Pune,IN"``."""
        return f"{self.city},{self.country_code}"


@dataclass(frozen=True)
class WeatherRecord:
    """Current conditions for one location, in metric units."""

    description: str
    temperature_c: float
    humidity_pct: float
    pressure_hpa: float
    wind_speed_mps: float
    location: str

    @classmethod
    def from_api_payload(cls, payload: Dict[str, Any]) -> "WeatherRecord":
        """
        Build a record from an OpenWeatherMap ``/weather`` response body.

        Raises KeyError, TypeError or ValueError when a required field is
        missing or malformed, including an empty ``weather`` list.
        """
        conditions = payload["weather"]
        if not conditions:
            raise ValueError("API returned no weather description.")

        main = payload["main"]
        return cls(
            description=_text(conditions[0]["description"], "description"),
            temperature_c=_number(main["temp"], "temp"),
            humidity_pct=_number(main["humidity"], "humidity"),
            pressure_hpa=_number(main["pressure"], "pressure"),
            wind_speed_mps=_number(payload["wind"]["speed"], "speed"),
            location=_text(payload["name"], "name"),
        )


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field!r} must be a string, got {value!r}")
    return value


def _number(value: Any, field: str) -> float:
    # bool is an int subclass, but JSON true/false is not a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field!r} must be a number, got {value!r}")
    return float(value)
