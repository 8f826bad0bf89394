"""
weather_station package – a tiny CLI tool that prints the current weather
for a city, coloured by conditions.

Public entry points
-------------------
* `weather_station.main` – the command-line driver (`python -m weather_station`)
* `OpenWeatherService` – the OpenWeatherMap client
* `WeatherRecord` / `WeatherQuery` – the data it works with
* Display helpers: `render_weather`, `temp_emoji`, `description_style`
* Colour constants via `weather_station.ColouredText`

    >>> from weather_station import OpenWeatherService, render_weather
"""

__all__ = [
    "VERSION",
    "ColouredText",
    "OpenWeatherService",
    "WeatherQuery",
    "WeatherRecord",
    "DescriptionStyle",
    "FetchError",
    "InputReadError",
    "render_weather",
    "temp_emoji",
    "description_style",
]

VERSION = "0.1.0"

from .config import Colours as ColouredText  # noqa: F401
from .errors import FetchError, InputReadError  # noqa: F401
from .models import DescriptionStyle, WeatherQuery, WeatherRecord  # noqa: F401
from .services import OpenWeatherService  # noqa: F401
from .utils import description_style, render_weather, temp_emoji  # noqa: F401
