"""Turn a WeatherRecord into the coloured text block shown to the user."""

from ..config import Colours
from ..models import DescriptionStyle, WeatherRecord

# Closed lookup: anything not listed here is UNCLASSIFIED.
DESCRIPTION_STYLES = {
    "clear sky": DescriptionStyle.CLEAR,
    "few clouds": DescriptionStyle.CLOUDS,
    "scattered clouds": DescriptionStyle.CLOUDS,
    "broken clouds": DescriptionStyle.CLOUDS,
    "overcast clouds": DescriptionStyle.LOW_VISIBILITY,
    "mist": DescriptionStyle.LOW_VISIBILITY,
    "haze": DescriptionStyle.LOW_VISIBILITY,
    "smoke": DescriptionStyle.LOW_VISIBILITY,
    "sand": DescriptionStyle.LOW_VISIBILITY,
    "dust": DescriptionStyle.LOW_VISIBILITY,
    "fog": DescriptionStyle.LOW_VISIBILITY,
    "squalls": DescriptionStyle.LOW_VISIBILITY,
    "shower rain": DescriptionStyle.PRECIPITATION,
    "rain": DescriptionStyle.PRECIPITATION,
    "thunderstorm": DescriptionStyle.PRECIPITATION,
    "snow": DescriptionStyle.PRECIPITATION,
}

STYLE_COLOURS = {
    DescriptionStyle.CLEAR: Colours.BRIGHT_YELLOW,
    DescriptionStyle.CLOUDS: Colours.BRIGHT_BLUE,
    DescriptionStyle.LOW_VISIBILITY: Colours.DIM,
    DescriptionStyle.PRECIPITATION: Colours.BRIGHT_CYAN,
}

# Same palette for the HTML result page
STYLE_CSS = {
    DescriptionStyle.CLEAR: "color: gold",
    DescriptionStyle.CLOUDS: "color: royalblue",
    DescriptionStyle.LOW_VISIBILITY: "opacity: 0.6",
    DescriptionStyle.PRECIPITATION: "color: darkturquoise",
    DescriptionStyle.UNCLASSIFIED: "",
}

WEATHER_TEMPLATE = (
    "Weather in {location}: {description} {emoji}\n"
    "        > Temperature: {temperature:.1f}C,\n"
    "        > Humidity: {humidity:.1f}%,\n"
    "        > Pressure: {pressure:.1f} hPa,\n"
    "        > Wind Speed: {wind_speed:.1f} m/s"
)


def colourize(text: str, colour: str) -> str:
    """Wrap text in an ANSI colour and reset afterwards."""
    return f"{colour}{text}{Colours.RESET}"


def temp_emoji(temperature_c: float) -> str:
    """Pick a glyph for a Celsius temperature (buckets are half-open)."""
    if temperature_c < 0.0:
        return "❄️"
    elif temperature_c < 10.0:
        return "🥶"
    elif temperature_c < 20.0:
        return "🌥️"
    elif temperature_c < 30.0:
        return "☀️"
    return "🔥"


def description_style(description: str) -> DescriptionStyle:
    """Exact, case-sensitive match against the known OpenWeatherMap phrases."""
    return DESCRIPTION_STYLES.get(description, DescriptionStyle.UNCLASSIFIED)


def format_weather(record: WeatherRecord) -> str:
    return WEATHER_TEMPLATE.format(
        location=record.location,
        description=record.description,
        emoji=temp_emoji(record.temperature_c),
        temperature=record.temperature_c,
        humidity=record.humidity_pct,
        pressure=record.pressure_hpa,
        wind_speed=record.wind_speed_mps,
    )


def render_weather(record: WeatherRecord) -> str:
    """Formatted block, coloured by the description's style."""
    text = format_weather(record)
    colour = STYLE_COLOURS.get(description_style(record.description))
    if colour is None:
        return text
    return colourize(text, colour)
