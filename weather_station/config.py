"""
Runtime configuration for the weather station.

Values come from the process environment, after a local ``.env`` file (if
any) has been loaded on top of it.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# OpenWeatherMap credentials and endpoint
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
OPENWEATHER_URL = os.getenv(
    "OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather"
)

LOG_LEVEL = os.getenv("WEATHER_LOG_LEVEL", "WARNING").upper()

# Only used by the Flask front end (app.py)
FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY") or os.urandom(24)


class Colours:
    """ANSI escape sequences used for terminal output."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_CYAN = "\033[96m"
    DIM = "\033[2m"
    RESET = "\033[0m"
