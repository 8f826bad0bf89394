import logging
import sys
from typing import Callable

from .config import LOG_LEVEL, OPENWEATHER_API_KEY, Colours
from .errors import FetchError, InputReadError
from .services.openweather import OpenWeatherService
from .utils.display import colourize, render_weather

logger = logging.getLogger(__name__)

RULE = "=" * 55
THIN_RULE = "-" * 55


def read_input(read_line: Callable[[], str] = input) -> str:
    """Read one line and strip it; a failed read ends the session."""
    try:
        return read_line().strip()
    except (EOFError, OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Failed to read input: {exc!r}") from exc


def prompt(message: str, read_line: Callable[[], str] = input) -> str:
    print(colourize(message, Colours.BRIGHT_GREEN))
    return read_input(read_line)


def run(service: OpenWeatherService, read_line: Callable[[], str] = input) -> None:
    """Query/display loop; returns once the user declines another city."""
    print(RULE)
    print(colourize("Welcome to Weather Station", Colours.BRIGHT_YELLOW))
    print(RULE)

    keep_going = True
    while keep_going:
        # ------------------------------------------------------------------
        # 1️⃣ City and country code
        # ------------------------------------------------------------------
        city = prompt("Please enter the name of the city: ", read_line)
        country_code = prompt(
            "Please enter the country code (e.g., IN for india):", read_line
        )

        # ------------------------------------------------------------------
        # 2️⃣ Fetch and show (a failed fetch only ends this round)
        # ------------------------------------------------------------------
        try:
            record = service.get_current_weather(city, country_code)
        except FetchError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        else:
            print(render_weather(record))
        print(RULE)

        # ------------------------------------------------------------------
        # 3️⃣ Another city?
        # ------------------------------------------------------------------
        answer = prompt(
            "Do you want to search for weather in another city? (yes/no):", read_line
        )
        keep_going = answer.lower() == "yes"

    print(THIN_RULE)
    print("Thank you for using my software")
    print(THIN_RULE)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    # urllib3 logs request URLs at DEBUG, and ours carry appid
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    if not OPENWEATHER_API_KEY:
        logger.warning("OPENWEATHER_API_KEY is not set; requests will be rejected.")

    service = OpenWeatherService(api_key=OPENWEATHER_API_KEY)
    try:
        run(service)
    except InputReadError as exc:
        sys.exit(str(exc))


if __name__ == "__main__":
    main()
