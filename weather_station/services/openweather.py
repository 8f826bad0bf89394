import logging

import requests

from ..config import OPENWEATHER_API_KEY, OPENWEATHER_URL
from ..errors import FetchError
from ..models import WeatherQuery, WeatherRecord

logger = logging.getLogger(__name__)


class OpenWeatherService:
    """Wraps the OpenWeatherMap current-weather API."""

    def __init__(self, api_key: str = OPENWEATHER_API_KEY, base_url: str = OPENWEATHER_URL):
        self.api_key = api_key
        self.base_url = base_url

    def _redact(self, text: str) -> str:
        # requests puts the full URL (appid included) in its error messages
        if self.api_key:
            return text.replace(self.api_key, "***")
        return text

    # ------------------------------------------------------------------
    # 1️⃣ Fetch the raw JSON payload
    # ------------------------------------------------------------------
    def _fetch_payload(self, query: WeatherQuery) -> dict:
        params = {"q": query.q, "units": "metric", "appid": self.api_key}
        logger.debug("Requesting current weather for %s", query.q)
        try:
            resp = requests.get(self.base_url, params=params)
        except requests.RequestException as exc:
            cause = self._redact(str(exc))
            logger.warning("Request for %s failed: %s", query.q, cause)
            raise FetchError(f"request failed: {cause}") from exc

        if not resp.ok:
            logger.warning("HTTP %s for %s", resp.status_code, query.q)
            raise FetchError(self._http_error_message(resp))

        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(f"response was not valid JSON: {exc}") from exc

    @staticmethod
    def _http_error_message(resp: requests.Response) -> str:
        """Prefer the API's own ``message`` (e.g. "city not found")."""
        try:
            message = resp.json().get("message")
        except (ValueError, AttributeError):
            message = None
        return f"{resp.status_code} {message or resp.reason}"

    # ------------------------------------------------------------------
    # 2️⃣ Turn it into a WeatherRecord
    # ------------------------------------------------------------------
    def get_current_weather(self, city: str, country_code: str) -> WeatherRecord:
        """
        Return the current conditions for ``city`` in ``country_code``.

        One GET per call, no retries. Every failure (transport, HTTP status,
        unexpected payload) is raised as FetchError.
        """
        query = WeatherQuery(city=city, country_code=country_code)
        payload = self._fetch_payload(query)
        try:
            return WeatherRecord.from_api_payload(payload)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Unexpected payload for %s: %r", query.q, exc)
            raise FetchError(f"unexpected response structure: {exc!r}") from exc
