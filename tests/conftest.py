"""Pytest configuration and fixtures for weather_station tests."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from weather_station.models import WeatherRecord


@pytest.fixture
def pune_payload() -> dict[str, Any]:
    """A well-formed /weather response body."""
    return {
        "coord": {"lon": 73.86, "lat": 18.52},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 25.0, "humidity": 40.0, "pressure": 1012.3, "feels_like": 24.6},
        "wind": {"speed": 3.2, "deg": 270},
        "name": "Pune",
        "cod": 200,
    }


@pytest.fixture
def pune_record() -> WeatherRecord:
    return WeatherRecord(
        description="clear sky",
        temperature_c=25.0,
        humidity_pct=40.0,
        pressure_hpa=1012.3,
        wind_speed_mps=3.2,
        location="Pune",
    )


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
    reason: str = "OK",
) -> MagicMock:
    """Create a configured stand-in for requests.Response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised by json() instead
        reason: HTTP reason phrase

    Returns:
        Configured MagicMock response
    """
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def scripted_input(*lines: str) -> Callable[[], str]:
    """Return a read_line callable that replays lines, then hits EOF."""
    remaining = list(lines)

    def read_line() -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line
