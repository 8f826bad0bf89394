"""Error types raised by the weather station."""


class WeatherStationError(Exception):
    """Base error for the weather station."""


class FetchError(WeatherStationError):
    """Weather lookup failed: network, HTTP status, or unexpected payload."""


class InputReadError(WeatherStationError):
    """A prompt could not be read (end of input or I/O failure)."""
