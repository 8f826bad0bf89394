"""
utils package – small, pure-function helpers.

We expose the display helpers used by both the CLI and the web front end.
"""

from .display import (  # noqa: F401
    colourize,
    description_style,
    format_weather,
    render_weather,
    temp_emoji,
)

__all__ = [
    "colourize",
    "description_style",
    "format_weather",
    "render_weather",
    "temp_emoji",
]
