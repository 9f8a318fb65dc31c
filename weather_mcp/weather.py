from typing import Any, Optional

from weather_mcp.client import fetch
from weather_mcp.config import WeatherConfig
from weather_mcp.models import decode_current, decode_forecast
from weather_mcp.report import format_current, format_forecast


def fetch_weather(city: str, config: WeatherConfig, session: Optional[Any] = None) -> str:
    """Current conditions for *city* as a seven-line report."""
    body = fetch("weather", city, config, session=session)
    return format_current(decode_current(body))


def fetch_forecast(city: str, hours: int, config: WeatherConfig, session: Optional[Any] = None) -> str:
    """
    One line per 3-hour forecast entry covering *hours*.

    *hours* is expected to be normalized already (see ``params.normalize_hours``);
    the header echoes it as given.
    """
    body = fetch("forecast", city, config, session=session)
    return format_forecast(decode_forecast(body), hours)
