"""Typed tool arguments, validated once when a call enters the server."""

from dataclasses import dataclass
from typing import Any

from weather_mcp.errors import ValidationError

DEFAULT_HOURS = 24
MAX_HOURS = 120


def _require_city(city: Any) -> str:
    if not isinstance(city, str) or not city.strip():
        raise ValidationError("city is required")
    return city.strip()


def normalize_hours(hours: Any) -> int:
    """
    Anything that is not a positive number means 24; anything above 120 is
    clamped silently.
    """
    if isinstance(hours, bool) or not isinstance(hours, (int, float)) or not hours > 0:
        return DEFAULT_HOURS
    return int(min(hours, MAX_HOURS))


@dataclass(frozen=True)
class WeatherRequest:
    city: str

    @classmethod
    def from_arguments(cls, city: Any) -> "WeatherRequest":
        return cls(city=_require_city(city))


@dataclass(frozen=True)
class ForecastRequest:
    city: str
    hours: int = DEFAULT_HOURS

    @classmethod
    def from_arguments(cls, city: Any, hours: Any = None) -> "ForecastRequest":
        return cls(city=_require_city(city), hours=normalize_hours(hours))
