"""MCP server exposing OpenWeatherMap current conditions and forecasts."""

from weather_mcp.config import WeatherConfig
from weather_mcp.errors import (
    ConfigError,
    DecodeError,
    TransportError,
    UpstreamError,
    ValidationError,
    WeatherError,
)
from weather_mcp.weather import fetch_forecast, fetch_weather

__all__ = [
    "WeatherConfig",
    "WeatherError",
    "ConfigError",
    "TransportError",
    "UpstreamError",
    "DecodeError",
    "ValidationError",
    "fetch_weather",
    "fetch_forecast",
]
