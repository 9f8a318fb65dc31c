import logging
import sys
from typing import Annotated, Any, Callable, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import WithJsonSchema

from weather_mcp.config import WeatherConfig, setup_logging
from weather_mcp.errors import ValidationError, WeatherError
from weather_mcp.params import ForecastRequest, WeatherRequest
from weather_mcp.weather import fetch_forecast, fetch_weather

load_dotenv()

logger = logging.getLogger(__name__)

SERVER_NAME = "Weather MCP"

# Arguments are typed Any so every call reaches the handler, where
# params.py turns missing or malformed values into readable errors.
# The advertised schemas still describe the expected JSON types.
CityArg = Annotated[
    Any,
    WithJsonSchema(
        {"type": "string", "description": "City name (e.g., 'Austin, TX', 'London', 'Tokyo')"}
    ),
]
HoursArg = Annotated[
    Any,
    WithJsonSchema({"type": "number", "description": "Hours to forecast (default 24, max 120)"}),
]


def _mark_required(mcp: FastMCP, tool_name: str, *arguments: str) -> None:
    """Advertise *arguments* as required even though the handler defaults them."""
    tool = mcp._tool_manager.get_tool(tool_name)
    required = tool.parameters.setdefault("required", [])
    for argument in arguments:
        if argument not in required:
            required.append(argument)


def build_server(
    config_loader: Callable[[], WeatherConfig] = WeatherConfig.from_env,
    session: Optional[Any] = None,
) -> FastMCP:
    """
    Create the FastMCP server with both weather tools registered.

    Configuration is loaded on every call, so a missing API key is reported
    to the caller instead of stopping the server at start-up.
    """
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="get_weather", description="Get current weather conditions for a city")
    def get_weather(city: CityArg = None) -> str:
        try:
            request = WeatherRequest.from_arguments(city)
        except ValidationError as exc:
            raise ToolError(str(exc)) from exc

        logger.info("get_weather city=%r", request.city)
        try:
            return fetch_weather(request.city, config_loader(), session=session)
        except WeatherError as exc:
            logger.warning("get_weather failed: %s", exc)
            raise ToolError(f"Failed to get weather: {exc}") from exc

    @mcp.tool(name="get_forecast", description="Get weather forecast for upcoming hours")
    def get_forecast(city: CityArg = None, hours: HoursArg = None) -> str:
        try:
            request = ForecastRequest.from_arguments(city, hours)
        except ValidationError as exc:
            raise ToolError(str(exc)) from exc

        logger.info("get_forecast city=%r hours=%d", request.city, request.hours)
        try:
            return fetch_forecast(request.city, request.hours, config_loader(), session=session)
        except WeatherError as exc:
            logger.warning("get_forecast failed: %s", exc)
            raise ToolError(f"Failed to get forecast: {exc}") from exc

    _mark_required(mcp, "get_weather", "city")
    _mark_required(mcp, "get_forecast", "city")
    return mcp


mcp = build_server()


def main() -> None:
    setup_logging()
    logger.info("Weather MCP server starting on stdio...")
    try:
        mcp.run(transport="stdio")
    except Exception:
        logger.critical("Server error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
