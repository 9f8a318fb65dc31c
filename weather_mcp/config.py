import logging
import os
import sys
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 10.0

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherConfig:
    """
    Settings for talking to OpenWeatherMap.

    Passed explicitly into the fetch routines so they never read the
    environment themselves; tests build one by hand.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "WeatherConfig":
        return cls(
            api_key=os.getenv("WEATHER_API_KEY", "").strip(),
            base_url=os.getenv("WEATHER_API_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")
            or DEFAULT_BASE_URL,
            timeout=_read_timeout(os.getenv("WEATHER_HTTP_TIMEOUT", "")),
        )


def _read_timeout(raw: str) -> float:
    if not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring WEATHER_HTTP_TIMEOUT=%r, using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring WEATHER_HTTP_TIMEOUT=%r, using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def setup_logging(log_level: str = "") -> None:
    """Send all logging to stderr; stdout belongs to the MCP stdio transport."""
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO

    # force=True replaces the handler FastMCP installs on import
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
