import logging
from typing import Any, Optional

import requests

from weather_mcp.config import WeatherConfig
from weather_mcp.errors import ConfigError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

UNITS = "imperial"


def fetch(endpoint: str, city: str, config: WeatherConfig, session: Optional[Any] = None) -> str:
    """
    GET ``{base_url}/{endpoint}`` for *city* and return the raw body text.

    *session* is anything with a ``requests``-style ``get``; the module-level
    ``requests.get`` is used when it is omitted.
    """
    if not config.api_key:
        raise ConfigError("WEATHER_API_KEY not set")

    http = session if session is not None else requests
    url = f"{config.base_url}/{endpoint}"
    params = {"q": city, "appid": config.api_key, "units": UNITS}

    logger.debug("GET %s q=%r", url, city)
    try:
        response = http.get(url, params=params, timeout=config.timeout)
    except requests.exceptions.RequestException as exc:
        raise TransportError(f"failed to fetch {endpoint}: {exc}") from exc

    if response.status_code != 200:
        logger.warning("%s returned %s for %r", endpoint, response.status_code, city)
        raise UpstreamError(response.status_code, response.text)

    return response.text
