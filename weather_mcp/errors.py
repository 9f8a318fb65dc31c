"""Failures raised by the fetch -> decode -> format pipeline.

Every error here is recoverable: the MCP tool handlers catch ``WeatherError``
and hand the message back to the caller as an error result.
"""


class WeatherError(Exception):
    """Base class for anything a tool call can fail with."""


class ConfigError(WeatherError):
    """The upstream credential is not configured."""


class TransportError(WeatherError):
    """The HTTP request could not complete."""


class UpstreamError(WeatherError):
    """The upstream API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error ({status_code}): {body}")


class DecodeError(WeatherError):
    """The response body is not JSON of the expected shape."""


class ValidationError(WeatherError):
    """A tool argument is missing or invalid."""
