"""Typed views of the OpenWeatherMap ``/weather`` and ``/forecast`` payloads.

Only the fields the reports use are modelled; anything else in the body is
ignored. Missing fields fall back to zero values so a sparse but well-formed
response still decodes.
"""

from typing import List

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from weather_mcp.errors import DecodeError

DEFAULT_CONDITION = "Clear"
DEFAULT_DESCRIPTION = "clear sky"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class Condition(_Snapshot):
    main: str = ""
    description: str = ""


class Readings(_Snapshot):
    temp: float = 0.0
    feels_like: float = 0.0
    humidity: int = 0
    temp_min: float = 0.0
    temp_max: float = 0.0


class Wind(_Snapshot):
    speed: float = 0.0
    gust: float = 0.0


class Clouds(_Snapshot):
    all: int = 0


class CurrentConditions(_Snapshot):
    name: str = ""
    main: Readings = Field(default_factory=Readings)
    weather: List[Condition] = Field(default_factory=list)
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)

    @property
    def condition(self) -> str:
        return self.weather[0].main if self.weather else DEFAULT_CONDITION

    @property
    def description(self) -> str:
        return self.weather[0].description if self.weather else DEFAULT_DESCRIPTION


class ForecastEntry(_Snapshot):
    dt_txt: str = ""
    main: Readings = Field(default_factory=Readings)
    weather: List[Condition] = Field(default_factory=list)
    wind: Wind = Field(default_factory=Wind)
    pop: float = 0.0

    @property
    def description(self) -> str:
        # forecast lines only show the description, so the fallback is the label
        return self.weather[0].description if self.weather else DEFAULT_CONDITION


class City(_Snapshot):
    name: str = ""


class ForecastSeries(_Snapshot):
    entries: List[ForecastEntry] = Field(default_factory=list, alias="list")
    city: City = Field(default_factory=City)


def decode_current(body: str) -> CurrentConditions:
    try:
        return CurrentConditions.model_validate_json(body)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"failed to parse weather: {_summarize(exc)}") from exc


def decode_forecast(body: str) -> ForecastSeries:
    try:
        return ForecastSeries.model_validate_json(body)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"failed to parse forecast: {_summarize(exc)}") from exc


def _summarize(exc: pydantic.ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', 'invalid value')}"
