"""Plain-text reports returned by the MCP tools."""

from weather_mcp.models import CurrentConditions, ForecastSeries

HOURS_PER_ENTRY = 3


def format_current(data: CurrentConditions) -> str:
    return (
        f"Weather for {data.name}:\n"
        f"  Condition: {data.condition} ({data.description})\n"
        f"  Temperature: {data.main.temp:.0f}°F (feels like {data.main.feels_like:.0f}°F)\n"
        f"  High: {data.main.temp_max:.0f}°F / Low: {data.main.temp_min:.0f}°F\n"
        f"  Humidity: {data.main.humidity}%\n"
        f"  Wind: {data.wind.speed:.1f} mph (gusts: {data.wind.gust:.1f} mph)\n"
        f"  Cloud cover: {data.clouds.all}%"
    )


def entry_count(hours: int, available: int) -> int:
    """
    How many 3-hour entries cover *hours*: at least one, never more than
    the upstream actually returned.
    """
    return min(max(hours // HOURS_PER_ENTRY, 1), available)


def format_forecast(data: ForecastSeries, hours: int) -> str:
    lines = [f"Forecast for {data.city.name} (next {hours} hours):\n"]
    for entry in data.entries[: entry_count(hours, len(data.entries))]:
        lines.append(
            f"  {entry.dt_txt}: {entry.main.temp:.0f}°F, {entry.description}, "
            f"wind {entry.wind.speed:.1f} mph, rain chance {entry.pop * 100:.0f}%\n"
        )
    return "".join(lines)
