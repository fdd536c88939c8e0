"""Current-weather output: an SVG picture built from a template, plus a JSON file."""

from __future__ import annotations

import datetime
import gettext
import json
import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from vetero import weather as _weather
from vetero.utils import ApplicationError, compress_file, dash_decimal_value, str_printf_l

WIND_DIRECTIONS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

DEFAULT_TEMPLATES = (
    "share/current_weather.svg",
    os.path.join(sys.prefix, "share", "current_weather.svg"),
)

SVG_FILENAME = "current_weather.svgz"
JSON_FILENAME = "current_weather.json"


@dataclass(frozen=True)
class CurrentWeather:
    """The most recent weather values; ``None`` marks a value that is not known."""

    timestamp: datetime.datetime
    temperature: float
    humidity: float | None = None
    wind_speed: float | None = None
    wind_gust: float | None = None
    wind_direction: int | None = None
    rain: float | None = None
    pressure: float | None = None
    solar_radiation: float | None = None
    uv_index: int = 0

    @property
    def dewpoint(self) -> float | None:
        """Dew point in °C, or ``None`` without a usable humidity."""
        if self.humidity is None or self.humidity <= 0:
            return None
        return _weather.dewpoint(self.temperature, self.humidity)

    @property
    def wind_beaufort(self) -> int | None:
        """Wind force in Beaufort, or ``None`` without a wind speed."""
        if self.wind_speed is None:
            return None
        return _weather.wind_speed_to_bft(self.wind_speed)

    @property
    def wind_gust_beaufort(self) -> int | None:
        """Gust force in Beaufort, or ``None`` without a gust value."""
        if self.wind_gust is None:
            return None
        return _weather.wind_speed_to_bft(self.wind_gust)

    @property
    def wind_direction_str(self) -> str | None:
        """Compass point (one of 16) of the wind direction."""
        if self.wind_direction is None:
            return None
        index = int((self.wind_direction % 360) / 22.5 + 0.5) % len(WIND_DIRECTIONS)
        return WIND_DIRECTIONS[index]


def translate_wind(direction: str) -> str:
    """Translate an English compass point such as ``"NNE"``."""
    return gettext.gettext(direction)


def _replace_first(line: str, placeholder: str, value_factory) -> str:
    pos = line.find(placeholder)
    if pos < 0:
        return line
    return line[:pos] + value_factory() + line[pos + len(placeholder):]


def fill_template_line(line: str, weather: CurrentWeather, locale_name: str) -> str:
    """Replace the first occurrence of each placeholder in ``line`` with its value."""
    loc = locale_name

    def number(fmt: str, value) -> str:
        return str_printf_l(fmt, loc, value)

    def dashes(before: int, after: int = 0) -> str:
        return dash_decimal_value(loc, before, after)

    has_humidity = weather.humidity is not None
    has_wind = weather.wind_speed is not None
    has_gust = weather.wind_gust is not None
    has_direction = weather.wind_direction is not None
    has_solar = weather.solar_radiation is not None

    replacements = (
        ("TT.T", lambda: number("%.1f", weather.temperature)),
        ("DD.D", lambda: number("%.1f", weather.dewpoint)
            if has_humidity and weather.dewpoint is not None else dashes(2, 1)),
        ("UUUU-UU-UU UU:UU", lambda: weather.timestamp.strftime(
            gettext.gettext("%Y-%m-%d %H:%M"))),
        ("HH", lambda: number("%.0f", weather.humidity) if has_humidity else dashes(2)),
        ("WW.W", lambda: number("%.1f", weather.wind_speed) if has_wind else dashes(2, 1)),
        ("WB", lambda: number("%d", weather.wind_beaufort) if has_wind else dashes(2)),
        ("GG.G", lambda: number("%.1f", weather.wind_gust) if has_gust else dashes(2, 1)),
        ("WG", lambda: number("%d", weather.wind_gust_beaufort) if has_gust else dashes(2)),
        ("WDD", lambda: str((180 + weather.wind_direction) % 360) if has_direction else "0"),
        ("WD", lambda: translate_wind(weather.wind_direction_str) if has_direction else "---"),
        ("RR.R", lambda: number("%.1f", weather.rain)
            if weather.rain is not None else dashes(2, 1)),
        ("PPPP", lambda: number("%4.0f", weather.pressure)
            if weather.pressure is not None else dashes(4)),
        ("SSSS", lambda: number("%4.1f", weather.solar_radiation) if has_solar else "----"),
        ("UUU", lambda: str(weather.uv_index) if has_solar else "---"),
    )

    for placeholder, factory in replacements:
        line = _replace_first(line, placeholder, factory)
    return line


def render_svg(template_lines: Iterable[str], weather: CurrentWeather, locale_name: str) -> str:
    """Fill every template line; line breaks of the template are dropped."""
    return "".join(
        fill_template_line(line.rstrip("\r\n"), weather, locale_name)
        for line in template_lines
    )


def weather_json(weather: CurrentWeather) -> str:
    """Return the current weather as an indented JSON document."""
    data: dict[str, object] = {
        "last_update": weather.timestamp.strftime("%Y-%m-%d %H:%M"),
        "temperature": float(weather.temperature),
        "dewpoint": weather.dewpoint,
        "humidity": None if weather.humidity is None else float(weather.humidity),
    }
    if weather.wind_speed is not None:
        data["wind_speed"] = float(weather.wind_speed)
    if weather.wind_direction is not None:
        data["wind_direction"] = int(weather.wind_direction)
    if weather.rain is not None:
        data["rain"] = float(weather.rain)
    if weather.pressure is not None:
        data["pressure"] = float(weather.pressure)
    return json.dumps(data, indent=4)


def find_template(candidates: Iterable[str | os.PathLike[str]]) -> str | None:
    """Return the first readable file among ``candidates``, or ``None``."""
    for candidate in candidates:
        if os.path.isfile(candidate) and os.access(candidate, os.R_OK):
            return os.fspath(candidate)
    return None


class CurrentReportGenerator:
    """Writes the current-weather SVG and JSON files into a report directory."""

    def __init__(
        self,
        report_directory: str | os.PathLike[str],
        locale_name: str = "",
        template_candidates: Sequence[str | os.PathLike[str]] | None = None,
    ) -> None:
        self.report_directory = Path(report_directory)
        self.locale_name = locale_name
        self.template_candidates = tuple(
            DEFAULT_TEMPLATES if template_candidates is None else template_candidates
        )

    def generate(self, weather: CurrentWeather) -> None:
        """Write both reports."""
        self.create_svg(weather)
        self.create_json(weather)

    def create_svg(self, weather: CurrentWeather) -> Path:
        """Fill the SVG template and store it gzip-compressed; return its path."""
        template = find_template(self.template_candidates)
        if template is None:
            raise ApplicationError("Unable to find SVG template")

        output = self.report_directory / SVG_FILENAME
        try:
            with open(template, encoding="utf-8") as source:
                content = render_svg(source, weather, self.locale_name)
            output.write_text(content, encoding="utf-8")
        except OSError as err:
            raise ApplicationError(
                "Unable to open input/output file when generating SVG"
            ) from err

        compress_file(output)
        return output

    def create_json(self, weather: CurrentWeather) -> Path:
        """Write the JSON report; return its path."""
        output = self.report_directory / JSON_FILENAME
        try:
            output.write_text(weather_json(weather) + "\n", encoding="utf-8")
        except OSError as err:
            raise ApplicationError(
                f"Unable to open output file when generating JSON: {output}"
            ) from err
        return output