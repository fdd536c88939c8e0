# vetero

Helpers for a home weather station: unit conversions, derived values, and
the current-weather report files.

## Modules

- `vetero.weather` converts and derives values:
  - `wind_speed_to_bft(kmh)` gives the Beaufort force (0 to 12) for a wind
    speed in km/h. `wind_speed_to_bft_int(kmh)` takes the speed in 1/100 km/h.
  - `dewpoint(temp, humid)` gives the dew point in °C from a temperature in °C
    and a relative humidity in %. `dewpoint_int(temp, humid)` does the same
    with all values in hundredths.
  - `celsius_to_fahrenheit`, `kmh_to_mph`, `mm_to_in` and `hpa_to_inhg` convert
    units.
  - `sea_level_pressure(height, pressure)` reduces a pressure in hPa, measured
    at `height` metres, to sea level.
- `vetero.currentreport` builds the current-weather report:
  - `CurrentWeather` is a frozen dataclass of the latest values. A field set
    to `None` is unknown. It derives `dewpoint`, `wind_beaufort`,
    `wind_gust_beaufort` and `wind_direction_str` (one of 16 compass points).
  - `fill_template_line` and `render_svg` replace the placeholders of the SVG
    template with formatted values, or with dashes when a value is unknown.
    The placeholders are `TT.T`, `DD.D`, `UUUU-UU-UU UU:UU`, `HH`, `WW.W`,
    `WB`, `GG.G`, `WG`, `WDD`, `WD`, `RR.R`, `PPPP`, `SSSS` and `UUU`.
    Numbers use the decimal separator of the given locale.
  - `weather_json` returns the values as an indented JSON document.
  - `CurrentReportGenerator(report_directory, locale_name, template_candidates)`
    writes `current_weather.svgz` (gzip-compressed) and `current_weather.json`.
    It uses the first readable template among the candidates. The default
    candidates are `share/current_weather.svg` and
    `<sys.prefix>/share/current_weather.svg`.
- `vetero.calendarinfo` provides `days_per_month`, `days_in_month_of`,
  `is_leap_year`, and the current locale's `day_abbreviation` (1 = Monday)
  and `month_name`.
- `vetero.utils` provides printf-style formatting in a chosen locale
  (`str_printf`, `str_printf_l`) and locale-aware dash placeholders
  (`dash_decimal_value`). It also has `compress_file`, which gzips a file in
  place, `realpath` and `start_background`. Errors are raised as
  `ApplicationError` or `SystemCallError`.
- `vetero.application.VeteroApplication` sets up logging for a program:
  - `setup_debug_logging(level, filename)` sets the debug level to `trace`,
    `debug`, `info` or `none`, and logs to the file if one is given.
  - `setup_error_logging(target)` sends error messages to `stderr`, `stdout`,
    `syslog` or a file.

  Use it as a context manager to close the log files again.

## Example

```python
import datetime
from vetero.weather import wind_speed_to_bft, dewpoint
from vetero.currentreport import CurrentWeather, CurrentReportGenerator

wind_speed_to_bft(30.0)  # 5
dewpoint(20.0, 50.0)     # about 9.3

now = CurrentWeather(timestamp=datetime.datetime.now(), temperature=20.0, humidity=50.0)
CurrentReportGenerator("reports", "C", ["current_weather.svg"]).generate(now)
```

## What it does not do

The package has no command-line programs. It does not read or store weather
data: you build a `CurrentWeather` yourself from wherever your measurements
live. It does not talk to display hardware either.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```