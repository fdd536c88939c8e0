"""Meteorological conversions and derived values."""

from __future__ import annotations

import math
from bisect import bisect_left

# Upper bounds (inclusive, km/h) of Beaufort forces 1 to 11.
_BEAUFORT_LIMITS = (5, 11, 19, 28, 38, 49, 61, 74, 88, 102, 117)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def wind_speed_to_bft(kmh: float) -> int:
    """Convert a wind speed in km/h to a Beaufort force between 0 and 12."""
    speed = _round_half_away(kmh)
    if speed < 1:
        return 0
    return min(bisect_left(_BEAUFORT_LIMITS, speed) + 1, 12)


def wind_speed_to_bft_int(kmh: int) -> int:
    """Like :func:`wind_speed_to_bft` with the speed in 1/100 km/h."""
    return wind_speed_to_bft(kmh / 100.0)


def dewpoint(temp: float, humid: float) -> float:
    """Return the dew point in °C for ``temp`` in °C and ``humid`` in % (> 0)."""
    log_humid = math.log(humid / 100.0)
    return (241.2 * log_humid + (4222.03716 * temp) / (241.2 + temp)) / (
        17.5043 - log_humid - (17.5043 * temp) / (241.2 + temp)
    )


def dewpoint_int(temp: int, humid: int) -> int:
    """Like :func:`dewpoint` with all values in hundredths."""
    return _round_half_away(dewpoint(temp / 100.0, humid / 100.0) * 100.0)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 1.8 + 32


def kmh_to_mph(kmh: float) -> float:
    """Convert km/h to mph."""
    return kmh * 0.62137


def mm_to_in(mm: float) -> float:
    """Convert millimetres of rain to inches."""
    return mm / 25.4


def hpa_to_inhg(hpa: float) -> float:
    """Convert hPa to inches of mercury."""
    return hpa * 0.029529980164712


def sea_level_pressure(height: float, pressure: float) -> float:
    """Reduce ``pressure`` in hPa measured at ``height`` metres to sea level."""
    if height < 0.1:
        return pressure
    return pressure / math.pow(1.0 - height / 44330.0, 5.255)