"""
Seasonal operating profiles for the reference site.

Provides :class:`SeasonalProfile` describing a representative day (demand
envelope, opening hours, daylight window) and :func:`resolve_profile`
which selects it from a season and a day type.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict

from ..errors import InvalidConfiguration

logger = logging.getLogger(__name__)

SOLAR_NOON_HOUR = 12.5
WEEKDAY_CLOSE_HOUR = 17.0
SATURDAY_CLOSE_HOUR = 14.0


class Season(str, Enum):
    SUMMER = "summer"
    WINTER = "winter"


class DayType(str, Enum):
    WEEKDAY = "weekday"
    SATURDAY = "saturday"


@dataclass(frozen=True)
class SeasonalProfile:
    """
    Representative-day parameters for one season and day type.

    Hours are decimal (8.5 = 08:30).

    Attributes:
        name: Display name, e.g. "Summer (December)".
        peak_sun_hours: Equivalent full-sun hours for the season.
        base_load_kw: Building load with no visitors (kW).
        peak_load_kw: Reference peak load used to scale visitor demand (kW).
        visitor_factor: Multiplier on the visitor-driven part of the load.
        open_hour: Opening time.
        close_hour: Closing time (17:00 weekdays, 14:00 Saturdays).
        sunrise_hour: First hour with PV output.
        sunset_hour: Last hour with PV output.
        solar_spread_h: Standard deviation of the Gaussian PV curve (hours).
    """
    name: str
    peak_sun_hours: float
    base_load_kw: float
    peak_load_kw: float
    visitor_factor: float
    open_hour: float
    close_hour: float
    sunrise_hour: float
    sunset_hour: float
    solar_spread_h: float

    @classmethod
    def custom(cls, **kwargs) -> "SeasonalProfile":
        """Build a profile from explicit values and validate it."""
        profile = cls(**kwargs)
        validate_profile(profile)
        return profile

    @property
    def load_span_kw(self) -> float:
        """Difference between peak and base load (kW)."""
        return self.peak_load_kw - self.base_load_kw

    @property
    def operating_hours_label(self) -> str:
        """Opening window formatted as "HH:MM – HH:MM"."""
        return f"{_format_hour(self.open_hour)} – {_format_hour(self.close_hour)}"


def _format_hour(value: float) -> str:
    hours = int(math.floor(value))
    minutes = int(round((value - hours) * 60))
    return f"{hours:02d}:{minutes:02d}"


_SEASON_RECORDS: Dict[Season, SeasonalProfile] = {
    Season.SUMMER: SeasonalProfile(
        name="Summer (December)",
        peak_sun_hours=6.5,
        base_load_kw=8.0,
        peak_load_kw=52.0,
        visitor_factor=1.4,
        open_hour=8.5,
        close_hour=WEEKDAY_CLOSE_HOUR,
        sunrise_hour=5.5,
        sunset_hour=19.5,
        solar_spread_h=4.0,
    ),
    Season.WINTER: SeasonalProfile(
        name="Winter (June)",
        peak_sun_hours=3.3,
        base_load_kw=8.0,
        peak_load_kw=48.0,
        visitor_factor=1.3,
        open_hour=8.5,
        close_hour=WEEKDAY_CLOSE_HOUR,
        sunrise_hour=7.5,
        sunset_hour=17.5,
        solar_spread_h=3.0,
    ),
}


def parse_season(value: Season | str) -> Season:
    """Coerce a season name to :class:`Season`, rejecting unknown values."""
    if isinstance(value, Season):
        return value
    try:
        return Season(str(value).strip().lower())
    except ValueError:
        raise InvalidConfiguration(
            f"Unknown season {value!r}; expected one of {[s.value for s in Season]}"
        ) from None


def parse_day_type(value: DayType | str) -> DayType:
    """Coerce a day type name to :class:`DayType`, rejecting unknown values."""
    if isinstance(value, DayType):
        return value
    try:
        return DayType(str(value).strip().lower())
    except ValueError:
        raise InvalidConfiguration(
            f"Unknown day type {value!r}; expected one of {[d.value for d in DayType]}"
        ) from None


def validate_profile(profile: SeasonalProfile) -> None:
    """
    Check that a profile describes a physically consistent day.

    Raises:
        InvalidConfiguration: On negative loads, peak below base, hours
            outside 0..24, sunrise not before sunset, close not after open,
            or a non-positive solar spread.
    """
    if profile.base_load_kw < 0 or profile.peak_load_kw < 0:
        raise InvalidConfiguration("Loads must be non-negative")
    if profile.peak_load_kw < profile.base_load_kw:
        raise InvalidConfiguration("peak_load_kw must not be below base_load_kw")
    if profile.visitor_factor < 0:
        raise InvalidConfiguration("visitor_factor must be non-negative")
    if profile.peak_sun_hours < 0:
        raise InvalidConfiguration("peak_sun_hours must be non-negative")
    for label in ("open_hour", "close_hour", "sunrise_hour", "sunset_hour"):
        value = getattr(profile, label)
        if not 0.0 <= value <= 24.0:
            raise InvalidConfiguration(f"{label} must be between 0 and 24, got {value}")
    if profile.sunrise_hour >= profile.sunset_hour:
        raise InvalidConfiguration("sunrise_hour must be before sunset_hour")
    if profile.open_hour >= profile.close_hour:
        raise InvalidConfiguration("open_hour must be before close_hour")
    if profile.solar_spread_h <= 0:
        raise InvalidConfiguration("solar_spread_h must be positive")


def resolve_profile(season: Season | str, day_type: DayType | str) -> SeasonalProfile:
    """
    Select the seasonal profile for a season and day type.

    The closing hour depends only on the day type (14:00 on Saturdays,
    17:00 otherwise); every other field depends only on the season.

    Args:
        season: ``Season`` member or its name ("summer" / "winter").
        day_type: ``DayType`` member or its name ("weekday" / "saturday").

    Returns:
        A fresh, validated :class:`SeasonalProfile`.

    Raises:
        InvalidConfiguration: If either value is not recognized.
    """
    season_key = parse_season(season)
    day_key = parse_day_type(day_type)
    close_hour = SATURDAY_CLOSE_HOUR if day_key is DayType.SATURDAY else WEEKDAY_CLOSE_HOUR
    profile = replace(_SEASON_RECORDS[season_key], close_hour=close_hour)
    validate_profile(profile)
    logger.debug("Resolved profile %s for %s", profile.name, day_key.value)
    return profile
