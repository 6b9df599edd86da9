"""
Hourly load and zero-export PV series for a representative day.

The load follows an occupancy-driven curve around the opening hours; the
PV output is a Gaussian around solar noon sampled at each half hour and
clamped to the simultaneous load, since surplus cannot be exported.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

from .profiles import SOLAR_NOON_HOUR, SeasonalProfile
from .system import SystemConfig

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round halves towards +inf, matching spreadsheet-style rounding."""
    scale = 10.0 ** decimals
    return math.floor(value * scale + 0.5) / scale


@dataclass(frozen=True)
class HourSample:
    """
    Power balance for one hour of the representative day (kW, 1 decimal).

    Attributes:
        hour: Hour of day, 0..23.
        load_kw: Building demand.
        solar_kw: PV power consumed on site, min(potential, load).
        potential_solar_kw: PV power available before the export clamp.
        curtailed_kw: PV power discarded, max(0, potential - load).
        grid_import_kw: Power drawn from the utility, max(0, load - solar).
    """
    hour: int
    load_kw: float
    solar_kw: float
    potential_solar_kw: float
    curtailed_kw: float
    grid_import_kw: float

    @property
    def time_label(self) -> str:
        return f"{self.hour:02d}:00"


def _visitor_curve(hours_in_operation: float, operating_span: float) -> float:
    # ramp-up, sinusoidal plateau, taper over the last two hours
    if hours_in_operation < 2:
        return 0.5 + hours_in_operation * 0.2
    if hours_in_operation < operating_span - 2:
        phase = (hours_in_operation - 2) / (operating_span - 4)
        return 0.9 + 0.1 * math.sin(phase * math.pi)
    return 0.7 - (hours_in_operation - (operating_span - 2)) * 0.15


def load_for_hour(profile: SeasonalProfile, hour: int) -> float:
    """
    Building load (kW) for an integer hour, before rounding.

    Branches are evaluated in order: opening hour, open hours, closing
    hour, hour after closing, night, rest of day.
    """
    base = profile.base_load_kw
    span = profile.load_span_kw
    if hour == math.floor(profile.open_hour):
        return base + span * 0.5
    if profile.open_hour < hour < profile.close_hour:
        curve = _visitor_curve(hour - profile.open_hour, profile.close_hour - profile.open_hour)
        return base + span * curve * profile.visitor_factor
    if hour == math.floor(profile.close_hour):
        return base + span * 0.4
    if hour == math.floor(profile.close_hour) + 1:
        return base + span * 0.15
    if hour >= NIGHT_START_HOUR or hour < NIGHT_END_HOUR:
        return base * 0.9
    return base * 1.1


def potential_solar_for_hour(profile: SeasonalProfile, hour: int, system: SystemConfig) -> float:
    """
    Unclamped PV output (kW) for an integer hour, before rounding.

    Zero outside [sunrise_hour, sunset_hour]; otherwise a Gaussian centred
    on solar noon evaluated at the middle of the hour.
    """
    if not profile.sunrise_hour <= hour <= profile.sunset_hour:
        return 0.0
    hour_mid = hour + 0.5
    solar_factor = math.exp(
        -((hour_mid - SOLAR_NOON_HOUR) ** 2) / (2 * profile.solar_spread_h ** 2)
    )
    return system.system_size_kw * system.derate_factor * solar_factor


def generate_hourly_series(
    profile: SeasonalProfile,
    system: SystemConfig | None = None,
) -> List[HourSample]:
    """
    Build the 24 hourly samples of the representative day.

    Args:
        profile: Seasonal profile (see :func:`resolve_profile`).
        system: Installation configuration; defaults to the 60 kWp plant.

    Returns:
        Samples for hours 0..23 in ascending order, every power value
        rounded to one decimal. A profile whose sunrise is after its
        sunset yields a day without PV rather than an error.
    """
    system = system or SystemConfig()
    samples: List[HourSample] = []
    for hour in range(HOURS_PER_DAY):
        load_kw = load_for_hour(profile, hour)
        potential_kw = potential_solar_for_hour(profile, hour, system)
        solar_kw = min(potential_kw, load_kw)
        curtailed_kw = max(0.0, potential_kw - load_kw)
        grid_import_kw = max(0.0, load_kw - solar_kw)
        samples.append(
            HourSample(
                hour=hour,
                load_kw=round_half_up(load_kw, 1),
                solar_kw=round_half_up(solar_kw, 1),
                potential_solar_kw=round_half_up(potential_kw, 1),
                curtailed_kw=round_half_up(curtailed_kw, 1),
                grid_import_kw=round_half_up(grid_import_kw, 1),
            )
        )
    logger.debug(
        "Generated hourly series for %s: peak load %.1f kW",
        profile.name,
        max(s.load_kw for s in samples),
    )
    return samples


def hourly_frame(samples: Sequence[HourSample]) -> pd.DataFrame:
    """Return the samples as a DataFrame with a "time" label column."""
    columns = [
        "hour",
        "time",
        "load_kw",
        "solar_kw",
        "potential_solar_kw",
        "curtailed_kw",
        "grid_import_kw",
    ]
    if not samples:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(
        {
            "hour": np.array([s.hour for s in samples], dtype=int),
            "time": [s.time_label for s in samples],
            "load_kw": [s.load_kw for s in samples],
            "solar_kw": [s.solar_kw for s in samples],
            "potential_solar_kw": [s.potential_solar_kw for s in samples],
            "curtailed_kw": [s.curtailed_kw for s in samples],
            "grid_import_kw": [s.grid_import_kw for s in samples],
        }
    )
    return df[columns]
