"""
Core zero-export PV simulation models.

This package collects the three stages of the dashboard simulator:

* Seasonal profile resolution (`profiles`) selecting the representative
  day for a season and day type.
* Hourly series generation (`hourly`) coupling the visitor-driven load
  with the Gaussian PV curve under the zero-export clamp.
* Aggregation (`aggregator`) into daily totals and the long-term PPA vs.
  grid projection, using the escalating tariffs in `prices`.

Installation constants live in `system` so every stage receives them
explicitly.
"""

from __future__ import annotations

from .aggregator import (
    DailyTotals,
    FinancialSummary,
    YearProjection,
    compute_daily_totals,
    project_for_system,
    project_savings,
    summarize_financials,
)
from .hourly import HourSample, generate_hourly_series, hourly_frame
from .prices import EscalatingPriceModel, PriceModel
from .profiles import DayType, Season, SeasonalProfile, resolve_profile, validate_profile
from .system import SystemConfig, Tariff

__all__ = [
    # Configuration
    "SystemConfig",
    "Tariff",
    # Seasonal profiles
    "Season",
    "DayType",
    "SeasonalProfile",
    "resolve_profile",
    "validate_profile",
    # Hourly series
    "HourSample",
    "generate_hourly_series",
    "hourly_frame",
    # Aggregation + projection
    "DailyTotals",
    "YearProjection",
    "FinancialSummary",
    "compute_daily_totals",
    "project_savings",
    "project_for_system",
    "summarize_financials",
    "PriceModel",
    "EscalatingPriceModel",
]
