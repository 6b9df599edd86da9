from .errors import InvalidConfiguration
from .simulation.aggregator import (
    DailyTotals,
    FinancialSummary,
    YearProjection,
    compute_daily_totals,
    project_for_system,
    project_savings,
    summarize_financials,
)
from .simulation.hourly import HourSample, generate_hourly_series, hourly_frame
from .simulation.prices import EscalatingPriceModel, PriceModel
from .simulation.profiles import DayType, Season, SeasonalProfile, resolve_profile, validate_profile
from .simulation.system import SystemConfig, Tariff
from .reporting import format_dashboard_summary, projection_frame, season_comparison_frame
from .result_builder import ResultBuilder
from .application import DashboardApplication

__all__ = [
    "InvalidConfiguration",
    "SystemConfig",
    "Tariff",
    "Season",
    "DayType",
    "SeasonalProfile",
    "resolve_profile",
    "validate_profile",
    "HourSample",
    "generate_hourly_series",
    "hourly_frame",
    "DailyTotals",
    "YearProjection",
    "FinancialSummary",
    "compute_daily_totals",
    "project_savings",
    "project_for_system",
    "summarize_financials",
    "PriceModel",
    "EscalatingPriceModel",
    "format_dashboard_summary",
    "projection_frame",
    "season_comparison_frame",
    "ResultBuilder",
    "DashboardApplication",
]
