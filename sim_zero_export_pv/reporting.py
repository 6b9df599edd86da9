from __future__ import annotations

from typing import Any, Mapping, Sequence

import pandas as pd

from .simulation.aggregator import YearProjection, compute_daily_totals
from .simulation.hourly import generate_hourly_series, hourly_frame, round_half_up
from .simulation.profiles import DayType, Season, resolve_profile
from .simulation.system import SystemConfig

__all__ = [
    "hourly_frame",
    "projection_frame",
    "season_comparison_frame",
    "format_dashboard_summary",
]


def projection_frame(projection: Sequence[YearProjection]) -> pd.DataFrame:
    """
    Tabulate a projection with display rounding.

    Rates keep two decimals; generation and savings are whole units.
    """
    columns = [
        "year",
        "annual_generation_kwh",
        "grid_rate",
        "ppa_rate",
        "annual_savings",
        "cumulative_savings",
    ]
    if not projection:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(
        {
            "year": [row.year for row in projection],
            "annual_generation_kwh": [round_half_up(row.annual_generation_kwh) for row in projection],
            "grid_rate": [round_half_up(row.grid_rate, 2) for row in projection],
            "ppa_rate": [round_half_up(row.ppa_rate, 2) for row in projection],
            "annual_savings": [round_half_up(row.annual_savings) for row in projection],
            "cumulative_savings": [round_half_up(row.cumulative_savings) for row in projection],
        }
    )[columns]


def season_comparison_frame(
    day_type: DayType | str = DayType.WEEKDAY,
    system: SystemConfig | None = None,
) -> pd.DataFrame:
    """
    Compare summer and winter representative days side by side.

    Returns:
        DataFrame indexed by metric with one column per season.
    """
    system = system or SystemConfig()
    columns = {}
    for season in Season:
        profile = resolve_profile(season, day_type)
        totals = compute_daily_totals(generate_hourly_series(profile, system), system.tariff)
        columns[season.value] = {
            "peak_sun_hours": profile.peak_sun_hours,
            "solar_used_kwh": totals.total_solar_kwh,
            "solar_coverage_pct": totals.solar_coverage,
            "curtailed_kwh": totals.total_curtailed_kwh,
            "daily_savings": totals.savings_vs_grid,
        }
    df = pd.DataFrame(columns)
    df.index.name = "metric"
    return df


def format_dashboard_summary(summary: Mapping[str, Any]) -> str:
    """
    Render the headline cards of a dashboard summary as plain text.

    Args:
        summary: Output of :meth:`DashboardApplication.run_dashboard`.
    """
    totals = summary["totals"]
    profile = summary["profile"]
    currency = summary.get("currency", "R")
    lines = [
        f"{summary.get('installation', 'Installation')} - {profile['name']}, "
        f"{summary['day_type']} ({summary['operating_hours']})",
        f"  Daily load        {totals['total_load_kwh']:.0f} kWh",
        f"  Solar used        {totals['total_solar_kwh']:.0f} kWh",
        f"  Self-consumption  {totals['self_consumption_rate']:.0f}%",
        f"  Solar coverage    {totals['solar_coverage']:.0f}%",
        f"  Grid import       {totals['total_import_kwh']:.0f} kWh",
        f"  Curtailed         {totals['total_curtailed_kwh']:.0f} kWh",
        f"  Daily savings     {currency} {totals['savings_vs_grid']:.0f}",
        f"  Peak load / PV    {totals['peak_load_kw']:.1f} kW / {totals['peak_solar_kw']:.1f} kW",
    ]
    financials = summary.get("financials")
    if financials:
        payback = financials["cash_payback_years"]
        lines.extend(
            [
                "",
                f"  PPA discount day 1     {financials['ppa_discount']:.0%}",
                f"  PPA savings (horizon)  {currency} {financials['ppa_total_savings']:,.0f}",
                f"  PPA savings NPV        {currency} {financials['ppa_savings_npv']:,.0f}",
                f"  Cash year-1 savings    {currency} {financials['cash_year1_savings']:,.0f}",
                "  Cash payback           "
                + (f"{payback:.1f} years" if payback is not None else "not reached"),
                f"  Cash net benefit       {currency} {financials['cash_net_benefit']:,.0f}",
            ]
        )
    return "\n".join(lines)
