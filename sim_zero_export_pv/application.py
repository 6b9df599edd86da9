from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from .result_builder import ResultBuilder
from .scenario_setup import InstallationSource, load_installation
from .simulation.aggregator import (
    DailyTotals,
    compute_daily_totals,
    project_for_system,
    summarize_financials,
)
from .simulation.hourly import HourSample, generate_hourly_series
from .simulation.profiles import DayType, Season, SeasonalProfile, parse_day_type, parse_season, resolve_profile
from .simulation.system import SystemConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _simulate_day(
    season: Season,
    day_type: DayType,
    system: SystemConfig,
) -> Tuple[SeasonalProfile, Tuple[HourSample, ...], DailyTotals]:
    profile = resolve_profile(season, day_type)
    samples = tuple(generate_hourly_series(profile, system))
    totals = compute_daily_totals(samples, system.tariff)
    return profile, samples, totals


class DashboardApplication:
    """
    High-level orchestrator used by the CLI and the dashboard front end.
    """

    def __init__(
        self,
        *,
        system: SystemConfig | None = None,
        installation_name: str = "Observatory Science Centre",
        save_outputs: bool = False,
        result_builder: ResultBuilder | None = None,
    ) -> None:
        """
        Args:
            system: Installation constants (defaults to the 60 kWp plant).
            installation_name: Name used in reports and output folders.
            save_outputs: When True, ResultBuilder saves plots/CSV files.
            result_builder: Optional ResultBuilder for file outputs.
        """
        self.system = system or SystemConfig()
        self.installation_name = installation_name
        self.save_outputs = save_outputs
        self.result_builder = result_builder

    @classmethod
    def from_installation(
        cls,
        source: InstallationSource = None,
        **kwargs: Any,
    ) -> "DashboardApplication":
        """Build an application from an installation file or mapping."""
        installation = load_installation(source)
        return cls(
            system=installation.to_system_config(),
            installation_name=installation.name,
            **kwargs,
        )

    def run_dashboard(
        self,
        season: Season | str = Season.SUMMER,
        day_type: DayType | str = DayType.WEEKDAY,
        *,
        show_ppa: bool = True,
    ) -> Dict[str, Any]:
        """
        Compute everything the dashboard displays for one selection.

        Args:
            season: "summer" or "winter".
            day_type: "weekday" or "saturday".
            show_ppa: Include the long-term PPA projection and financials.

        Returns:
            Summary dictionary with profile, totals, optional projection and
            plot series.

        Raises:
            InvalidConfiguration: For unrecognized season or day type.
        """
        season_key = parse_season(season)
        day_key = parse_day_type(day_type)
        profile, samples, totals = _simulate_day(season_key, day_key, self.system)

        summary: Dict[str, Any] = {
            "installation": self.installation_name,
            "season": season_key.value,
            "day_type": day_key.value,
            "currency": self.system.currency,
            "profile": asdict(profile),
            "operating_hours": profile.operating_hours_label,
            "totals": asdict(totals),
            "plots_data": {
                "hourly": {
                    "hours": [s.hour for s in samples],
                    "time": [s.time_label for s in samples],
                    "load_kw": [s.load_kw for s in samples],
                    "solar_kw": [s.solar_kw for s in samples],
                    "potential_solar_kw": [s.potential_solar_kw for s in samples],
                    "curtailed_kw": [s.curtailed_kw for s in samples],
                    "grid_import_kw": [s.grid_import_kw for s in samples],
                },
                "cost_comparison": {
                    "without_solar": totals.cost_without_solar,
                    "cash_purchase": totals.cost_with_solar,
                    "ppa": totals.cost_with_ppa,
                    "cash_share_pct": totals.cash_cost_share,
                    "ppa_share_pct": totals.ppa_cost_share,
                },
            },
        }

        if show_ppa:
            rows = project_for_system(self.system)
            summary["projection"] = [asdict(row) for row in rows]
            summary["financials"] = asdict(summarize_financials(rows, self.system))
            summary["plots_data"]["projection"] = {
                "years": [row.year for row in rows],
                "grid_rate": [row.grid_rate for row in rows],
                "ppa_rate": [row.ppa_rate for row in rows],
                "cumulative_savings": [row.cumulative_savings for row in rows],
            }

        logger.debug(
            "Dashboard %s/%s: %s kWh solar used",
            season_key.value,
            day_key.value,
            totals.total_solar_kwh,
        )

        output_dir = None
        if self.save_outputs and self.result_builder:
            output_dir = self.result_builder.build_dashboard(
                f"{self.installation_name}_{season_key.value}_{day_key.value}",
                summary,
            )
        summary["output_dir"] = str(output_dir) if output_dir else None
        return summary

    def hourly_series(
        self,
        season: Season | str,
        day_type: DayType | str,
    ) -> List[HourSample]:
        """Return the hourly samples for a selection."""
        _, samples, _ = _simulate_day(parse_season(season), parse_day_type(day_type), self.system)
        return list(samples)

    def compare_seasons(self, day_type: DayType | str = DayType.WEEKDAY) -> Dict[str, DailyTotals]:
        """Daily totals for both seasons on the same day type."""
        day_key = parse_day_type(day_type)
        return {
            season.value: _simulate_day(season, day_key, self.system)[2]
            for season in Season
        }
