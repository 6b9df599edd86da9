"""
Daily totals and long-term PPA vs. grid projection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ..errors import InvalidConfiguration
from .hourly import HourSample, round_half_up
from .prices import EscalatingPriceModel
from .system import SystemConfig, Tariff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyTotals:
    """
    Energy, rate and cost figures for one representative day.

    Energy totals are in kWh and currency amounts in whole units; both are
    rounded half-up. Rates are whole percentages.
    """
    total_load_kwh: float
    total_solar_kwh: float
    total_potential_kwh: float
    total_curtailed_kwh: float
    total_import_kwh: float
    self_consumption_rate: float
    solar_coverage: float
    cost_without_solar: float
    cost_with_solar: float
    ppa_cost: float
    savings_vs_grid: float
    savings_with_ppa: float
    peak_load_kw: float
    peak_solar_kw: float

    @property
    def cost_with_ppa(self) -> float:
        """Daily spend under the PPA: residual grid import plus PPA energy."""
        return self.cost_with_solar + self.ppa_cost

    @property
    def cash_cost_share(self) -> float:
        """Cash-purchase daily cost as a percentage of the grid-only cost."""
        if self.cost_without_solar <= 0:
            return 0.0
        return self.cost_with_solar / self.cost_without_solar * 100.0

    @property
    def ppa_cost_share(self) -> float:
        """PPA daily cost as a percentage of the grid-only cost."""
        if self.cost_without_solar <= 0:
            return 0.0
        return self.cost_with_ppa / self.cost_without_solar * 100.0


@dataclass(frozen=True)
class YearProjection:
    """
    One year of the PPA vs. grid projection (unrounded values).

    Attributes:
        year: Year of operation, 1-based.
        annual_generation_kwh: Degraded, derated yield for the year.
        grid_rate: Escalated grid price (currency/kWh).
        ppa_rate: Escalated PPA price (currency/kWh).
        annual_savings: generation × (grid_rate - ppa_rate).
        cumulative_savings: Running total of annual_savings from year 1.
    """
    year: int
    annual_generation_kwh: float
    grid_rate: float
    ppa_rate: float
    annual_savings: float
    cumulative_savings: float


@dataclass(frozen=True)
class FinancialSummary:
    """
    Headline financial figures for the PPA and cash-purchase options.

    Attributes:
        ppa_discount: Day-1 PPA rate below the grid rate, as a fraction.
        ppa_total_savings: PPA savings accumulated over the horizon.
        ppa_savings_npv: PPA savings discounted at the configured rate.
        cash_year1_savings: Avoided grid cost in year 1 when buying the plant.
        cash_payback_years: Fractional payback time of the cash purchase, or
            None if the horizon is too short.
        cash_net_benefit: Avoided grid cost over the horizon minus project cost.
    """
    ppa_discount: float
    ppa_total_savings: float
    ppa_savings_npv: float
    cash_year1_savings: float
    cash_payback_years: Optional[float]
    cash_net_benefit: float


def _percentage(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return round_half_up(numerator / denominator * 100.0)


def compute_daily_totals(samples: Sequence[HourSample], tariff: Tariff | None = None) -> DailyTotals:
    """
    Reduce the hourly samples into daily totals.

    Sums are taken over the already-rounded hourly values. Rates are
    guarded against division by zero (reported as 0%).

    Args:
        samples: Hourly samples, typically from :func:`generate_hourly_series`.
        tariff: Day-1 grid and PPA rates; defaults to the reference tariff.

    Returns:
        DailyTotals with energy and money rounded to whole units.
    """
    tariff = tariff or Tariff()
    total_load = sum(s.load_kw for s in samples)
    total_solar = sum(s.solar_kw for s in samples)
    total_potential = sum(s.potential_solar_kw for s in samples)
    total_curtailed = sum(s.curtailed_kw for s in samples)
    total_import = sum(s.grid_import_kw for s in samples)

    cost_without_solar = total_load * tariff.energy_rate
    cost_with_solar = total_import * tariff.energy_rate
    ppa_cost = total_solar * tariff.ppa_rate
    savings_vs_grid = cost_without_solar - cost_with_solar
    savings_with_ppa = cost_without_solar - (cost_with_solar + ppa_cost)

    return DailyTotals(
        total_load_kwh=round_half_up(total_load),
        total_solar_kwh=round_half_up(total_solar),
        total_potential_kwh=round_half_up(total_potential),
        total_curtailed_kwh=round_half_up(total_curtailed),
        total_import_kwh=round_half_up(total_import),
        self_consumption_rate=_percentage(total_solar, total_potential),
        solar_coverage=_percentage(total_solar, total_load),
        cost_without_solar=round_half_up(cost_without_solar),
        cost_with_solar=round_half_up(cost_with_solar),
        ppa_cost=round_half_up(ppa_cost),
        savings_vs_grid=round_half_up(savings_vs_grid),
        savings_with_ppa=round_half_up(savings_with_ppa),
        peak_load_kw=max((s.load_kw for s in samples), default=0.0),
        peak_solar_kw=max((s.solar_kw for s in samples), default=0.0),
    )


def project_savings(
    years: int = 20,
    base_annual_generation_kwh: float = 89790.0,
    degradation_rate: float = 0.995,
    derate_factor: float = 0.92,
    grid_rate0: float = 2.6099,
    grid_escalation: float = 0.08,
    ppa_rate0: float = 1.9574,
    ppa_escalation: float = 0.06,
) -> List[YearProjection]:
    """
    Project PPA savings against grid purchase year by year.

    For year ``y`` (1-based)::

        generation(y) = base × degradation_rate ** (y - 1) × derate_factor
        grid_rate(y)  = grid_rate0 × (1 + grid_escalation) ** (y - 1)
        ppa_rate(y)   = ppa_rate0 × (1 + ppa_escalation) ** (y - 1)
        savings(y)    = generation(y) × (grid_rate(y) - ppa_rate(y))

    The cumulative figure is accumulated in year order.

    Raises:
        InvalidConfiguration: If ``years`` is negative.
    """
    if years < 0:
        raise InvalidConfiguration("years must be non-negative")

    grid_model = EscalatingPriceModel(grid_rate0, grid_escalation)
    ppa_model = EscalatingPriceModel(ppa_rate0, ppa_escalation)

    rows: List[YearProjection] = []
    cumulative = 0.0
    for year in range(1, years + 1):
        generation = base_annual_generation_kwh * degradation_rate ** (year - 1) * derate_factor
        grid_rate = grid_model.rate_for_year(year - 1)
        ppa_rate = ppa_model.rate_for_year(year - 1)
        savings = generation * (grid_rate - ppa_rate)
        cumulative += savings
        rows.append(
            YearProjection(
                year=year,
                annual_generation_kwh=generation,
                grid_rate=grid_rate,
                ppa_rate=ppa_rate,
                annual_savings=savings,
                cumulative_savings=cumulative,
            )
        )
    return rows


def project_for_system(system: SystemConfig) -> List[YearProjection]:
    """Run :func:`project_savings` with the constants of an installation."""
    tariff = system.tariff
    return project_savings(
        years=system.projection_years,
        base_annual_generation_kwh=system.base_annual_generation_kwh,
        degradation_rate=system.degradation_factor,
        derate_factor=system.projection_derate_factor,
        grid_rate0=tariff.energy_rate,
        grid_escalation=tariff.grid_escalation,
        ppa_rate0=tariff.ppa_rate,
        ppa_escalation=tariff.ppa_escalation,
    )


def _npv(rate: float, cashflows: np.ndarray) -> float:
    """
    Net present value of end-of-period cashflows.

    The first cashflow is discounted by one period. The growth factor is
    clamped to stay positive for rates at or below -100%.
    """
    periods = np.arange(1, cashflows.size + 1, dtype=float)
    growth = max(1.0 + rate, 1e-9)
    discounts = np.power(growth, periods)
    return float(np.sum(cashflows / discounts))


def _payback_years(annual_cashflows: np.ndarray, investment: float) -> Optional[float]:
    # linear interpolation inside the year where cumulative savings cross the investment
    if investment <= 0:
        return 0.0
    cumulative = np.cumsum(annual_cashflows)
    crossed = np.nonzero(cumulative >= investment)[0]
    if crossed.size == 0:
        return None
    idx = int(crossed[0])
    previous = float(cumulative[idx - 1]) if idx > 0 else 0.0
    within_year = float(annual_cashflows[idx])
    if within_year <= 0:
        return float(idx + 1)
    return idx + (investment - previous) / within_year


def summarize_financials(
    projection: Sequence[YearProjection],
    system: SystemConfig | None = None,
) -> FinancialSummary:
    """
    Derive headline figures from a projection.

    The cash-purchase option avoids the full grid cost of the generated
    energy (generation × grid rate); the PPA option saves the spread
    between grid and PPA rates.
    """
    system = system or SystemConfig()
    ppa_savings = np.array([row.annual_savings for row in projection], dtype=float)
    cash_savings = np.array(
        [row.annual_generation_kwh * row.grid_rate for row in projection],
        dtype=float,
    )
    summary = FinancialSummary(
        ppa_discount=system.tariff.ppa_discount,
        ppa_total_savings=float(ppa_savings.sum()),
        ppa_savings_npv=_npv(system.discount_rate, ppa_savings),
        cash_year1_savings=float(cash_savings[0]) if cash_savings.size else 0.0,
        cash_payback_years=_payback_years(cash_savings, system.project_cost),
        cash_net_benefit=float(cash_savings.sum()) - system.project_cost,
    )
    logger.debug("Financial summary over %d years: %s", len(projection), summary)
    return summary
