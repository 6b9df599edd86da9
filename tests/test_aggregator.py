from __future__ import annotations

import pytest

from sim_zero_export_pv.errors import InvalidConfiguration
from sim_zero_export_pv.simulation.aggregator import (
    compute_daily_totals,
    project_for_system,
    project_savings,
    summarize_financials,
)
from sim_zero_export_pv.simulation.hourly import HourSample, generate_hourly_series
from sim_zero_export_pv.simulation.profiles import DayType, Season, resolve_profile
from sim_zero_export_pv.simulation.system import SystemConfig, Tariff


def _sample(hour, load, solar, potential, curtailed, grid_import) -> HourSample:
    return HourSample(
        hour=hour,
        load_kw=load,
        solar_kw=solar,
        potential_solar_kw=potential,
        curtailed_kw=curtailed,
        grid_import_kw=grid_import,
    )


def test_daily_totals_hand_checked(flat_tariff) -> None:
    samples = [
        _sample(0, 10.0, 5.0, 8.0, 0.0, 5.0),
        _sample(1, 10.0, 0.0, 0.0, 0.0, 10.0),
    ]
    totals = compute_daily_totals(samples, flat_tariff)

    assert totals.total_load_kwh == 20
    assert totals.total_solar_kwh == 5
    assert totals.total_potential_kwh == 8
    assert totals.total_import_kwh == 15
    assert totals.self_consumption_rate == 63  # 62.5% rounds half up
    assert totals.solar_coverage == 25
    assert totals.cost_without_solar == 40
    assert totals.cost_with_solar == 30
    assert totals.ppa_cost == 5
    assert totals.savings_vs_grid == 10
    assert totals.savings_with_ppa == 5
    assert totals.cost_with_ppa == 35
    assert totals.peak_load_kw == 10.0
    assert totals.peak_solar_kw == 5.0
    assert totals.cash_cost_share == pytest.approx(75.0)
    assert totals.ppa_cost_share == pytest.approx(87.5)


def test_daily_totals_guard_division_by_zero(flat_tariff) -> None:
    totals = compute_daily_totals([_sample(0, 0.0, 0.0, 0.0, 0.0, 0.0)], flat_tariff)
    assert totals.self_consumption_rate == 0
    assert totals.solar_coverage == 0
    assert totals.cash_cost_share == 0.0

    empty = compute_daily_totals([], flat_tariff)
    assert empty.total_load_kwh == 0
    assert empty.peak_load_kw == 0.0


@pytest.mark.parametrize("season", list(Season))
@pytest.mark.parametrize("day_type", list(DayType))
def test_daily_totals_consistency(season, day_type) -> None:
    samples = generate_hourly_series(resolve_profile(season, day_type))
    totals = compute_daily_totals(samples, Tariff())

    assert totals.total_solar_kwh <= totals.total_potential_kwh
    assert 0 <= totals.self_consumption_rate <= 100
    assert 0 <= totals.solar_coverage <= 100
    assert totals.peak_solar_kw <= totals.peak_load_kw
    assert totals.savings_vs_grid >= totals.savings_with_ppa
    assert totals.cost_with_solar <= totals.cost_without_solar


def test_summer_outperforms_winter() -> None:
    summer = compute_daily_totals(generate_hourly_series(resolve_profile("summer", "weekday")))
    winter = compute_daily_totals(generate_hourly_series(resolve_profile("winter", "weekday")))
    assert summer.total_solar_kwh > winter.total_solar_kwh
    assert summer.savings_vs_grid > winter.savings_vs_grid


def test_projection_year_one_has_no_escalation() -> None:
    rows = project_savings(
        years=20,
        base_annual_generation_kwh=89790.0,
        degradation_rate=0.995,
        derate_factor=0.92,
        grid_rate0=2.6099,
        grid_escalation=0.08,
        ppa_rate0=1.9574,
        ppa_escalation=0.06,
    )
    first = rows[0]
    generation = 89790.0 * 0.92

    assert len(rows) == 20
    assert [r.year for r in rows] == list(range(1, 21))
    assert first.annual_generation_kwh == pytest.approx(generation, rel=1e-12)
    assert first.grid_rate == pytest.approx(2.6099, rel=1e-12)
    assert first.ppa_rate == pytest.approx(1.9574, rel=1e-12)
    assert first.annual_savings == pytest.approx(generation * (2.6099 - 1.9574), rel=1e-12)
    assert first.cumulative_savings == first.annual_savings


def test_projection_escalation_and_running_total() -> None:
    rows = project_savings()

    assert rows[9].grid_rate == pytest.approx(2.6099 * 1.08 ** 9)
    assert rows[9].ppa_rate == pytest.approx(1.9574 * 1.06 ** 9)
    assert rows[19].annual_generation_kwh == pytest.approx(89790.0 * 0.995 ** 19 * 0.92)

    running = 0.0
    for row in rows:
        running += row.annual_savings
        assert row.cumulative_savings == pytest.approx(running)
    assert rows[-1].cumulative_savings == pytest.approx(3.67e6, rel=0.02)


def test_projection_cumulative_savings_increase_when_grid_escalates_faster() -> None:
    rows = project_savings(years=20, grid_escalation=0.08, ppa_escalation=0.06)
    cumulative = [r.cumulative_savings for r in rows]
    assert all(b > a for a, b in zip(cumulative, cumulative[1:]))

    idle = project_savings(years=5, base_annual_generation_kwh=0.0)
    assert all(r.cumulative_savings == 0.0 for r in idle)


def test_projection_horizon_edge_cases() -> None:
    assert project_savings(years=0) == []
    with pytest.raises(InvalidConfiguration):
        project_savings(years=-1)


def test_project_for_system_uses_installation_constants() -> None:
    system = SystemConfig(
        base_annual_generation_kwh=1000.0,
        projection_derate_factor=1.0,
        degradation_factor=1.0,
        tariff=Tariff(energy_rate=3.0, ppa_rate=2.0, grid_escalation=0.0, ppa_escalation=0.0),
        projection_years=3,
    )
    rows = project_for_system(system)
    assert [r.annual_savings for r in rows] == pytest.approx([1000.0, 1000.0, 1000.0])
    assert rows[-1].cumulative_savings == pytest.approx(3000.0)


def test_summarize_financials_reference_installation(default_system) -> None:
    summary = summarize_financials(project_for_system(default_system), default_system)

    assert summary.ppa_discount == pytest.approx(0.25, abs=0.001)
    assert summary.cash_year1_savings == pytest.approx(89790.0 * 0.92 * 2.6099)
    assert summary.cash_payback_years is not None
    assert 3.5 < summary.cash_payback_years < 4.5
    assert 8.0e6 < summary.cash_net_benefit < 8.8e6
    assert 0 < summary.ppa_savings_npv < summary.ppa_total_savings


def test_summarize_financials_payback_interpolation() -> None:
    system = SystemConfig(
        base_annual_generation_kwh=100.0,
        projection_derate_factor=1.0,
        degradation_factor=1.0,
        project_cost=250.0,
        tariff=Tariff(energy_rate=1.0, ppa_rate=0.5, grid_escalation=0.0, ppa_escalation=0.0),
        projection_years=5,
        discount_rate=0.0,
    )
    summary = summarize_financials(project_for_system(system), system)

    assert summary.cash_payback_years == pytest.approx(2.5)
    assert summary.cash_net_benefit == pytest.approx(250.0)
    assert summary.ppa_total_savings == pytest.approx(250.0)
    assert summary.ppa_savings_npv == pytest.approx(250.0)


def test_summarize_financials_payback_not_reached() -> None:
    system = SystemConfig(project_cost=1e12, projection_years=3)
    summary = summarize_financials(project_for_system(system), system)
    assert summary.cash_payback_years is None
    assert summary.cash_net_benefit < 0
