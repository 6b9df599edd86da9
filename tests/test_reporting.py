from __future__ import annotations

import pytest

from sim_zero_export_pv.application import DashboardApplication
from sim_zero_export_pv.reporting import (
    format_dashboard_summary,
    projection_frame,
    season_comparison_frame,
)
from sim_zero_export_pv.simulation.aggregator import project_savings


def test_projection_frame_display_rounding() -> None:
    df = projection_frame(project_savings())
    assert len(df) == 20
    assert df["grid_rate"].iloc[0] == pytest.approx(2.61)
    assert df["ppa_rate"].iloc[0] == pytest.approx(1.96)
    assert df["grid_rate"].iloc[-1] == pytest.approx(2.6099 * 1.08 ** 19, abs=0.005)
    assert df["ppa_rate"].iloc[-1] == pytest.approx(1.9574 * 1.06 ** 19, abs=0.005)
    assert df["annual_savings"].iloc[0] == round(89790 * 0.92 * (2.6099 - 1.9574))
    assert projection_frame([]).empty


def test_season_comparison_frame() -> None:
    df = season_comparison_frame("weekday")
    assert list(df.columns) == ["summer", "winter"]
    assert df.loc["peak_sun_hours", "summer"] == 6.5
    assert df.loc["peak_sun_hours", "winter"] == 3.3
    assert df.loc["solar_used_kwh", "summer"] > df.loc["solar_used_kwh", "winter"]
    assert df.loc["daily_savings", "summer"] > df.loc["daily_savings", "winter"]


def test_format_dashboard_summary() -> None:
    summary = DashboardApplication().run_dashboard("summer", "weekday")
    text = format_dashboard_summary(summary)
    assert "Summer (December)" in text
    assert "Self-consumption" in text
    assert "Cash payback" in text
    assert "R " in text

    no_ppa = format_dashboard_summary(
        DashboardApplication().run_dashboard("summer", "weekday", show_ppa=False)
    )
    assert "PPA discount" not in no_ppa
