from __future__ import annotations

import json

import pytest

from sim_zero_export_pv.application import DashboardApplication
from sim_zero_export_pv.errors import InvalidConfiguration
from sim_zero_export_pv.result_builder import ResultBuilder


def test_run_dashboard_summary_contents():
    """Run the dashboard pipeline and check the summary layout."""
    app = DashboardApplication()
    summary = app.run_dashboard("summer", "weekday")

    assert summary["season"] == "summer"
    assert summary["day_type"] == "weekday"
    assert summary["operating_hours"] == "08:30 – 17:00"
    assert summary["profile"]["name"] == "Summer (December)"
    assert summary["output_dir"] is None
    assert len(summary["plots_data"]["hourly"]["load_kw"]) == 24
    assert len(summary["projection"]) == 20
    assert summary["projection"][0]["year"] == 1
    assert summary["financials"]["cash_payback_years"] > 0
    assert summary["plots_data"]["cost_comparison"]["without_solar"] == summary["totals"]["cost_without_solar"]
    json.dumps(summary)


def test_run_dashboard_without_ppa_omits_projection():
    summary = DashboardApplication().run_dashboard("winter", "saturday", show_ppa=False)
    assert "projection" not in summary
    assert "financials" not in summary
    assert "projection" not in summary["plots_data"]
    assert summary["operating_hours"] == "08:30 – 14:00"


def test_run_dashboard_rejects_unknown_selection():
    with pytest.raises(InvalidConfiguration):
        DashboardApplication().run_dashboard("autumn", "weekday")
    with pytest.raises(InvalidConfiguration):
        DashboardApplication().hourly_series("summer", "holiday")


def test_compare_seasons_and_hourly_series():
    app = DashboardApplication()
    totals = app.compare_seasons("weekday")
    assert set(totals) == {"summer", "winter"}
    assert totals["summer"].total_solar_kwh > totals["winter"].total_solar_kwh

    samples = app.hourly_series("summer", "weekday")
    assert len(samples) == 24
    assert sum(s.solar_kw for s in samples) == pytest.approx(totals["summer"].total_solar_kwh, abs=0.5)


def test_from_installation_uses_custom_system(installation_data: dict):
    app = DashboardApplication.from_installation(installation_data)
    assert app.installation_name == "Test Site"
    summary = app.run_dashboard("summer", "weekday")
    assert len(summary["projection"]) == 10
    assert summary["projection"][0]["grid_rate"] == pytest.approx(3.0)

    reference = DashboardApplication().run_dashboard("summer", "weekday", show_ppa=False)
    assert summary["totals"]["total_potential_kwh"] < reference["totals"]["total_potential_kwh"]


def test_run_dashboard_saves_outputs(tmp_path):
    app = DashboardApplication(
        save_outputs=True,
        result_builder=ResultBuilder(output_root=tmp_path),
    )
    summary = app.run_dashboard("summer", "weekday")
    assert summary["output_dir"] is not None
    assert (tmp_path / summary["output_dir"]).exists()
