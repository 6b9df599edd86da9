from __future__ import annotations

import pytest
from pathlib import Path
import sys

import matplotlib

matplotlib.use("Agg")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sim_zero_export_pv.simulation.profiles import resolve_profile  # noqa: E402
from sim_zero_export_pv.simulation.system import SystemConfig, Tariff  # noqa: E402


@pytest.fixture()
def default_system() -> SystemConfig:
    """Provide the reference 60 kWp installation."""
    return SystemConfig()


@pytest.fixture()
def summer_weekday_profile():
    """Provide the summer weekday representative day."""
    return resolve_profile("summer", "weekday")


@pytest.fixture()
def winter_saturday_profile():
    """Provide the winter Saturday representative day."""
    return resolve_profile("winter", "saturday")


def _build_installation_data() -> dict:
    return {
        "name": "Test Site",
        "system": {
            "system_size_kw": 30.0,
            "panel_count": 55,
            "panel_wattage_w": 550.0,
        },
        "tariff": {
            "energy_rate": 3.0,
            "ppa_rate": 2.0,
            "grid_escalation": 0.05,
            "ppa_escalation": 0.03,
        },
        "financial": {
            "project_cost": 400000.0,
            "projection_years": 10,
        },
    }


@pytest.fixture()
def installation_data() -> dict:
    """Return a small installation definition used by loader and CLI tests."""
    return _build_installation_data()


@pytest.fixture()
def flat_tariff() -> Tariff:
    """Tariff with round numbers for hand-checked cost arithmetic."""
    return Tariff(energy_rate=2.0, ppa_rate=1.0, grid_escalation=0.0, ppa_escalation=0.0)
