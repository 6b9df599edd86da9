from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

import matplotlib.pyplot as plt
import pandas as pd

from .config import get_results_dir

logger = logging.getLogger(__name__)

SOLAR_COLOR = "#1a1a1a"
LOAD_COLOR = "#666666"
POTENTIAL_COLOR = "#999999"
CURTAILED_COLOR = "#cc0000"


def _slugify(value: str) -> str:
    """
    Convert a free-form string into a filesystem-safe slug.

    Args:
        value: Input string.

    Returns:
        Slug containing only alphanumeric characters, dash, or underscore.
    """
    return "".join(c if c.isalnum() or c in ("-", "_") else "_" for c in value.strip()).strip("_")


def _create_run_directory(name: str, output_root: Path) -> Path:
    """
    Create the timestamped directory for one dashboard export.
    """
    timestamp = datetime.now().strftime("%y%m%d_%H%M%S")
    slug = _slugify(name) or "dashboard"
    run_dir = output_root / f"{timestamp}_{slug}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _plot_hourly_profile(hourly: pd.DataFrame, save_path: Path) -> None:
    """
    Plot load against potential, consumed and curtailed PV power.
    """
    fig, ax = plt.subplots(figsize=(11, 5))
    ax.fill_between(hourly["hour"], hourly["potential_solar_kw"], color=POTENTIAL_COLOR, alpha=0.25,
                    label="Potential solar")
    ax.fill_between(hourly["hour"], hourly["solar_kw"], color=SOLAR_COLOR, alpha=0.35, label="Solar used")
    ax.fill_between(hourly["hour"], hourly["curtailed_kw"], color=CURTAILED_COLOR, alpha=0.3,
                    label="Curtailed")
    ax.plot(hourly["hour"], hourly["load_kw"], color=LOAD_COLOR, linewidth=2, label="Building load")
    ax.set_xticks(hourly["hour"])
    ax.set_xticklabels(hourly["time"], rotation=90, fontsize=8)
    ax.set_ylabel("kW")
    ax.set_title("Hourly load vs. solar generation (zero export)")
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8, loc="upper left")
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _plot_grid_import(hourly: pd.DataFrame, save_path: Path) -> None:
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.bar(hourly["hour"], hourly["grid_import_kw"], color=LOAD_COLOR)
    ax.set_xticks(hourly["hour"])
    ax.set_xticklabels(hourly["time"], rotation=90, fontsize=8)
    ax.set_ylabel("kW")
    ax.set_title("Grid import by hour")
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _plot_ppa_rates(projection: pd.DataFrame, save_path: Path, currency: str) -> None:
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(projection["year"], projection["grid_rate"], color=POTENTIAL_COLOR, linewidth=2, label="Grid rate")
    ax.plot(projection["year"], projection["ppa_rate"], color=SOLAR_COLOR, linewidth=2, label="PPA rate")
    ax.set_xlabel("Year")
    ax.set_ylabel(f"{currency}/kWh")
    ax.set_title("Grid vs. PPA rate escalation")
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8, loc="upper left")
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _plot_cumulative_savings(projection: pd.DataFrame, save_path: Path, currency: str) -> None:
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.fill_between(projection["year"], projection["cumulative_savings"] / 1e6, color=SOLAR_COLOR, alpha=0.2)
    ax.plot(projection["year"], projection["cumulative_savings"] / 1e6, color=SOLAR_COLOR, linewidth=2)
    ax.set_xlabel("Year")
    ax.set_ylabel(f"{currency} million")
    ax.set_title("Cumulative PPA savings")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


class ResultBuilder:
    """
    Write dashboard charts and tables to disk.
    """

    def __init__(self, output_root: Path | None = None) -> None:
        """
        Args:
            output_root: Base directory for exports; defaults to the
                configured results directory.
        """
        self.output_root = Path(output_root) if output_root is not None else get_results_dir()

    def build_dashboard(self, name: str, summary: Mapping[str, Any]) -> Path:
        """
        Export one dashboard summary.

        Writes the hourly chart, grid import bars, hourly CSV and a JSON
        copy of the summary; when the summary carries a projection, the
        rate and cumulative savings charts plus projection CSV as well.

        Args:
            name: Label used to name the output folder.
            summary: Output of :meth:`DashboardApplication.run_dashboard`.

        Returns:
            Path of the created directory.
        """
        run_dir = _create_run_directory(name, self.output_root)
        currency = summary.get("currency", "R")

        hourly = pd.DataFrame(summary["plots_data"]["hourly"]).rename(columns={"hours": "hour"})
        hourly.to_csv(run_dir / "hourly.csv", index=False)
        _plot_hourly_profile(hourly, run_dir / "hourly_profile.png")
        _plot_grid_import(hourly, run_dir / "grid_import.png")

        projection_rows = summary.get("projection")
        if projection_rows:
            projection = pd.DataFrame(projection_rows)
            projection.to_csv(run_dir / "projection.csv", index=False)
            _plot_ppa_rates(projection, run_dir / "ppa_rates.png", currency)
            _plot_cumulative_savings(projection, run_dir / "cumulative_savings.png", currency)

        with open(run_dir / "summary.json", "w", encoding="utf-8") as handle:
            json.dump(
                {k: v for k, v in summary.items() if k != "plots_data"},
                handle,
                indent=2,
                default=str,
                ensure_ascii=False,
            )

        logger.info("Dashboard outputs written to %s", run_dir)
        return run_dir
