from __future__ import annotations

from sim_zero_export_pv import DashboardApplication, ResultBuilder, format_dashboard_summary


def main() -> None:
    app = DashboardApplication.from_installation(
        save_outputs=True,
        result_builder=ResultBuilder(),
    )
    for season in ("summer", "winter"):
        for day_type in ("weekday", "saturday"):
            summary = app.run_dashboard(season, day_type, show_ppa=season == "summer" and day_type == "weekday")
            print(format_dashboard_summary(summary))
            print(f"Report saved in: {summary['output_dir']}\n")


if __name__ == "__main__":
    main()
