"""
Validation schemas for installation files.

An installation file is a JSON document describing the plant and its
tariffs. Every section is optional; missing values fall back to the
reference 60 kWp installation.

Example:
    ```json
    {
        "name": "Observatory Science Centre",
        "system": {"system_size_kw": 60, "panel_count": 110, "panel_wattage_w": 550},
        "tariff": {"energy_rate": 2.6099, "ppa_rate": 1.9574,
                   "grid_escalation": 0.08, "ppa_escalation": 0.06},
        "financial": {"project_cost": 916407, "projection_years": 20}
    }
    ```
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .simulation.system import SystemConfig, Tariff


class TariffSchema(BaseModel):
    """Grid and PPA pricing section."""

    model_config = ConfigDict(extra="forbid")

    energy_rate: float = Field(2.6099, ge=0, description="Year-1 grid price per kWh")
    ppa_rate: float = Field(1.9574, ge=0, description="Year-1 PPA price per kWh")
    grid_escalation: float = Field(0.08, gt=-1, description="Annual grid escalation (decimal)")
    ppa_escalation: float = Field(0.06, gt=-1, description="Annual PPA escalation (decimal)")

    def to_tariff(self) -> Tariff:
        return Tariff(
            energy_rate=self.energy_rate,
            ppa_rate=self.ppa_rate,
            grid_escalation=self.grid_escalation,
            ppa_escalation=self.ppa_escalation,
        )


class SystemSchema(BaseModel):
    """Plant hardware and yield section."""

    model_config = ConfigDict(extra="forbid")

    system_size_kw: float = Field(60.0, ge=0, description="Capacity used by the hourly model (kW)")
    panel_count: int = Field(110, ge=0, description="Number of modules")
    panel_wattage_w: float = Field(550.0, ge=0, description="Module rating (W)")
    derate_factor: float = Field(0.85, gt=0, le=1, description="Hourly model system losses")
    degradation_factor: float = Field(0.995, gt=0, le=1, description="Yearly output retention")
    base_annual_generation_kwh: float = Field(89790.0, ge=0, description="Year-1 energy yield (kWh)")
    projection_derate_factor: float = Field(0.92, gt=0, le=1, description="Projection availability factor")


class FinancialSchema(BaseModel):
    """Project cost and projection horizon section."""

    model_config = ConfigDict(extra="forbid")

    project_cost: float = Field(916407.0, ge=0, description="Cash purchase price")
    projection_years: int = Field(20, ge=0, le=50, description="Projection horizon (years)")
    discount_rate: float = Field(0.15, gt=-1, description="Discount rate for PPA savings NPV")
    currency: str = Field("R", min_length=1, description="Currency display symbol")


class InstallationSchema(BaseModel):
    """
    Complete installation file.

    Attributes:
        name: Installation name used in reports and output folders.
        system: Plant hardware and yield parameters.
        tariff: Grid and PPA pricing.
        financial: Project cost, horizon and discounting.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field("Observatory Science Centre", min_length=1)
    description: Optional[str] = None
    system: SystemSchema = Field(default_factory=SystemSchema)
    tariff: TariffSchema = Field(default_factory=TariffSchema)
    financial: FinancialSchema = Field(default_factory=FinancialSchema)

    def to_system_config(self) -> SystemConfig:
        return SystemConfig(
            system_size_kw=self.system.system_size_kw,
            panel_count=self.system.panel_count,
            panel_wattage_w=self.system.panel_wattage_w,
            derate_factor=self.system.derate_factor,
            degradation_factor=self.system.degradation_factor,
            base_annual_generation_kwh=self.system.base_annual_generation_kwh,
            projection_derate_factor=self.system.projection_derate_factor,
            project_cost=self.financial.project_cost,
            tariff=self.tariff.to_tariff(),
            projection_years=self.financial.projection_years,
            discount_rate=self.financial.discount_rate,
            currency=self.financial.currency,
        )
