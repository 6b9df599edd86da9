"""
Installation-wide configuration for the zero-export simulator.

Groups the fixed plant and tariff constants into immutable records so the
simulation stages receive them explicitly instead of reading literals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidConfiguration


@dataclass(frozen=True)
class Tariff:
    """
    Grid and PPA energy prices with their annual escalation.

    Attributes:
        energy_rate: Grid energy price in year 1 (currency/kWh).
        ppa_rate: PPA contracted price in year 1 (currency/kWh).
        grid_escalation: Annual compound grid escalation (0.08 = 8%).
        ppa_escalation: Annual compound PPA escalation (0.06 = 6%).
    """
    energy_rate: float = 2.6099
    ppa_rate: float = 1.9574
    grid_escalation: float = 0.08
    ppa_escalation: float = 0.06

    def __post_init__(self) -> None:
        if self.energy_rate < 0 or self.ppa_rate < 0:
            raise InvalidConfiguration("Tariff rates must be non-negative")
        if self.grid_escalation <= -1 or self.ppa_escalation <= -1:
            raise InvalidConfiguration("Escalation rates must be greater than -100%")

    @property
    def ppa_discount(self) -> float:
        """Fraction by which the day-1 PPA rate undercuts the grid rate."""
        if self.energy_rate <= 0:
            return 0.0
        return 1.0 - self.ppa_rate / self.energy_rate


@dataclass(frozen=True)
class SystemConfig:
    """
    Configuration of a zero-export PV installation.

    The defaults describe the reference 60 kWp plant (110 x 550 W panels).

    Attributes:
        system_size_kw: Nameplate capacity used by the hourly solar model (kW).
        panel_count: Number of installed modules.
        panel_wattage_w: Module rating (W).
        derate_factor: System losses applied to the hourly Gaussian output.
        degradation_factor: Year-over-year output retention (0.995 = -0.5%/yr).
        base_annual_generation_kwh: First-year energy yield used by the
            long-term projection (kWh).
        projection_derate_factor: Availability factor applied to the annual
            yield in the projection.
        project_cost: Upfront cash-purchase price (currency units).
        tariff: Grid and PPA pricing.
        projection_years: Horizon of the long-term projection.
        discount_rate: Annual rate used to discount PPA savings for NPV.
        currency: Display symbol for currency amounts.
    """
    system_size_kw: float = 60.0
    panel_count: int = 110
    panel_wattage_w: float = 550.0
    derate_factor: float = 0.85
    degradation_factor: float = 0.995
    base_annual_generation_kwh: float = 89790.0
    projection_derate_factor: float = 0.92
    project_cost: float = 916407.0
    tariff: Tariff = field(default_factory=Tariff)
    projection_years: int = 20
    discount_rate: float = 0.15
    currency: str = "R"

    def __post_init__(self) -> None:
        if self.system_size_kw < 0:
            raise InvalidConfiguration("system_size_kw must be non-negative")
        if self.panel_count < 0 or self.panel_wattage_w < 0:
            raise InvalidConfiguration("Panel count and wattage must be non-negative")
        if not 0.0 < self.derate_factor <= 1.0:
            raise InvalidConfiguration("derate_factor must be in (0, 1]")
        if not 0.0 < self.projection_derate_factor <= 1.0:
            raise InvalidConfiguration("projection_derate_factor must be in (0, 1]")
        if not 0.0 < self.degradation_factor <= 1.0:
            raise InvalidConfiguration("degradation_factor must be in (0, 1]")
        if self.base_annual_generation_kwh < 0:
            raise InvalidConfiguration("base_annual_generation_kwh must be non-negative")
        if self.project_cost < 0:
            raise InvalidConfiguration("project_cost must be non-negative")
        if self.projection_years < 0:
            raise InvalidConfiguration("projection_years must be non-negative")
        if self.discount_rate <= -1:
            raise InvalidConfiguration("discount_rate must be greater than -100%")

    @property
    def array_kwp(self) -> float:
        """DC array size derived from the module count (kWp)."""
        return self.panel_count * self.panel_wattage_w / 1000.0
