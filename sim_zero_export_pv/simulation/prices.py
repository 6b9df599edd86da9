"""
Tariff escalation models for the long-term PPA vs. grid projection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class PriceModel(ABC):
    """
    Abstract base class for energy price trajectories.

    Implementations return the per-kWh price for a simulation year. Years
    are 0-based (0 = first year of operation), matching the exponent used
    in compound escalation.
    """

    @abstractmethod
    def rate_for_year(self, year_index: int) -> float:
        """
        Get the energy price for a given year.

        Args:
            year_index: Year of operation (0-based).

        Returns:
            Price per kWh in the tariff currency.
        """
        raise NotImplementedError

    def trajectory(self, n_years: int) -> np.ndarray:
        """Return the prices for years 0..n_years-1 as an array."""
        return np.array([self.rate_for_year(y) for y in range(n_years)], dtype=float)


class EscalatingPriceModel(PriceModel):
    """
    Price model with compound annual escalation.

    Price formula:
        rate(year) = base_rate × (1 + annual_escalation) ** year

    Used for both the utility tariff (8%/yr by default) and the PPA
    contract price (6%/yr by default).

    Example:
        ```python
        grid = EscalatingPriceModel(base_rate=2.6099, annual_escalation=0.08)
        grid.rate_for_year(0)   # 2.6099
        grid.rate_for_year(9)   # ~5.22
        ```
    """

    def __init__(self, base_rate: float, annual_escalation: float = 0.0) -> None:
        """
        Args:
            base_rate: Year-1 price per kWh.
            annual_escalation: Compound annual escalation as a decimal.
        """
        self.base_rate = float(base_rate)
        self.annual_escalation = float(annual_escalation)

    def rate_for_year(self, year_index: int) -> float:
        return self.base_rate * (1.0 + self.annual_escalation) ** year_index

    def trajectory(self, n_years: int) -> np.ndarray:
        years = np.arange(n_years, dtype=float)
        return self.base_rate * np.power(1.0 + self.annual_escalation, years)
