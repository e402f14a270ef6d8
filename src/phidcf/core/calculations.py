# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the engine's core formulas. These functions are
pure (math-only) and independent of ledger state; components delegate to
them so each formula has a single source of truth.
"""

import math
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from pyxirr import irr

# Weight of the inverse-phi term in the yearly yield adjustment
PHI_YIELD_WEIGHT = 0.1
# Weight of the hedge factor in the IRR adjustment
PHI_HEDGE_WEIGHT = 0.15


class FinancialCalculations:
    """
    Pure mathematical functions for the phi-hedged DCF engine.

    Static methods for the yield, return and discounting formulas,
    independent of ledger structure or engine state.
    """

    @staticmethod
    def compound_yield(investment: float, growth_rate: float, year: int) -> float:
        """
        Base yield in ``year`` under annual compound growth.

        Growth past the float range saturates to a signed infinity.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            growth = np.power(np.float64(1.0 + growth_rate), float(year))
            return float(investment * growth)

    @staticmethod
    def phi_adjustment_factor(phi_ratio: float) -> float:
        """
        Multiplier applied to occupancy-adjusted yield.

        ``1 + (1/phi - 1) * 0.1``. For any phi above 1 the factor is slightly
        below 1 (~0.9618 for the golden ratio), a deterministic conservatism
        haircut rather than a stochastic hedge.
        """
        return 1.0 + (1.0 / phi_ratio - 1.0) * PHI_YIELD_WEIGHT

    @staticmethod
    def geometric_irr(
        total_cash_flow: float, initial_investment: float, periods: int
    ) -> float:
        """
        Geometric-mean return approximation.

        ``(total_cash_flow / initial_investment) ** (1 / periods) - 1``

        This is not a root of the NPV equation. A negative multiple has no
        real root and yields NaN.

        Args:
            total_cash_flow: Sum of all projected cash flows
            initial_investment: Capital invested at t0 (non-zero)
            periods: Number of cash flow periods (positive)

        Returns:
            Approximate annual rate as decimal, or NaN when undefined
        """
        multiple = total_cash_flow / initial_investment
        if multiple < 0:
            return math.nan
        return multiple ** (1.0 / periods) - 1.0

    @staticmethod
    def hedged_irr(base_irr: float, hedge_factor: float) -> float:
        """Apply the 15%-weighted hedge: ``base * (1 + hedge_factor * 0.15)``."""
        return base_irr * (1.0 + hedge_factor * PHI_HEDGE_WEIGHT)

    @staticmethod
    def growth_factors(years: Iterable[int], discount_rate: float) -> np.ndarray:
        """Compounding factors ``(1 + r) ** year`` for each year."""
        exponents = np.asarray(list(years), dtype=float)
        return np.power(1.0 + discount_rate, exponents)

    @staticmethod
    def calculate_npv(
        cash_flows: pd.Series, discount_rate: float, initial_investment: float
    ) -> float:
        """
        Net present value of yearly cash flows less the initial investment.

        Args:
            cash_flows: Cash flow amounts indexed by projection year (1-based)
            discount_rate: Annual discount rate as decimal (e.g., 0.08)
            initial_investment: Capital invested at t0, undiscounted

        Returns:
            ``sum(cf / (1 + r) ** year) - initial_investment``

        Example:
            ```python
            flows = pd.Series([108.0], index=[1])
            FinancialCalculations.calculate_npv(flows, 0.08, 100.0)  # ~0.0
            ```
        """
        if cash_flows.empty:
            return -float(initial_investment)

        factors = FinancialCalculations.growth_factors(cash_flows.index, discount_rate)
        present_values = cash_flows.to_numpy(dtype=float) / factors
        return float(present_values.sum()) - float(initial_investment)

    @staticmethod
    def reference_irr(
        initial_investment: float, cash_flows: Iterable[float]
    ) -> Optional[float]:
        """
        True periodic IRR of ``[-initial_investment, *cash_flows]`` via PyXIRR.

        Reported alongside the approximation for comparison only.

        Returns:
            IRR as decimal or None if it cannot be solved
        """
        flows = [-float(initial_investment)] + [float(cf) for cf in cash_flows]
        if len(flows) < 2:
            return None

        try:
            result = irr(flows)
            return float(result) if result is not None else None
        except Exception:
            # Unsolvable series (no sign change, no convergence)
            return None
