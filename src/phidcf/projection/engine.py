# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Yield projection for a single investment case.

Projects compound-growth yield, applies occupancy and the phi adjustment
year by year, and posts each year's phi-adjusted yield to the ledger.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.calculations import FinancialCalculations
from ..core.ledger import CashFlowLedger, CashFlowRecord
from ..core.primitives import DCFSettings
from .results import ProjectionParams, YearlyProjection, YieldProjectionResult

logger = logging.getLogger(__name__)


class ProjectionEngine:
    """
    Computes the yearly yield forecast and appends it to the ledger.

    For each year t = 1..years:
        base = investment * (1 + growth) ** t
        adjusted = base * occupancy
        phi_adjusted = adjusted * (1 + (1 / phi - 1) * 0.1)

    Each call appends exactly ``years`` records; earlier records are kept.
    """

    def __init__(self, settings: DCFSettings, ledger: CashFlowLedger):
        self.settings = settings
        self.ledger = ledger

    def project(self, params: ProjectionParams) -> YieldProjectionResult:
        """
        Project yields and record them as cash flows.

        Args:
            params: Investment, horizon, growth and occupancy assumptions

        Returns:
            YieldProjectionResult with the yearly breakdown and aggregates
        """
        phi_factor = FinancialCalculations.phi_adjustment_factor(
            self.settings.phi_ratio
        )

        yearly: List[YearlyProjection] = []
        records: List[CashFlowRecord] = []
        cumulative_yield = 0.0

        for year in range(1, params.years + 1):
            base_yield = FinancialCalculations.compound_yield(
                params.initial_investment, params.growth_rate, year
            )
            adjusted_yield = base_yield * params.occupancy_rate
            phi_adjusted_yield = adjusted_yield * phi_factor
            cumulative_yield += phi_adjusted_yield

            yearly.append(
                YearlyProjection(
                    year=year,
                    base_yield=base_yield,
                    adjusted_yield=adjusted_yield,
                    phi_adjusted_yield=phi_adjusted_yield,
                    cumulative_yield=cumulative_yield,
                    occupancy_rate=params.occupancy_rate,
                )
            )
            records.append(CashFlowRecord(year=year, amount=phi_adjusted_yield))
            logger.debug(f"Year {year}: phi-adjusted yield {phi_adjusted_yield:,.2f}")

        self.ledger.add_records(records)

        average_yield = cumulative_yield / params.years if params.years > 0 else 0.0

        logger.info(
            f"Projected {len(yearly)} years for '{self.settings.project_name}': "
            f"total yield {cumulative_yield:,.2f}, ledger now holds {len(self.ledger)} records"
        )

        return YieldProjectionResult(
            project_name=self.settings.project_name,
            initial_investment=params.initial_investment,
            projection_period=params.years,
            yearly_projections=yearly,
            total_projected_yield=cumulative_yield,
            average_annual_yield=average_yield,
        )
