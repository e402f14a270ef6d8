# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phi-hedged IRR estimation from ledger cash flows.

The return is a closed-form geometric-mean approximation, not a root of
the NPV equation; the recommendation thresholds are calibrated to it.
"""

from __future__ import annotations

import logging

from ..core.calculations import FinancialCalculations
from ..core.exceptions import DivisionError, InvalidStateError
from ..core.ledger import CashFlowLedger
from ..core.primitives import DCFSettings, RecommendationEnum
from .results import IRRAnalysisResult, RiskMetrics

logger = logging.getLogger(__name__)

ASSUMED_VOLATILITY = 0.15
ASSUMED_DOWNSIDE_DEVIATION = 0.10
STRONG_BUY_THRESHOLD = 0.12
BUY_THRESHOLD = 0.08


def recommend(phi_hedged_irr: float) -> RecommendationEnum:
    """Map a decimal hedged IRR to a recommendation (NaN maps to HOLD)."""
    if phi_hedged_irr > STRONG_BUY_THRESHOLD:
        return RecommendationEnum.STRONG_BUY
    if phi_hedged_irr > BUY_THRESHOLD:
        return RecommendationEnum.BUY
    return RecommendationEnum.HOLD


class IRREstimator:
    """
    Derives a risk-adjusted return and recommendation from the ledger.

    Reads every record currently in the ledger, including records left by
    earlier projections on the same ledger.
    """

    def __init__(self, settings: DCFSettings, ledger: CashFlowLedger):
        self.settings = settings
        self.ledger = ledger

    def estimate_hedged_irr(self, initial_investment: float) -> IRRAnalysisResult:
        """
        Estimate the phi-hedged IRR.

        Args:
            initial_investment: Capital invested at t0 (non-zero)

        Returns:
            IRRAnalysisResult with base and hedged rates, risk ratios and
            a recommendation

        Raises:
            InvalidStateError: If the ledger holds no cash flows
            DivisionError: If initial_investment is zero
        """
        if self.ledger.is_empty():
            logger.warning("IRR estimation requested with an empty ledger")
            raise InvalidStateError(
                "No cash flows available. Run the yield projection first."
            )
        if initial_investment == 0:
            logger.warning("IRR estimation requested with zero initial investment")
            raise DivisionError(
                "initial_investment must be non-zero to estimate IRR"
            )

        total_cash_flow = self.ledger.total_amount()
        periods = len(self.ledger)

        base_irr = FinancialCalculations.geometric_irr(
            total_cash_flow, initial_investment, periods
        )
        hedge_factor = self.settings.hedge_factor
        phi_hedged_irr = FinancialCalculations.hedged_irr(base_irr, hedge_factor)

        risk_metrics = RiskMetrics(
            sharpe_ratio=phi_hedged_irr / ASSUMED_VOLATILITY,
            sortino_ratio=phi_hedged_irr / ASSUMED_DOWNSIDE_DEVIATION,
            volatility=ASSUMED_VOLATILITY,
            downside_deviation=ASSUMED_DOWNSIDE_DEVIATION,
        )
        recommendation = recommend(phi_hedged_irr)

        reference_irr = FinancialCalculations.reference_irr(
            initial_investment, (record.amount for record in self.ledger)
        )

        logger.info(
            f"Hedged IRR {phi_hedged_irr:.4%} (base {base_irr:.4%}) over "
            f"{periods} cash flows: {recommendation.value}"
        )

        return IRRAnalysisResult(
            base_irr=base_irr,
            phi_hedged_irr=phi_hedged_irr,
            phi_ratio=self.settings.phi_ratio,
            hedge_factor=hedge_factor,
            risk_metrics=risk_metrics,
            recommendation=recommendation,
            cash_flow_count=periods,
            reference_irr=reference_irr,
        )
