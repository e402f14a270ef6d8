# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DCF synthesis: projection, IRR and liquidity combined into an NPV verdict.

Workflow:
  0) Clear the ledger so the analysis only sees its own cash flows
  1) Project yields (writes the ledger)
  2) Estimate the phi-hedged IRR from the ledger
  3) Validate liquidity (updates the liquidity pool)
  4) Discount the ledger to NPV and derive the verdict
"""

from __future__ import annotations

import logging

from ..core.calculations import FinancialCalculations
from ..core.ledger import CashFlowLedger
from ..core.primitives import (
    DCFSettings,
    LiquidityStatusEnum,
    NPVStatusEnum,
    RiskLevelEnum,
    ViabilityEnum,
)
from ..liquidity import LiquidityParams, LiquidityValidator
from ..projection import ProjectionEngine, ProjectionParams
from ..returns import IRREstimator
from .results import ComprehensiveResult, DCFAnalysis, NPVResult, OverallAssessment

logger = logging.getLogger(__name__)

LOW_RISK_IRR_THRESHOLD = 0.12


def assess(
    npv: float, liquidity_status: LiquidityStatusEnum, phi_hedged_irr: float
) -> OverallAssessment:
    """
    Derive the overall verdict.

    VIABLE requires a strictly positive NPV and a VALIDATED liquidity
    position. Risk is LOW when the numeric hedged IRR exceeds 12%.
    """
    viable = npv > 0 and liquidity_status is LiquidityStatusEnum.VALIDATED
    return OverallAssessment(
        investment_viability=(
            ViabilityEnum.VIABLE if viable else ViabilityEnum.REVIEW_NEEDED
        ),
        risk_level=(
            RiskLevelEnum.LOW
            if phi_hedged_irr > LOW_RISK_IRR_THRESHOLD
            else RiskLevelEnum.MODERATE
        ),
    )


class DCFSynthesizer:
    """
    Orchestrates the three components into a comprehensive result.

    Each synthesis starts from an empty ledger, so the IRR and NPV cover
    exactly the cash flows of this analysis. Callers sharing a synthesizer
    across threads must serialize calls (``DCFEngine`` does this).
    """

    def __init__(
        self,
        settings: DCFSettings,
        ledger: CashFlowLedger,
        projection_engine: ProjectionEngine,
        irr_estimator: IRREstimator,
        liquidity_validator: LiquidityValidator,
    ):
        self.settings = settings
        self.ledger = ledger
        self.projection_engine = projection_engine
        self.irr_estimator = irr_estimator
        self.liquidity_validator = liquidity_validator

    def synthesize(
        self, projection: ProjectionParams, liquidity: LiquidityParams
    ) -> ComprehensiveResult:
        """
        Run a comprehensive DCF analysis.

        Args:
            projection: Yield projection assumptions; its initial investment
                is also the IRR and NPV basis
            liquidity: Liquidity position and thresholds

        Returns:
            ComprehensiveResult with component results, NPV and verdict
        """
        if not self.ledger.is_empty():
            logger.debug(
                f"Clearing {len(self.ledger)} prior cash flow records before synthesis"
            )
        self.ledger.clear()

        yield_projection = self.projection_engine.project(projection)
        irr_analysis = self.irr_estimator.estimate_hedged_irr(
            projection.initial_investment
        )
        liquidity_validation = self.liquidity_validator.validate_liquidity(liquidity)

        npv_value = FinancialCalculations.calculate_npv(
            self.ledger.amounts(),
            self.settings.discount_rate,
            projection.initial_investment,
        )
        npv = NPVResult(
            value=npv_value,
            discount_rate=self.settings.discount_rate,
            status=NPVStatusEnum.POSITIVE if npv_value > 0 else NPVStatusEnum.NEGATIVE,
        )

        assessment = assess(
            npv_value, liquidity_validation.status, irr_analysis.phi_hedged_irr
        )

        logger.info(
            f"Synthesized '{self.settings.project_name}': NPV {npv_value:,.2f} "
            f"at {self.settings.discount_rate:.2%}, "
            f"{assessment.investment_viability.value} / {assessment.risk_level.value}"
        )

        return ComprehensiveResult(
            project_name=self.settings.project_name,
            location=self.settings.location,
            analysis=DCFAnalysis(
                yield_projection=yield_projection,
                irr_analysis=irr_analysis,
                liquidity_validation=liquidity_validation,
                npv=npv,
            ),
            overall_assessment=assessment,
        )
