# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Liquidity validation against operational safety thresholds.

Architecture:
- Four independent checks, each reported individually
- Overall status is VALIDATED only when all four pass
- One recommendation per failing check, in fixed check order
- The validator overwrites the engine's liquidity pool with the validated
  position; it never reads or writes the cash flow ledger
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..core.exceptions import DivisionError
from ..core.primitives import DCFSettings, LiquidityStatusEnum
from .results import LiquidityChecks, LiquidityParams, LiquidityValidationResult

logger = logging.getLogger(__name__)

OPTIMAL_RATIO_CEILING = 0.35
PHI_ALIGNMENT_FLOOR = 0.30

ALL_VALIDATED_MESSAGE = "All liquidity mechanisms validated - maintain current strategy"


@dataclass
class LiquidityPool:
    """Current liquidity snapshot; overwritten, never accumulated."""

    value: float = 0.0


def liquidity_recommendations(
    checks: LiquidityChecks,
    current_liquidity: float,
    required_liquidity: float,
    emergency_reserve_ratio: float,
) -> List[str]:
    """
    Build recommendations, one per failing check, in check order.

    Args:
        checks: Outcome of the four liquidity checks
        current_liquidity: Liquid capital available
        required_liquidity: Minimum liquidity in currency units
        emergency_reserve_ratio: Emergency floor as a share of asset value

    Returns:
        Non-empty list of messages; the affirmative message only when every
        check passed
    """
    recommendations: List[str] = []

    if not checks.sufficient_liquidity:
        deficit = required_liquidity - current_liquidity
        recommendations.append(
            f"Increase liquidity by ${deficit / 1_000_000:.2f}M to meet requirements"
        )

    if not checks.emergency_reserve_met:
        recommendations.append(
            f"Build emergency reserve to minimum {emergency_reserve_ratio * 100:g}% "
            "of total asset value"
        )

    if not checks.optimal_ratio:
        # Against a zero requirement only negative liquidity is below
        if required_liquidity == 0:
            below_requirement = current_liquidity < 0
        else:
            below_requirement = current_liquidity / required_liquidity < 1
        if below_requirement:
            recommendations.append(
                "Liquidity below optimal range - consider asset liquidation or capital raise"
            )
        else:
            recommendations.append(
                "Liquidity above optimal range - consider redeployment for higher returns"
            )

    if not checks.phi_aligned:
        recommendations.append(
            "Adjust liquidity to align with Phi-hedged optimal ratio for risk balance"
        )

    if not recommendations:
        recommendations.append(ALL_VALIDATED_MESSAGE)

    return recommendations


class LiquidityValidator:
    """Checks a capital pool against the four liquidity rules."""

    def __init__(self, settings: DCFSettings, pool: LiquidityPool):
        self.settings = settings
        self.pool = pool

    def validate_liquidity(self, params: LiquidityParams) -> LiquidityValidationResult:
        """
        Validate liquidity and update the liquidity pool.

        Args:
            params: Asset value, current liquidity and threshold ratios

        Returns:
            LiquidityValidationResult with ratios, checks, status and
            recommendations

        Raises:
            DivisionError: If total_asset_value is zero
        """
        if params.total_asset_value == 0:
            logger.warning("Liquidity validation requested with zero total asset value")
            raise DivisionError(
                "total_asset_value must be non-zero to compute the liquidity ratio"
            )

        current = params.current_liquidity
        required_liquidity = params.total_asset_value * params.required_liquidity_ratio
        emergency_reserve = params.total_asset_value * params.emergency_reserve_ratio
        actual_ratio = current / params.total_asset_value
        phi_score = actual_ratio * self.settings.phi_ratio

        self.pool.value = current

        checks = LiquidityChecks(
            sufficient_liquidity=current >= required_liquidity,
            emergency_reserve_met=current >= emergency_reserve,
            optimal_ratio=(
                params.required_liquidity_ratio <= actual_ratio <= OPTIMAL_RATIO_CEILING
            ),
            phi_aligned=phi_score >= PHI_ALIGNMENT_FLOOR,
        )
        status = (
            LiquidityStatusEnum.VALIDATED
            if checks.all_passed
            else LiquidityStatusEnum.NEEDS_ATTENTION
        )
        recommendations = liquidity_recommendations(
            checks, current, required_liquidity, params.emergency_reserve_ratio
        )

        if status is LiquidityStatusEnum.NEEDS_ATTENTION:
            failed = [name for name, passed in checks.model_dump().items() if not passed]
            logger.warning(f"Liquidity needs attention; failed checks: {failed}")
        else:
            logger.info(f"Liquidity validated at {actual_ratio:.2%} of asset value")

        return LiquidityValidationResult(
            total_asset_value=params.total_asset_value,
            current_liquidity=current,
            required_liquidity=required_liquidity,
            emergency_reserve=emergency_reserve,
            actual_liquidity_ratio=actual_ratio,
            phi_liquidity_score=phi_score,
            validations=checks,
            status=status,
            recommendations=recommendations,
        )
