# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Liquidity validation parameter and result models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import Field

from ..core.primitives import LiquidityStatusEnum, Model


class LiquidityParams(Model):
    """
    Inputs for a liquidity validation.

    Ratios are decimals of total asset value. Only a zero asset value is
    rejected (at validation time); other values are taken as given.
    """

    total_asset_value: float = Field(
        default=100_000_000.0, description="Total value of the asset base."
    )
    current_liquidity: float = Field(
        default=15_000_000.0, description="Liquid capital currently available."
    )
    required_liquidity_ratio: float = Field(
        default=0.20, description="Minimum liquidity as a share of asset value."
    )
    emergency_reserve_ratio: float = Field(
        default=0.05, description="Emergency reserve floor as a share of asset value."
    )


class LiquidityChecks(Model):
    """The four independent liquidity checks."""

    sufficient_liquidity: bool
    emergency_reserve_met: bool
    optimal_ratio: bool
    phi_aligned: bool

    @property
    def all_passed(self) -> bool:
        return (
            self.sufficient_liquidity
            and self.emergency_reserve_met
            and self.optimal_ratio
            and self.phi_aligned
        )


class LiquidityValidationResult(Model):
    """
    Output of one liquidity validation.

    ``status`` is VALIDATED if and only if every check in ``validations``
    passed; ``recommendations`` is never empty.
    """

    total_asset_value: float
    current_liquidity: float
    required_liquidity: float
    emergency_reserve: float
    actual_liquidity_ratio: float
    phi_liquidity_score: float
    validations: LiquidityChecks
    status: LiquidityStatusEnum
    recommendations: List[str]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def actual_liquidity_ratio_pct(self) -> str:
        """Liquidity ratio formatted for display, e.g. '25.00%'."""
        return f"{self.actual_liquidity_ratio:.2%}"
