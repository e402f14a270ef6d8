# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phi-hedged IRR result models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from ..core.primitives import Model, RecommendationEnum


class RiskMetrics(Model):
    """Risk-adjusted ratios based on assumed (not measured) volatility."""

    sharpe_ratio: float
    sortino_ratio: float
    volatility: float = Field(default=0.15, description="Assumed volatility.")
    downside_deviation: float = Field(
        default=0.10, description="Assumed downside deviation."
    )


class IRRAnalysisResult(Model):
    """
    Output of one phi-hedged IRR estimation.

    Rates are decimals (0.1321 = 13.21%). ``recommendation`` is derived from
    ``phi_hedged_irr``; ``reference_irr`` is informational only.
    """

    base_irr: float
    phi_hedged_irr: float
    phi_ratio: float
    hedge_factor: float
    risk_metrics: RiskMetrics
    recommendation: RecommendationEnum
    cash_flow_count: int
    reference_irr: Optional[float] = Field(
        default=None,
        description="True periodic IRR of the same flows, when solvable.",
    )
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def base_irr_pct(self) -> str:
        """Base IRR formatted for display, e.g. '12.34%'."""
        return f"{self.base_irr:.2%}"

    @property
    def phi_hedged_irr_pct(self) -> str:
        """Hedged IRR formatted for display, e.g. '13.48%'."""
        return f"{self.phi_hedged_irr:.2%}"
