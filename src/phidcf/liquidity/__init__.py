# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Liquidity validation: four threshold checks, status and recommendations.
"""

from .results import LiquidityChecks, LiquidityParams, LiquidityValidationResult
from .validator import (
    ALL_VALIDATED_MESSAGE,
    LiquidityPool,
    LiquidityValidator,
    liquidity_recommendations,
)

__all__ = [
    "ALL_VALIDATED_MESSAGE",
    "LiquidityChecks",
    "LiquidityParams",
    "LiquidityPool",
    "LiquidityValidationResult",
    "LiquidityValidator",
    "liquidity_recommendations",
]
