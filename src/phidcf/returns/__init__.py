# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phi-hedged IRR estimation and recommendation.
"""

from .irr import IRREstimator, recommend
from .results import IRRAnalysisResult, RiskMetrics

__all__ = [
    "IRREstimator",
    "IRRAnalysisResult",
    "RiskMetrics",
    "recommend",
]
