# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Yield projection: compound growth, occupancy and phi adjustment by year.
"""

from .engine import ProjectionEngine
from .results import ProjectionParams, YearlyProjection, YieldProjectionResult

__all__ = [
    "ProjectionEngine",
    "ProjectionParams",
    "YearlyProjection",
    "YieldProjectionResult",
]
