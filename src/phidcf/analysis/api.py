# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Comprehensive Analysis API

Public entry point for running one self-contained DCF analysis on a fresh
engine. Use `DCFEngine` directly when state needs to persist across calls.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from ..core.primitives import DCFSettings
from ..liquidity import LiquidityParams
from ..projection import ProjectionParams
from .engine import DCFEngine
from .results import ComprehensiveResult

logger = logging.getLogger(__name__)


def analyze(
    projection: Union[ProjectionParams, Mapping[str, Any], None] = None,
    liquidity: Union[LiquidityParams, Mapping[str, Any], None] = None,
    settings: Optional[DCFSettings] = None,
) -> ComprehensiveResult:
    """
    Analyze one investment case and return the comprehensive result.

    Args:
        projection: Yield projection assumptions; defaults apply to omitted
            fields (50M investment, 10 years, 12% growth, 92% occupancy).
        liquidity: Liquidity position and thresholds; defaults apply to
            omitted fields (100M assets, 15M liquidity, 20% / 5% ratios).
        settings: Optional engine settings; defaults if not provided.

    Returns:
        ComprehensiveResult with projection, IRR, liquidity, NPV and verdict.
    """
    engine = DCFEngine(settings)
    logger.debug(f"Running comprehensive analysis for '{engine.settings.project_name}'")
    return engine.synthesize(projection, liquidity)
