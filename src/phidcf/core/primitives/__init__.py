# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
phidcf Core Primitives

Essential building blocks shared by every engine component: the immutable
model base, settings, enums and constrained numeric types.
"""

from .enums import (
    LiquidityStatusEnum,
    NPVStatusEnum,
    RecommendationEnum,
    RiskLevelEnum,
    ViabilityEnum,
    enum_to_string,
)
from .model import Model
from .settings import GOLDEN_RATIO, DCFSettings
from .types import FloatBetween0And1Exclusive, PositiveFloat

__all__ = [
    # Core models
    "Model",
    # Settings
    "DCFSettings",
    "GOLDEN_RATIO",
    # Enums
    "LiquidityStatusEnum",
    "NPVStatusEnum",
    "RecommendationEnum",
    "RiskLevelEnum",
    "ViabilityEnum",
    "enum_to_string",
    # Types
    "FloatBetween0And1Exclusive",
    "PositiveFloat",
]
