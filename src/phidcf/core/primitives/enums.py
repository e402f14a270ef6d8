# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class RecommendationEnum(str, Enum):
    """
    Discrete investment recommendation derived from the phi-hedged IRR.

    Thresholds are applied to the decimal rate:
    - STRONG_BUY: hedged IRR above 12%
    - BUY: hedged IRR above 8% and at most 12%
    - HOLD: everything else (including undefined rates)
    """

    STRONG_BUY = "Strong Buy"
    BUY = "Buy"
    HOLD = "Hold"


class LiquidityStatusEnum(str, Enum):
    """Outcome of a liquidity validation (VALIDATED only when every check passes)."""

    VALIDATED = "VALIDATED"
    NEEDS_ATTENTION = "NEEDS_ATTENTION"


class NPVStatusEnum(str, Enum):
    """Sign of the net present value."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class ViabilityEnum(str, Enum):
    """
    Overall investment verdict.

    VIABLE requires both a positive NPV and a VALIDATED liquidity position;
    any other combination is REVIEW_NEEDED.
    """

    VIABLE = "VIABLE"
    REVIEW_NEEDED = "REVIEW_NEEDED"


class RiskLevelEnum(str, Enum):
    """Risk band from the numeric phi-hedged IRR (LOW above 12%)."""

    LOW = "LOW"
    MODERATE = "MODERATE"


def enum_to_string(value) -> str:
    """
    Convert enum values to their string representation for pandas storage.

    Examples:
        >>> enum_to_string(RecommendationEnum.STRONG_BUY)
        'Strong Buy'
        >>> enum_to_string("already_string")
        'already_string'
    """
    if isinstance(value, Enum):
        return value.value
    return str(value)
