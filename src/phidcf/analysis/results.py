# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Comprehensive DCF analysis result models.

These models carry no calculation logic; the synthesizer computes every
value and the models only hold and present it.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pandas as pd
from pydantic import Field

from ..core.primitives import (
    DCFSettings,
    Model,
    NPVStatusEnum,
    RiskLevelEnum,
    ViabilityEnum,
    enum_to_string,
)
from ..liquidity import LiquidityValidationResult
from ..projection import YieldProjectionResult
from ..returns import IRRAnalysisResult


class NPVResult(Model):
    """Net present value of the synthesized cash flows."""

    value: float
    discount_rate: float
    status: NPVStatusEnum

    @property
    def formatted(self) -> str:
        """NPV in millions for display, e.g. '$12.34M'."""
        return f"${self.value / 1_000_000:.2f}M"

    @property
    def discount_rate_pct(self) -> str:
        """Discount rate for display, e.g. '8%'."""
        return f"{self.discount_rate * 100:g}%"


class OverallAssessment(Model):
    """Final verdict combining NPV, liquidity status and hedged IRR."""

    investment_viability: ViabilityEnum
    risk_level: RiskLevelEnum
    phi_alignment: str = Field(
        default="OPTIMIZED", description="Fixed annotation; not computed from data."
    )


class DCFAnalysis(Model):
    """The component results of one synthesis."""

    yield_projection: YieldProjectionResult
    irr_analysis: IRRAnalysisResult
    liquidity_validation: LiquidityValidationResult
    npv: NPVResult


class ComprehensiveResult(Model):
    """
    Aggregate of one comprehensive DCF analysis.

    Attributes:
        project_name: Project identifier from settings
        location: Location label from settings
        analysis: Projection, IRR, liquidity and NPV results
        overall_assessment: Viability verdict and risk level
        timestamp: When the synthesis ran (informational)
    """

    project_name: str
    location: str
    analysis: DCFAnalysis
    overall_assessment: OverallAssessment
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> pd.Series:
        """Headline metrics as a labelled Series, for tabular reporting."""
        analysis = self.analysis
        return pd.Series(
            {
                "project_name": self.project_name,
                "location": self.location,
                "total_projected_yield": analysis.yield_projection.total_projected_yield,
                "base_irr": analysis.irr_analysis.base_irr,
                "phi_hedged_irr": analysis.irr_analysis.phi_hedged_irr,
                "recommendation": enum_to_string(analysis.irr_analysis.recommendation),
                "liquidity_status": enum_to_string(analysis.liquidity_validation.status),
                "npv": analysis.npv.value,
                "npv_status": enum_to_string(analysis.npv.status),
                "investment_viability": enum_to_string(
                    self.overall_assessment.investment_viability
                ),
                "risk_level": enum_to_string(self.overall_assessment.risk_level),
            },
            name=self.project_name,
        )


class EngineState(Model):
    """Snapshot of a DCF engine's configuration and mutable state."""

    settings: DCFSettings
    cash_flow_count: int
    liquidity_pool: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
