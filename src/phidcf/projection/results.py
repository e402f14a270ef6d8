# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Yield projection parameter and result models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pandas as pd
from pydantic import Field

from ..core.primitives import Model


class ProjectionParams(Model):
    """
    Inputs for a yield projection.

    Values are not range-checked: zero or negative years produce an empty
    projection and negative growth produces declining yields.
    """

    initial_investment: float = Field(
        default=50_000_000.0, description="Capital invested at t0."
    )
    years: int = Field(default=10, description="Number of projection years.")
    growth_rate: float = Field(
        default=0.12, description="Annual compound growth of base yield."
    )
    occupancy_rate: float = Field(
        default=0.92, description="Occupancy applied to base yield (conventionally 0-1)."
    )


class YearlyProjection(Model):
    """One year of the yield forecast."""

    year: int
    base_yield: float
    adjusted_yield: float
    phi_adjusted_yield: float
    cumulative_yield: float
    occupancy_rate: float


class YieldProjectionResult(Model):
    """
    Output of one yield projection.

    Attributes:
        project_name: Project identifier from settings
        initial_investment: Capital invested at t0
        projection_period: Requested number of years
        yearly_projections: Per-year breakdown, one entry per projected year
        total_projected_yield: Sum of phi-adjusted yields
        average_annual_yield: Total divided by the period (0.0 for empty periods)
        timestamp: When the projection ran (informational)
    """

    project_name: str
    initial_investment: float
    projection_period: int
    yearly_projections: List[YearlyProjection]
    total_projected_yield: float
    average_annual_yield: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_frame(self) -> pd.DataFrame:
        """Yearly breakdown as a DataFrame indexed by year."""
        columns = [
            "base_yield",
            "adjusted_yield",
            "phi_adjusted_yield",
            "cumulative_yield",
            "occupancy_rate",
        ]
        if not self.yearly_projections:
            return pd.DataFrame(columns=columns, index=pd.Index([], name="year"))

        df = pd.DataFrame([row.model_dump() for row in self.yearly_projections])
        return df.set_index("year")[columns]
