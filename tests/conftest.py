# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for phidcf testing.

This module provides convenient utilities for creating engines and
parameter sets without repeating the default investment case.
"""

from __future__ import annotations

import pytest

from phidcf.analysis import DCFEngine
from phidcf.core.ledger import CashFlowLedger
from phidcf.core.primitives import DCFSettings
from phidcf.liquidity import LiquidityParams
from phidcf.projection import ProjectionParams


# Parameter Utilities
def create_projection_params(
    initial_investment: float = 50_000_000.0,
    years: int = 10,
    growth_rate: float = 0.12,
    occupancy_rate: float = 0.92,
) -> ProjectionParams:
    """
    Create projection parameters for testing.

    Example:
        >>> params = create_projection_params(years=5)
        >>> params.years
        5
    """
    return ProjectionParams(
        initial_investment=initial_investment,
        years=years,
        growth_rate=growth_rate,
        occupancy_rate=occupancy_rate,
    )


def create_liquidity_params(
    total_asset_value: float = 100_000_000.0,
    current_liquidity: float = 25_000_000.0,
    required_liquidity_ratio: float = 0.20,
    emergency_reserve_ratio: float = 0.05,
) -> LiquidityParams:
    """
    Create liquidity parameters for testing.

    Defaults describe a position that passes every check (25% of assets).
    """
    return LiquidityParams(
        total_asset_value=total_asset_value,
        current_liquidity=current_liquidity,
        required_liquidity_ratio=required_liquidity_ratio,
        emergency_reserve_ratio=emergency_reserve_ratio,
    )


@pytest.fixture
def settings() -> DCFSettings:
    return DCFSettings()


@pytest.fixture
def ledger() -> CashFlowLedger:
    return CashFlowLedger()


@pytest.fixture
def engine(settings: DCFSettings) -> DCFEngine:
    return DCFEngine(settings)


@pytest.fixture
def projected_engine(engine: DCFEngine) -> DCFEngine:
    """Engine with the default ten-year projection already in its ledger."""
    engine.project(create_projection_params())
    return engine
