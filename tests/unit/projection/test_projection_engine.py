# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math

import pytest

from phidcf.core.ledger import CashFlowLedger
from phidcf.core.primitives import DCFSettings
from phidcf.projection import ProjectionEngine, ProjectionParams

PHI_FACTOR = 0.9618034


@pytest.fixture
def projection_engine(settings: DCFSettings, ledger: CashFlowLedger) -> ProjectionEngine:
    return ProjectionEngine(settings, ledger)


class TestProjectionParams:
    def test_defaults(self):
        params = ProjectionParams()
        assert params.initial_investment == 50_000_000.0
        assert params.years == 10
        assert params.growth_rate == 0.12
        assert params.occupancy_rate == 0.92


class TestProjectionEngine:
    """Tests for the yearly yield forecast and its ledger postings."""

    def test_yearly_breakdown(self, projection_engine: ProjectionEngine):
        result = projection_engine.project(
            ProjectionParams(
                initial_investment=1_000.0, years=2, growth_rate=0.10, occupancy_rate=0.5
            )
        )

        first, second = result.yearly_projections
        assert first.year == 1
        assert first.base_yield == pytest.approx(1_100.0)
        assert first.adjusted_yield == pytest.approx(550.0)
        assert first.phi_adjusted_yield == pytest.approx(550.0 * PHI_FACTOR, rel=1e-6)
        assert second.base_yield == pytest.approx(1_210.0)
        assert second.cumulative_yield == pytest.approx(
            first.phi_adjusted_yield + second.phi_adjusted_yield
        )
        assert second.occupancy_rate == 0.5

    def test_aggregates(self, projection_engine: ProjectionEngine):
        result = projection_engine.project(ProjectionParams())

        assert result.projection_period == 10
        assert len(result.yearly_projections) == 10
        assert result.total_projected_yield == pytest.approx(869.58e6, rel=1e-3)
        assert result.total_projected_yield == pytest.approx(
            result.yearly_projections[-1].cumulative_yield
        )
        assert result.average_annual_yield == pytest.approx(
            result.total_projected_yield / 10
        )
        assert result.project_name == "Tokyo Expansion - Shinjuku Tower"

    def test_cumulative_yield_is_monotonic(self, projection_engine: ProjectionEngine):
        result = projection_engine.project(ProjectionParams())
        cumulative = [row.cumulative_yield for row in result.yearly_projections]
        assert cumulative == sorted(cumulative)

    def test_posts_phi_adjusted_yields_to_ledger(
        self, projection_engine: ProjectionEngine, ledger: CashFlowLedger
    ):
        result = projection_engine.project(ProjectionParams(years=3))

        assert [r.year for r in ledger] == [1, 2, 3]
        assert [r.amount for r in ledger] == [
            row.phi_adjusted_yield for row in result.yearly_projections
        ]

    def test_repeated_projection_accumulates(
        self, projection_engine: ProjectionEngine, ledger: CashFlowLedger
    ):
        projection_engine.project(ProjectionParams(years=10))
        projection_engine.project(ProjectionParams(years=5))

        assert len(ledger) == 15
        assert [r.year for r in ledger][10:] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("years", [0, -3])
    def test_empty_horizon(
        self, projection_engine: ProjectionEngine, ledger: CashFlowLedger, years: int
    ):
        result = projection_engine.project(ProjectionParams(years=years))

        assert result.yearly_projections == []
        assert result.total_projected_yield == 0.0
        assert result.average_annual_yield == 0.0
        assert ledger.is_empty()

    def test_negative_growth_declines(self, projection_engine: ProjectionEngine):
        result = projection_engine.project(ProjectionParams(years=3, growth_rate=-0.1))
        yields = [row.base_yield for row in result.yearly_projections]
        assert yields[0] > yields[1] > yields[2]

    def test_phi_ratio_from_settings(self, ledger: CashFlowLedger):
        engine = ProjectionEngine(DCFSettings(phi_ratio=1.0), ledger)
        result = engine.project(ProjectionParams(years=1, occupancy_rate=1.0))
        row = result.yearly_projections[0]
        assert row.phi_adjusted_yield == row.base_yield

    def test_to_frame(self, projection_engine: ProjectionEngine):
        df = projection_engine.project(ProjectionParams(years=4)).to_frame()

        assert df.index.name == "year"
        assert df.index.tolist() == [1, 2, 3, 4]
        assert "phi_adjusted_yield" in df.columns

    def test_to_frame_empty(self, projection_engine: ProjectionEngine):
        df = projection_engine.project(ProjectionParams(years=0)).to_frame()
        assert df.empty
        assert df.index.name == "year"

    def test_long_horizon_saturates_to_infinity(
        self, projection_engine: ProjectionEngine, ledger: CashFlowLedger
    ):
        result = projection_engine.project(ProjectionParams(years=7000))

        assert len(result.yearly_projections) == 7000
        assert math.isinf(result.total_projected_yield)
        assert result.total_projected_yield > 0
        assert math.isinf(result.average_annual_yield)
        assert len(ledger) == 7000
