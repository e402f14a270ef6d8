# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stateful DCF engine facade.

The engine owns its settings, cash flow ledger and liquidity pool, wires the
four components around them, and serializes access with a re-entrant lock
so a projection and the IRR read that depends on it cannot interleave with
another caller's calls.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from ..core.ledger import CashFlowLedger
from ..core.primitives import DCFSettings, Model
from ..liquidity import (
    LiquidityParams,
    LiquidityPool,
    LiquidityValidationResult,
    LiquidityValidator,
)
from ..projection import ProjectionEngine, ProjectionParams, YieldProjectionResult
from ..returns import IRRAnalysisResult, IRREstimator
from .results import ComprehensiveResult, EngineState
from .synthesizer import DCFSynthesizer

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=Model)


def _coerce_params(
    model_cls: Type[ParamsT],
    params: Union[ParamsT, Mapping[str, Any], None],
    overrides: Mapping[str, Any],
) -> ParamsT:
    """Build a params model from a model, a mapping or keyword overrides."""
    if params is None:
        return model_cls(**overrides)
    if isinstance(params, model_cls):
        if not overrides:
            return params
        return model_cls(**{**params.model_dump(), **overrides})
    return model_cls(**{**dict(params), **overrides})


class DCFEngine:
    """
    Phi-hedged DCF engine for a single investment case.

    Each engine instance exclusively owns its settings, ledger and
    liquidity pool. Standalone ``project`` calls accumulate cash flows in
    the ledger; ``synthesize`` starts every comprehensive analysis from an
    empty ledger.

    Example:
        ```python
        engine = DCFEngine(DCFSettings(discount_rate=0.10))
        engine.project(initial_investment=50_000_000, years=10)
        irr = engine.estimate_hedged_irr(50_000_000)
        print(irr.recommendation)
        ```
    """

    def __init__(self, settings: Optional[DCFSettings] = None):
        self._settings = settings if settings is not None else DCFSettings()
        self._ledger = CashFlowLedger()
        self._pool = LiquidityPool()
        self._lock = threading.RLock()

        self._projection_engine = ProjectionEngine(self._settings, self._ledger)
        self._irr_estimator = IRREstimator(self._settings, self._ledger)
        self._liquidity_validator = LiquidityValidator(self._settings, self._pool)
        self._synthesizer = DCFSynthesizer(
            self._settings,
            self._ledger,
            self._projection_engine,
            self._irr_estimator,
            self._liquidity_validator,
        )

    @property
    def settings(self) -> DCFSettings:
        """Engine configuration (immutable)."""
        return self._settings

    @property
    def ledger(self) -> CashFlowLedger:
        """The engine's cash flow ledger."""
        return self._ledger

    @property
    def liquidity_pool(self) -> float:
        """Liquidity recorded by the most recent validation (0.0 before any)."""
        return self._pool.value

    def project(
        self,
        params: Union[ProjectionParams, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> YieldProjectionResult:
        """Project yearly yields and append them to the ledger."""
        projection = _coerce_params(ProjectionParams, params, overrides)
        with self._lock:
            return self._projection_engine.project(projection)

    def estimate_hedged_irr(self, initial_investment: float) -> IRRAnalysisResult:
        """Estimate the phi-hedged IRR over the current ledger."""
        with self._lock:
            return self._irr_estimator.estimate_hedged_irr(initial_investment)

    def validate_liquidity(
        self,
        params: Union[LiquidityParams, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> LiquidityValidationResult:
        """Validate a liquidity position and record it in the liquidity pool."""
        liquidity = _coerce_params(LiquidityParams, params, overrides)
        with self._lock:
            return self._liquidity_validator.validate_liquidity(liquidity)

    def synthesize(
        self,
        projection: Union[ProjectionParams, Mapping[str, Any], None] = None,
        liquidity: Union[LiquidityParams, Mapping[str, Any], None] = None,
    ) -> ComprehensiveResult:
        """Run a self-contained comprehensive analysis (ledger is reset first)."""
        projection_params = _coerce_params(ProjectionParams, projection, {})
        liquidity_params = _coerce_params(LiquidityParams, liquidity, {})
        with self._lock:
            return self._synthesizer.synthesize(projection_params, liquidity_params)

    def inspect_state(self) -> EngineState:
        """Snapshot of configuration, ledger length and liquidity pool."""
        with self._lock:
            return EngineState(
                settings=self._settings,
                cash_flow_count=len(self._ledger),
                liquidity_pool=self._pool.value,
            )

    def reset(self) -> None:
        """Clear the ledger and zero the liquidity pool."""
        with self._lock:
            self._ledger.clear()
            self._pool.value = 0.0
            logger.debug("Engine state reset")
