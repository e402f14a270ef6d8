# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
phidcf - Phi-Hedged Discounted Cash Flow Engine

Deterministic projection engine for a single real estate investment case:
yield forecast, phi-hedged IRR, liquidity validation and an NPV-based
investment verdict.

Key Entry Points:
- phidcf.analysis.analyze() - One self-contained comprehensive analysis
- phidcf.analysis.DCFEngine - Stateful engine owning ledger and liquidity pool
- phidcf.core.primitives.DCFSettings - Engine configuration

Example Usage:
    ```python
    from phidcf.analysis import DCFEngine

    engine = DCFEngine()
    result = engine.synthesize(
        projection={"initial_investment": 50_000_000, "years": 10},
        liquidity={"total_asset_value": 100_000_000, "current_liquidity": 25_000_000},
    )
    print(result.overall_assessment.investment_viability)
    ```
"""

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "liquidity",
    "projection",
    "returns",
]


_LAZY_MODULES = {
    "analysis": "phidcf.analysis",
    "core": "phidcf.core",
    "liquidity": "phidcf.liquidity",
    "projection": "phidcf.projection",
    "returns": "phidcf.returns",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'phidcf' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
