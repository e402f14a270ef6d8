# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for parameters, settings and results. Mutable runtime
    state (ledger, liquidity pool) lives on the engine, outside of models.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; runtime mutable state lives in the engine
        extra="forbid",  # Catches typos in parameter and override names immediately
    )
