# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core data model for the cash flow ledger.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CashFlowRecord:
    """
    Immutable record of one year's projected cash flow.

    Attributes:
        year: Projection year, 1-based and contiguous within a projection call
        amount: Phi-adjusted yield for the year (+ = inflow)
    """

    year: int
    amount: float
