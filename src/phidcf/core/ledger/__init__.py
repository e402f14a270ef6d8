# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cash flow ledger shared between projection and return estimation.
"""

from .ledger import CashFlowLedger
from .records import CashFlowRecord

__all__ = [
    "CashFlowLedger",
    "CashFlowRecord",
]
