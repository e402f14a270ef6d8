# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
phidcf Core Framework

Foundational building blocks for the engine: primitives, the cash flow
ledger, pure financial calculations and the error taxonomy.
"""

from . import ledger, primitives
from .calculations import FinancialCalculations
from .exceptions import DCFError, DivisionError, InvalidStateError
from .ledger import CashFlowLedger, CashFlowRecord
from .primitives import DCFSettings, Model

__all__ = [
    "ledger",
    "primitives",
    "FinancialCalculations",
    "DCFError",
    "DivisionError",
    "InvalidStateError",
    "CashFlowLedger",
    "CashFlowRecord",
    "DCFSettings",
    "Model",
]
