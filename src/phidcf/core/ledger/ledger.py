# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Append-only cash flow ledger.

The ledger is the hand-off artifact between yield projection and IRR/NPV
estimation. It owns its records and builds the DataFrame view on demand,
so callers never hold a stale copy of the records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from .records import CashFlowRecord

logger = logging.getLogger(__name__)


@dataclass
class CashFlowLedger:
    """
    Ordered, append-only sequence of yearly cash flow records.

    Records accumulate across projection calls; a second projection appends
    rather than replaces. Only ``clear()`` removes records.
    """

    records: List[CashFlowRecord] = field(default_factory=list, init=False)
    _current_ledger: Optional[pd.DataFrame] = field(
        default=None, init=False, repr=False
    )
    _ledger_dirty: bool = field(default=False, init=False, repr=False)

    def add_record(self, record: CashFlowRecord) -> None:
        """Append a single record."""
        self.records.append(record)
        self._ledger_dirty = True

    def add_records(self, records: Iterable[CashFlowRecord]) -> None:
        """
        Append records in order.

        Args:
            records: Records to append
        """
        records = list(records)
        if records:
            self.records.extend(records)
            self._ledger_dirty = True

    def ledger_df(self) -> pd.DataFrame:
        """
        Get the ledger as a DataFrame with ``year`` and ``amount`` columns.

        Built lazily and cached until the next append or clear.
        """
        if self._current_ledger is None or self._ledger_dirty:
            self._current_ledger = self._to_dataframe()
            self._ledger_dirty = False

        return self._current_ledger

    def _to_dataframe(self) -> pd.DataFrame:
        if not self.records:
            return pd.DataFrame(
                {
                    "year": pd.Series(dtype="int64"),
                    "amount": pd.Series(dtype="float64"),
                }
            )

        df = pd.DataFrame(
            {
                "year": [record.year for record in self.records],
                "amount": [record.amount for record in self.records],
            }
        )
        logger.debug(f"Built ledger frame with {len(df)} cash flow records")
        return df

    def amounts(self) -> pd.Series:
        """Cash flow amounts indexed by projection year, in ledger order."""
        df = self.ledger_df()
        return pd.Series(
            df["amount"].to_numpy(), index=df["year"].to_numpy(), name="amount"
        )

    def total_amount(self) -> float:
        """Sum of all recorded amounts, accumulated in ledger order."""
        total = 0.0
        for record in self.records:
            total += record.amount
        return total

    def clear(self) -> None:
        """Remove all records and reset the cached frame."""
        self.records.clear()
        self._current_ledger = None
        self._ledger_dirty = False

    def record_count(self) -> int:
        """Get current number of cash flow records."""
        return len(self.records)

    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CashFlowRecord]:
        return iter(list(self.records))
